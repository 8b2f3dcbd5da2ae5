"""
application.dto - Data Transfer Objects for service input.

These are the structured requests that adapters (REST endpoints, tests)
hand to the application services.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegisterRequest:
    """Input for user registration."""
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginRequest:
    """Input for user login."""
    email: str
    password: str
