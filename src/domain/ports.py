"""
domain.ports - Abstract interfaces (Protocols) for all system boundaries.

These define WHAT the system needs without specifying HOW. Infrastructure
modules provide concrete implementations. Application services depend only
on these protocols, never on concrete classes.

Using typing.Protocol (structural typing) instead of ABC: any class that
implements the methods satisfies the port without explicit inheritance.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from domain.models import User
from domain.entities import HistoryData, MealHistoryItem, PlanHistoryItem


# ---------------------------------------------------------------------------
# AI Component Ports
# ---------------------------------------------------------------------------

@runtime_checkable
class StructuredGeneratorPort(Protocol):
    """Send a prompt (optionally with an inline image) to a generative model
    and return the raw text of a JSON response constrained by `schema`."""

    async def generate(
        self,
        prompt: str,
        schema: dict[str, Any],
        image_base64: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> str: ...


# ---------------------------------------------------------------------------
# Repository / Storage Ports
# ---------------------------------------------------------------------------

@runtime_checkable
class HistoryRepository(Protocol):
    """Meal and plan history, newest first."""

    async def get(self) -> HistoryData: ...
    async def append_meal(self, item: MealHistoryItem) -> None: ...
    async def append_plan(self, item: PlanHistoryItem) -> None: ...
    async def clear(self) -> None: ...


@runtime_checkable
class KeyValueStore(Protocol):
    """String key/value storage (stand-in for browser local storage)."""

    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


@runtime_checkable
class UserDirectory(Protocol):
    """The registered-user list consulted by mock authentication."""

    def list_users(self) -> list[User]: ...
    def find_by_email(self, email: str) -> Optional[User]: ...
    def add(self, user: User) -> None: ...


@runtime_checkable
class CredentialVerifier(Protocol):
    """Decide whether `password` is valid for `user`."""

    def verify(self, user: User, password: str) -> bool: ...


# ---------------------------------------------------------------------------
# Ids and time
# ---------------------------------------------------------------------------

@runtime_checkable
class Clock(Protocol):
    def now_ms(self) -> int: ...


@runtime_checkable
class IdGenerator(Protocol):
    def new_id(self, prefix: str, timestamp_ms: int) -> str: ...
