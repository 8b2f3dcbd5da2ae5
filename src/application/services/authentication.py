"""
application.services.authentication - Mock registration and login.

Stands in for a real identity provider using the registered-user list of
a UserDirectory. There is no password storage: the password given at
login is handed to a CredentialVerifier, and the shipped
AcceptAnyPasswordVerifier accepts everything. Swap the verifier to add
real credential checks without touching callers.

Every path sleeps first to mimic a network round trip.
"""

from __future__ import annotations

import asyncio
import logging

from domain.models import User
from domain.ports import CredentialVerifier, UserDirectory
from domain.exceptions import AccountNotFoundError, AuthenticationError, DuplicateAccountError
from application.dto import RegisterRequest, LoginRequest

logger = logging.getLogger(__name__)

DEMO_USER = User(name="Demo User", email="demo@google.com")


class AcceptAnyPasswordVerifier:
    """CredentialVerifier that never rejects a password."""

    def verify(self, user: User, password: str) -> bool:
        return True


class AuthenticationService:
    """Handles registration, login, and the simulated Google sign-in."""

    def __init__(
        self,
        user_directory: UserDirectory,
        verifier: CredentialVerifier,
        auth_delay_ms: int = 1000,
        google_login_delay_ms: int = 500,
    ):
        self._users = user_directory
        self._verifier = verifier
        self._auth_delay = auth_delay_ms / 1000
        self._google_delay = google_login_delay_ms / 1000

    async def register(self, request: RegisterRequest) -> User:
        """Add a new user to the directory and return it."""
        await asyncio.sleep(self._auth_delay)

        if not request.name or not request.email or not request.password:
            raise AuthenticationError("Please fill all fields.")

        if self._users.find_by_email(request.email) is not None:
            raise DuplicateAccountError("An account with this email already exists.")

        user = User(name=request.name, email=request.email)
        self._users.add(user)
        logger.info("Registered user '%s'", user.email)
        return user

    async def login(self, request: LoginRequest) -> User:
        """Return the registered user for the given email."""
        await asyncio.sleep(self._auth_delay)

        if not request.email or not request.password:
            raise AuthenticationError("Please enter email and password.")

        user = self._users.find_by_email(request.email)
        if user is None:
            raise AccountNotFoundError("No account found with that email. Please register.")

        if not self._verifier.verify(user, request.password):
            raise AuthenticationError("Invalid email or password.")

        logger.info("User '%s' logged in", user.email)
        return user

    async def google_login(self) -> User:
        """Simulated Google OAuth: always succeeds with the demo user."""
        await asyncio.sleep(self._google_delay)
        logger.info("Simulated Google sign-in as '%s'", DEMO_USER.email)
        return DEMO_USER
