"""
Shared FastAPI dependencies.

- get_factory(): returns the initialized ServiceFactory (set at startup).
- get_current_user(): the active session user, 401 when logged out.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, status

from domain.models import User
from factory import ServiceFactory

# Module-level reference set by app lifespan
_factory: ServiceFactory | None = None


def set_factory(factory: ServiceFactory) -> None:
    global _factory
    _factory = factory


def get_factory() -> ServiceFactory:
    if _factory is None:
        raise RuntimeError("ServiceFactory not initialized.")
    return _factory


async def get_current_user(
    factory: ServiceFactory = Depends(get_factory),
) -> User:
    """Return the signed-in user. Raises 401 when nobody is signed in."""
    user = factory.session.current_user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in.",
        )
    return user
