"""
application.services.session - Remember the active user across restarts.

The current user is stored JSON-encoded under the "user" key of a
KeyValueStore. Logging out also clears the (global, unpartitioned)
history store.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional

from domain.models import User
from domain.ports import HistoryRepository, KeyValueStore

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "user"


class SessionService:
    """Holds the active session user and keeps it in local storage."""

    def __init__(
        self,
        store: KeyValueStore,
        history_repo: HistoryRepository,
        history_delay_ms: int = 500,
    ):
        self._store = store
        self._history_repo = history_repo
        self._history_delay = history_delay_ms / 1000
        self._user: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    def restore(self) -> Optional[User]:
        """Load the persisted user, if any.

        A record that cannot be parsed is removed and the session starts
        logged out.
        """
        raw = self._store.get(CURRENT_USER_KEY)
        if raw is None:
            self._user = None
            return None
        try:
            self._user = User.from_dict(json.loads(raw))
        except (json.JSONDecodeError, TypeError, KeyError) as e:
            logger.warning("Discarding unreadable stored user: %s", e)
            self._store.remove(CURRENT_USER_KEY)
            self._user = None
            return None

        logger.info("Restored session for '%s'", self._user.email)
        return self._user

    def start(self, user: User) -> User:
        """Persist `user` and make it the active session."""
        self._store.set(CURRENT_USER_KEY, json.dumps(user.to_dict()))
        self._user = user
        return user

    async def logout(self) -> None:
        """Forget the active user and clear the history.

        The history is cleared with the same simulated latency as
        AIGatewayService.clear_history.
        """
        self._store.remove(CURRENT_USER_KEY)
        previous, self._user = self._user, None
        await asyncio.sleep(self._history_delay)
        await self._history_repo.clear()
        logger.info("Logged out '%s'", previous.email if previous else "")
