"""
infrastructure.persistence.user_repo - Mock user database.

Implements UserDirectory port. Registered users are kept as a JSON list
of {name, email} under the "user_db" key of a KeyValueStore.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from domain.models import User
from domain.ports import KeyValueStore

logger = logging.getLogger(__name__)

USER_DB_KEY = "user_db"


class KeyValueUserDirectory:
    """UserDirectory backed by a KeyValueStore entry."""

    def __init__(self, store: KeyValueStore, key: str = USER_DB_KEY):
        self._store = store
        self._key = key

    def list_users(self) -> list[User]:
        users, _ = self._load()
        return users

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.list_users() if u.email == email), None)

    def add(self, user: User) -> None:
        users, readable = self._load()
        if not readable:
            logger.warning(
                "Replacing unreadable user database; previously stored accounts are lost"
            )
        users.append(user)
        self._store.set(self._key, json.dumps([u.to_dict() for u in users]))

    def _load(self) -> tuple[list[User], bool]:
        """Return (users, readable). Corrupt data reads as an empty list."""
        raw = self._store.get(self._key)
        if not raw:
            return [], True
        try:
            return [User.from_dict(entry) for entry in json.loads(raw)], True
        except (json.JSONDecodeError, TypeError, KeyError) as e:
            logger.warning("User database is corrupt, treating it as empty: %s", e)
            return [], False
