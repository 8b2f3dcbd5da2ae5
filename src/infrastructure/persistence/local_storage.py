"""
infrastructure.persistence.local_storage - Key/value storage.

Implements KeyValueStore port, the server-side equivalent of browser
local storage: string keys mapped to (JSON-encoded) string values.

    InMemoryKeyValueStore   - dict backed, lost on restart
    JsonFileKeyValueStore   - one JSON object on disk, rewritten on each change
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore:
    """KeyValueStore persisted as a single JSON object file.

    An unreadable file is treated as empty (and overwritten on the next
    write), the same way a browser discards unusable storage.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: not a JSON object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(items, indent=2), encoding="utf-8")
