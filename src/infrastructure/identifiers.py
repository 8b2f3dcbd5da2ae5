"""
infrastructure.identifiers - Wall clock and history record ids.

Ids have the form "<prefix>-<epoch ms>". A second id requested for the
same prefix within the same millisecond gets a counter suffix
("meal-1700000000000-1"), so ids never repeat within a process.
"""

from __future__ import annotations

import time


class SystemClock:
    """Implements Clock with the system wall clock."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class TimestampIdGenerator:
    """Implements IdGenerator: prefix + timestamp, plus a same-ms counter."""

    def __init__(self):
        self._last: dict[str, tuple[int, int]] = {}

    def new_id(self, prefix: str, timestamp_ms: int) -> str:
        if prefix in self._last:
            last_ms, count = self._last[prefix]
            if timestamp_ms <= last_ms:
                # Same millisecond, or the clock went back: keep counting
                count += 1
                self._last[prefix] = (last_ms, count)
                return f"{prefix}-{last_ms}-{count}"

        self._last[prefix] = (timestamp_ms, 0)
        return f"{prefix}-{timestamp_ms}"
