"""
infrastructure.persistence.history_repo - In-memory history repository.

Implements HistoryRepository port. Process-local stand-in for a backend
database: a single HistoryData shared by every caller, not partitioned
per user and not protected against concurrent writers.
"""

from __future__ import annotations

import copy
import logging

from domain.entities import HistoryData, MealHistoryItem, PlanHistoryItem

logger = logging.getLogger(__name__)


class InMemoryHistoryRepository:
    """In-memory implementation of HistoryRepository."""

    def __init__(self):
        self._data = HistoryData()

    async def get(self) -> HistoryData:
        # Callers receive a copy; mutating it never reaches the store
        return copy.deepcopy(self._data)

    async def append_meal(self, item: MealHistoryItem) -> None:
        self._data.meals.insert(0, item)

    async def append_plan(self, item: PlanHistoryItem) -> None:
        self._data.plans.insert(0, item)

    async def clear(self) -> None:
        self._data = HistoryData()
        logger.debug("History store reset")
