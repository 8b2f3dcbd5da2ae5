"""
domain.entities - Persistence-aware types (have IDs, timestamps).

History records are created by the AI gateway after a successful call and
never mutated afterwards. Timestamps are epoch milliseconds, ids come from
the IdGenerator port.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from domain.models import NutritionalInfo, PersonalizedPlan, UserMetrics


@dataclass(frozen=True)
class MealHistoryItem:
    """One meal-image analysis."""
    id: str
    timestamp: int
    nutritional_info: NutritionalInfo
    image_data_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "nutritionalInfo": self.nutritional_info.to_dict(),
            "imageDataUrl": self.image_data_url,
        }


@dataclass(frozen=True)
class PlanHistoryItem:
    """One generated plan together with the request that produced it."""
    id: str
    timestamp: int
    plan: PersonalizedPlan
    metrics: UserMetrics
    goal: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "plan": self.plan.to_dict(),
            "metrics": self.metrics.to_dict(),
            "goal": self.goal,
        }


@dataclass
class HistoryData:
    """Meals and plans, newest first."""
    meals: list[MealHistoryItem] = field(default_factory=list)
    plans: list[PlanHistoryItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "meals": [m.to_dict() for m in self.meals],
            "plans": [p.to_dict() for p in self.plans],
        }
