"""
domain.models - Value objects exchanged with the generative-AI service.

These are immutable data containers with no business logic and no
dependencies on infrastructure (no LangChain, no FastAPI, no storage).

Field names are snake_case in Python. to_dict()/from_dict() translate to
and from the camelCase JSON shape the AI service and the web client use
(foodItems, mealPlan, workoutPlan, activityLevel).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


WEEKDAYS: tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class User:
    """Session user. Identity key is the email address."""
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(name=data["name"], email=data["email"])


# ---------------------------------------------------------------------------
# User Metrics
# ---------------------------------------------------------------------------

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @property
    def label(self) -> str:
        """Human-readable form used in prompts ("very active")."""
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class UserMetrics:
    """Personal metrics for one plan-generation request.

    height and weight are free text ("180cm", "75kg"); age is a
    numeric-parseable string. Validation happens before construction,
    see application.validation.
    """
    height: str
    weight: str
    age: str
    gender: Gender
    activity_level: ActivityLevel

    def to_dict(self) -> dict[str, Any]:
        return {
            "height": self.height,
            "weight": self.weight,
            "age": self.age,
            "gender": self.gender.value,
            "activityLevel": self.activity_level.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserMetrics:
        return cls(
            height=data["height"],
            weight=data["weight"],
            age=data["age"],
            gender=Gender(data["gender"]),
            activity_level=ActivityLevel(data["activityLevel"]),
        )


# ---------------------------------------------------------------------------
# Nutritional Info (meal image analysis)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Macros:
    """Estimated totals: calories in kcal, the rest in grams."""
    calories: float
    protein: float
    carbohydrates: float
    fat: float


@dataclass(frozen=True)
class Nutrient:
    """A vitamin or mineral with its amount and unit, e.g. ("Iron", "2mg")."""
    name: str
    amount: str


@dataclass(frozen=True)
class NutritionalInfo:
    food_items: list[str] = field(default_factory=list)
    macros: Macros = field(default_factory=lambda: Macros(0, 0, 0, 0))
    vitamins: list[Nutrient] = field(default_factory=list)
    minerals: list[Nutrient] = field(default_factory=list)
    summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "foodItems": list(self.food_items),
            "macros": {
                "calories": self.macros.calories,
                "protein": self.macros.protein,
                "carbohydrates": self.macros.carbohydrates,
                "fat": self.macros.fat,
            },
            "vitamins": [{"name": v.name, "amount": v.amount} for v in self.vitamins],
            "minerals": [{"name": m.name, "amount": m.amount} for m in self.minerals],
            "summary": self.summary,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NutritionalInfo:
        macros = data["macros"]
        return cls(
            food_items=list(data["foodItems"]),
            macros=Macros(
                calories=macros["calories"],
                protein=macros["protein"],
                carbohydrates=macros["carbohydrates"],
                fat=macros["fat"],
            ),
            vitamins=[Nutrient(v["name"], v["amount"]) for v in data["vitamins"]],
            minerals=[Nutrient(m["name"], m["amount"]) for m in data["minerals"]],
            summary=data["summary"],
        )


# ---------------------------------------------------------------------------
# Personalized Plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DailyMeals:
    breakfast: str
    lunch: str
    dinner: str
    snacks: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {"breakfast": self.breakfast, "lunch": self.lunch, "dinner": self.dinner}
        if self.snacks is not None:
            data["snacks"] = self.snacks
        return data


@dataclass(frozen=True)
class PersonalizedPlan:
    """A 7-day meal and workout plan.

    meal_plan and workout_plan are keyed by the names in WEEKDAYS, in
    that order.
    """
    summary: str
    meal_plan: dict[str, DailyMeals] = field(default_factory=dict)
    workout_plan: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "mealPlan": {day: meals.to_dict() for day, meals in self.meal_plan.items()},
            "workoutPlan": dict(self.workout_plan),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PersonalizedPlan:
        meal_plan = data["mealPlan"]
        workout_plan = data["workoutPlan"]
        return cls(
            summary=data["summary"],
            meal_plan={
                day: DailyMeals(
                    breakfast=meal_plan[day]["breakfast"],
                    lunch=meal_plan[day]["lunch"],
                    dinner=meal_plan[day]["dinner"],
                    snacks=meal_plan[day].get("snacks"),
                )
                for day in WEEKDAYS
            },
            workout_plan={day: workout_plan[day] for day in WEEKDAYS},
        )
