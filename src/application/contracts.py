"""
application.contracts - Request/response contracts with the AI service.

Each contract pairs:
    - a JSON schema sent to the model to constrain its output, and
    - a pydantic model the returned JSON is validated against before it
      is turned into a domain object.

A response that is not JSON, or does not have the expected shape, raises
ResponseSchemaError. Nothing the model returns is trusted unvalidated.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from domain.exceptions import ResponseSchemaError
from domain.models import WEEKDAYS, NutritionalInfo, PersonalizedPlan

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# JSON schemas (sent to the model)
# ---------------------------------------------------------------------------

def _nutrient_list(kind: str, example: str) -> dict[str, Any]:
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": f"Name of the {kind}."},
                "amount": {
                    "type": "string",
                    "description": f"Amount of the {kind} with units (e.g., '{example}').",
                },
            },
            "required": ["name", "amount"],
        },
        "description": f"List of significant {kind}s found in the meal.",
    }


NUTRITIONAL_INFO_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "foodItems": {
            "type": "array",
            "items": {"type": "string"},
            "description": "List of identified food items in the meal.",
        },
        "macros": {
            "type": "object",
            "properties": {
                "calories": {"type": "number", "description": "Estimated total calories in kcal."},
                "protein": {"type": "number", "description": "Estimated total protein in grams."},
                "carbohydrates": {"type": "number", "description": "Estimated total carbohydrates in grams."},
                "fat": {"type": "number", "description": "Estimated total fat in grams."},
            },
            "required": ["calories", "protein", "carbohydrates", "fat"],
        },
        "vitamins": _nutrient_list("vitamin", "150mcg"),
        "minerals": _nutrient_list("mineral", "2mg"),
        "summary": {
            "type": "string",
            "description": "A brief, encouraging summary of the meal's nutritional value.",
        },
    },
    "required": ["foodItems", "macros", "vitamins", "minerals", "summary"],
}

_MEAL_OBJECT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "breakfast": {"type": "string"},
        "lunch": {"type": "string"},
        "dinner": {"type": "string"},
        "snacks": {"type": "string", "description": "Optional snacks for the day."},
    },
    "required": ["breakfast", "lunch", "dinner"],
}

PERSONALIZED_PLAN_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {
            "type": "string",
            "description": "A brief, encouraging summary of the overall plan tailored to the user's goal.",
        },
        "mealPlan": {
            "type": "object",
            "properties": {day: _MEAL_OBJECT_SCHEMA for day in WEEKDAYS},
            "required": list(WEEKDAYS),
            "description": "A 7-day meal plan.",
        },
        "workoutPlan": {
            "type": "object",
            "properties": {
                day: {
                    "type": "string",
                    "description": (
                        "Workout for Sunday or rest day." if day == "Sunday"
                        else f"Workout for {day}."
                    ),
                }
                for day in WEEKDAYS
            },
            "required": list(WEEKDAYS),
            "description": "A 7-day workout plan.",
        },
    },
    "required": ["summary", "mealPlan", "workoutPlan"],
}


# ---------------------------------------------------------------------------
# Validation models (applied to the model's output)
# ---------------------------------------------------------------------------

class _NutrientOut(BaseModel):
    name: str
    amount: str


class _MacrosOut(BaseModel):
    calories: float
    protein: float
    carbohydrates: float
    fat: float


class NutritionalInfoOut(BaseModel):
    foodItems: list[str]
    macros: _MacrosOut
    vitamins: list[_NutrientOut]
    minerals: list[_NutrientOut]
    summary: str


class _DailyMealsOut(BaseModel):
    breakfast: str
    lunch: str
    dinner: str
    snacks: Optional[str] = None


class _WeeklyMealsOut(BaseModel):
    # Exactly the seven weekday keys
    model_config = ConfigDict(extra="forbid")

    Monday: _DailyMealsOut
    Tuesday: _DailyMealsOut
    Wednesday: _DailyMealsOut
    Thursday: _DailyMealsOut
    Friday: _DailyMealsOut
    Saturday: _DailyMealsOut
    Sunday: _DailyMealsOut


class _WeeklyWorkoutsOut(BaseModel):
    model_config = ConfigDict(extra="forbid")

    Monday: str
    Tuesday: str
    Wednesday: str
    Thursday: str
    Friday: str
    Saturday: str
    Sunday: str


class PersonalizedPlanOut(BaseModel):
    summary: str
    mealPlan: _WeeklyMealsOut
    workoutPlan: _WeeklyWorkoutsOut


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_nutritional_info(text: str) -> NutritionalInfo:
    """Parse and validate a meal-analysis response."""
    validated = _validate(text, NutritionalInfoOut)
    return NutritionalInfo.from_dict(validated.model_dump())


def parse_personalized_plan(text: str) -> PersonalizedPlan:
    """Parse and validate a plan-generation response."""
    validated = _validate(text, PersonalizedPlanOut)
    return PersonalizedPlan.from_dict(validated.model_dump())


def _validate(text: str, model: type[BaseModel]) -> BaseModel:
    try:
        cleaned = _strip_fences(text)
        json.loads(cleaned)
    except (TypeError, json.JSONDecodeError) as e:
        logger.error("AI response is not valid JSON: %.80r", text)
        raise ResponseSchemaError("The AI service returned an unreadable response.") from e

    try:
        # Strict: no string-to-number or bool-to-number coercion
        return model.model_validate_json(cleaned, strict=True)
    except ValidationError as e:
        logger.error("AI response does not match %s: %s", model.__name__, e)
        raise ResponseSchemaError(
            "The AI service returned a response in an unexpected format."
        ) from e


def _strip_fences(text: str) -> str:
    """Remove markdown code fences some providers wrap around JSON."""
    text = text.strip()
    if text.startswith("```"):
        text = text.replace("```json", "").replace("```", "").strip()
    return text
