"""
application.validation - Plan request form validation.

Callers run this before AIGatewayService.generate_personalized_plan(),
which trusts its input. Numbers are read the lenient way a web form reads
them: the leading numeric part counts, so "180cm" is a height of 180 and
"30 years" an age of 30.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

from domain.exceptions import PlanValidationError
from domain.models import ActivityLevel, Gender, UserMetrics

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")

_GENDERS = {g.value for g in Gender}
_ACTIVITY_LEVELS = {a.value for a in ActivityLevel}


def leading_float(value: str) -> Optional[float]:
    match = _LEADING_FLOAT.match(value)
    return float(match.group(0)) if match else None


def leading_int(value: str) -> Optional[int]:
    match = _LEADING_INT.match(value)
    return int(match.group(0)) if match else None


def validate_plan_request(fields: Mapping[str, str], goal: str) -> dict[str, str]:
    """Check the plan form. Returns {field: message}; empty when valid.

    fields holds the raw form values under height, weight, age, gender and
    activityLevel; missing keys count as empty.
    """
    errors: dict[str, str] = {}

    age = fields.get("age", "")
    if not age:
        errors["age"] = "Age is required."
    else:
        age_num = leading_int(age)
        if age_num is None or age_num < 1 or age_num > 120:
            errors["age"] = "Please enter a realistic age (1-120)."

    for name in ("height", "weight"):
        value = fields.get(name, "")
        if not value.strip():
            errors[name] = f"{name.capitalize()} is required."
        else:
            number = leading_float(value)
            if number is None or number <= 0:
                errors[name] = f"Please enter a valid positive number for {name}."

    if fields.get("gender", "") not in _GENDERS:
        errors["gender"] = "Please select your gender."

    if fields.get("activityLevel", "") not in _ACTIVITY_LEVELS:
        errors["activityLevel"] = "Please select your activity level."

    if not goal.strip():
        errors["goal"] = "Please describe your goal."

    return errors


def build_metrics(fields: Mapping[str, str], goal: str) -> UserMetrics:
    """Validate the plan form and return UserMetrics.

    Raises:
        PlanValidationError: with every failing field.
    """
    errors = validate_plan_request(fields, goal)
    if errors:
        raise PlanValidationError(errors)
    return UserMetrics(
        height=fields["height"],
        weight=fields["weight"],
        age=fields["age"],
        gender=Gender(fields["gender"]),
        activity_level=ActivityLevel(fields["activityLevel"]),
    )
