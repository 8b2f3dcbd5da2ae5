"""
Test AI response contracts

Parsing + shape validation of raw model output.
"""
import json

import pytest

from conftest import nutrition_payload, plan_payload
from domain.exceptions import GenerationError, ResponseSchemaError
from domain.models import WEEKDAYS
from application.contracts import (
    PERSONALIZED_PLAN_SCHEMA,
    parse_nutritional_info,
    parse_personalized_plan,
)


def test_plan_schema_requires_all_weekdays():
    for section in ("mealPlan", "workoutPlan"):
        schema = PERSONALIZED_PLAN_SCHEMA["properties"][section]
        assert schema["required"] == list(WEEKDAYS)
        assert list(schema["properties"]) == list(WEEKDAYS)


def test_parse_accepts_markdown_fenced_json():
    text = "```json\n" + json.dumps(nutrition_payload()) + "\n```"

    info = parse_nutritional_info(text)

    assert info.food_items[0] == "grilled chicken"


def test_nutritional_info_round_trips_to_wire_shape():
    payload = nutrition_payload()

    info = parse_nutritional_info(json.dumps(payload))

    assert info.to_dict() == payload


def test_plan_snacks_are_optional():
    plan = parse_personalized_plan(json.dumps(plan_payload()))

    assert plan.meal_plan["Sunday"].snacks is None
    assert "snacks" not in plan.to_dict()["mealPlan"]["Sunday"]
    assert plan.to_dict()["mealPlan"]["Monday"]["snacks"] == "apple"


@pytest.mark.parametrize("text", ["", "[]", "null", '{"foodItems": "rice"}'])
def test_unusable_meal_responses_raise(text):
    with pytest.raises(ResponseSchemaError):
        parse_nutritional_info(text)


def test_non_numeric_macro_is_schema_error():
    payload = nutrition_payload(macros={"calories": "lots", "protein": 1, "carbohydrates": 1, "fat": 1})

    with pytest.raises(ResponseSchemaError):
        parse_nutritional_info(json.dumps(payload))


@pytest.mark.parametrize("macros", [
    {"calories": "540", "protein": 42, "carbohydrates": 55, "fat": 14},
    {"calories": 540, "protein": True, "carbohydrates": 55, "fat": 14},
])
def test_coercible_macros_are_schema_errors(macros):
    with pytest.raises(ResponseSchemaError):
        parse_nutritional_info(json.dumps(nutrition_payload(macros=macros)))


def test_integer_macros_are_accepted_as_numbers():
    info = parse_nutritional_info(json.dumps(nutrition_payload()))

    assert info.macros.calories == 540


def test_schema_error_is_a_generation_error():
    with pytest.raises(GenerationError):
        parse_personalized_plan(json.dumps({"summary": "only a summary"}))
