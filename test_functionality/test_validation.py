"""
Test plan request validation
"""
import pytest

from domain.exceptions import PlanValidationError
from domain.models import ActivityLevel, Gender
from application.validation import build_metrics, validate_plan_request


def valid_fields(**overrides) -> dict:
    fields = {
        "height": "180cm",
        "weight": "75kg",
        "age": "30",
        "gender": "male",
        "activityLevel": "moderate",
    }
    fields.update(overrides)
    return fields


def test_valid_request_has_no_errors():
    assert validate_plan_request(valid_fields(), "lose 5kg") == {}


def test_build_metrics_returns_typed_metrics():
    metrics = build_metrics(valid_fields(activityLevel="very_active"), "lose 5kg")

    assert metrics.height == "180cm"
    assert metrics.weight == "75kg"
    assert metrics.age == "30"
    assert metrics.gender is Gender.MALE
    assert metrics.activity_level is ActivityLevel.VERY_ACTIVE


@pytest.mark.parametrize("age, message", [
    ("", "Age is required."),
    ("0", "Please enter a realistic age (1-120)."),
    ("121", "Please enter a realistic age (1-120)."),
    ("abc", "Please enter a realistic age (1-120)."),
])
def test_age_errors(age, message):
    errors = validate_plan_request(valid_fields(age=age), "goal")

    assert errors == {"age": message}


@pytest.mark.parametrize("age", ["1", "120", "45 years"])
def test_age_boundaries_accepted(age):
    assert validate_plan_request(valid_fields(age=age), "goal") == {}


@pytest.mark.parametrize("field", ["height", "weight"])
def test_height_and_weight_required(field):
    errors = validate_plan_request(valid_fields(**{field: "   "}), "goal")

    assert errors == {field: f"{field.capitalize()} is required."}


@pytest.mark.parametrize("value", ["-5", "0", "tall", "kg 70"])
def test_height_must_be_positive_number(value):
    errors = validate_plan_request(valid_fields(height=value), "goal")

    assert errors == {"height": "Please enter a valid positive number for height."}


@pytest.mark.parametrize("value", ["5'11", "1.8 m", "6e1"])
def test_height_leading_number_is_enough(value):
    assert validate_plan_request(valid_fields(height=value), "goal") == {}


def test_enum_fields_must_be_known_values():
    errors = validate_plan_request(valid_fields(gender="", activityLevel="extreme"), "goal")

    assert errors == {
        "gender": "Please select your gender.",
        "activityLevel": "Please select your activity level.",
    }


def test_blank_goal_rejected():
    assert validate_plan_request(valid_fields(), "  ") == {"goal": "Please describe your goal."}


def test_build_metrics_reports_every_failing_field():
    with pytest.raises(PlanValidationError) as info:
        build_metrics({}, "")

    assert set(info.value.errors) == {"age", "height", "weight", "gender", "activityLevel", "goal"}
