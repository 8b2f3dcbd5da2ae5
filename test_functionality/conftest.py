"""
Shared fixtures for the test suite.

- FakeGenerator stands in for the generative-AI service: it returns canned
  response texts in order and records every request it receives.
- settings/factory are built with zero simulated latency and in-memory
  storage.
"""
import json
import os
import sys
from pathlib import Path

import pytest

src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from domain.exceptions import GenerationError
from domain.models import WEEKDAYS, ActivityLevel, Gender, UserMetrics
from factory import ServiceFactory
from infrastructure.config import Settings
from infrastructure.persistence.local_storage import InMemoryKeyValueStore


def nutrition_payload(**overrides) -> dict:
    payload = {
        "foodItems": ["grilled chicken", "brown rice", "broccoli"],
        "macros": {"calories": 540, "protein": 42, "carbohydrates": 55, "fat": 14},
        "vitamins": [{"name": "Vitamin C", "amount": "80mg"}],
        "minerals": [{"name": "Iron", "amount": "2mg"}],
        "summary": "A balanced, protein-rich plate.",
    }
    payload.update(overrides)
    return payload


def plan_payload(**overrides) -> dict:
    payload = {
        "summary": "A gentle calorie deficit with three strength days.",
        "mealPlan": {
            day: {
                "breakfast": f"{day} oats",
                "lunch": f"{day} salad",
                "dinner": f"{day} salmon",
                **({"snacks": "apple"} if day != "Sunday" else {}),
            }
            for day in WEEKDAYS
        },
        "workoutPlan": {day: f"{day}: 30 min brisk walk" for day in WEEKDAYS},
    }
    payload.update(overrides)
    return payload


class FakeGenerator:
    """StructuredGeneratorPort fake with scripted responses."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self.calls = []

    def queue(self, response) -> None:
        self._responses.append(response)

    async def generate(self, prompt, schema, image_base64=None, mime_type=None):
        self.calls.append({
            "prompt": prompt,
            "schema": schema,
            "image_base64": image_base64,
            "mime_type": mime_type,
        })
        if not self._responses:
            raise GenerationError("No scripted response left.")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return json.dumps(response)
        return response


@pytest.fixture
def metrics() -> UserMetrics:
    return UserMetrics(
        height="180cm",
        weight="75kg",
        age="30",
        gender=Gender.MALE,
        activity_level=ActivityLevel.MODERATE,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        project_root=tmp_path,
        storage_path="",
        history_delay_ms=0,
        auth_delay_ms=0,
        google_login_delay_ms=0,
    )


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def factory(settings, generator, store) -> ServiceFactory:
    return ServiceFactory(settings, generator=generator, store=store)
