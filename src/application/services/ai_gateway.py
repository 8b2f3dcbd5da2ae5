"""
application.services.ai_gateway - Meal analysis, plan generation, history.

Translates the two application-level requests into schema-constrained
calls against the generative-AI service and records successful results:

    1. Build the fixed prompt/schema pair for the request
    2. Call the model through StructuredGeneratorPort
    3. Parse + validate the JSON response (application.contracts)
    4. Prepend a history record to the HistoryRepository

Any failure in 2 or 3 surfaces as GenerationError; nothing is written to
history and nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging

from domain.entities import HistoryData, MealHistoryItem, PlanHistoryItem
from domain.models import NutritionalInfo, PersonalizedPlan, UserMetrics
from domain.ports import Clock, HistoryRepository, IdGenerator, StructuredGeneratorPort
from application.contracts import (
    NUTRITIONAL_INFO_SCHEMA,
    PERSONALIZED_PLAN_SCHEMA,
    parse_nutritional_info,
    parse_personalized_plan,
)
from application.prompts import MEAL_ANALYSIS_INSTRUCTION, build_plan_prompt

logger = logging.getLogger(__name__)


class AIGatewayService:
    """Front door for the presentation layer: four async operations."""

    def __init__(
        self,
        generator: StructuredGeneratorPort,
        history_repo: HistoryRepository,
        id_generator: IdGenerator,
        clock: Clock,
        history_delay_ms: int = 500,
    ):
        self._generator = generator
        self._history_repo = history_repo
        self._ids = id_generator
        self._clock = clock
        self._history_delay = history_delay_ms / 1000

    async def analyze_meal_image(self, image_base64: str, mime_type: str) -> NutritionalInfo:
        """Estimate the nutritional content of a meal photo.

        Args:
            image_base64: Base64-encoded image bytes.
            mime_type:    Media type of the image, e.g. "image/jpeg".

        Returns:
            NutritionalInfo parsed from the model's JSON response.

        Raises:
            GenerationError: The call failed or the response was unusable.
        """
        logger.info("Analyzing meal image (%s, %d base64 chars)", mime_type, len(image_base64))
        text = await self._generator.generate(
            MEAL_ANALYSIS_INSTRUCTION,
            NUTRITIONAL_INFO_SCHEMA,
            image_base64=image_base64,
            mime_type=mime_type,
        )
        analysis = parse_nutritional_info(text)

        now = self._clock.now_ms()
        item = MealHistoryItem(
            id=self._ids.new_id("meal", now),
            timestamp=now,
            nutritional_info=analysis,
            image_data_url=f"data:{mime_type};base64,{image_base64}",
        )
        await self._history_repo.append_meal(item)
        logger.info("Recorded meal analysis %s (%d food items)", item.id, len(analysis.food_items))
        return analysis

    async def generate_personalized_plan(self, metrics: UserMetrics, goal: str) -> PersonalizedPlan:
        """Generate a 7-day meal and workout plan.

        The metrics are expected to be validated by the caller
        (see application.validation); no checks are repeated here.
        """
        logger.info(
            "Generating plan (activity=%s, goal=%.60r)",
            metrics.activity_level.value, goal,
        )
        text = await self._generator.generate(
            build_plan_prompt(metrics, goal),
            PERSONALIZED_PLAN_SCHEMA,
        )
        plan = parse_personalized_plan(text)

        now = self._clock.now_ms()
        item = PlanHistoryItem(
            id=self._ids.new_id("plan", now),
            timestamp=now,
            plan=plan,
            metrics=metrics,
            goal=goal,
        )
        await self._history_repo.append_plan(item)
        logger.info("Recorded plan %s", item.id)
        return plan

    async def get_history(self) -> HistoryData:
        """Return a copy of all meals and plans, newest first."""
        await asyncio.sleep(self._history_delay)
        return await self._history_repo.get()

    async def clear_history(self) -> None:
        """Drop every meal and plan. Safe to call repeatedly."""
        await asyncio.sleep(self._history_delay)
        await self._history_repo.clear()
        logger.info("History cleared")
