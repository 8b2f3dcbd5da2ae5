"""
application.prompts - Fixed instruction texts for the AI gateway.
"""

from __future__ import annotations

from domain.models import UserMetrics

MEAL_ANALYSIS_INSTRUCTION = (
    "Analyze the provided image of a meal. Identify all food items, and provide "
    "a detailed nutritional breakdown including macronutrients (calories, protein, "
    "carbohydrates, fat), and a list of key vitamins and minerals with their "
    "amounts. Provide a brief, encouraging summary. Return the analysis in JSON format."
)

_PLAN_PROMPT_TEMPLATE = """
You are an expert AI Nutritionist and Personal Trainer.
Based on the following user details, create a personalized 7-day meal and workout plan.

User Metrics:
- Age: {age}
- Height: {height}
- Weight: {weight}
- Gender: {gender}
- Activity Level: {activity_level}

User's Goal: "{goal}"

Generate a detailed 7-day meal plan (breakfast, lunch, dinner, and optional snacks) and a 7-day workout plan tailored to their goal. The plan should be encouraging, realistic, and sustainable. For example, if the goal is to 'lose weight', suggest lower-calorie meals and workouts with more cardio. If the goal is to 'gain muscle', suggest higher-protein meals and a strength-focused workout routine.

Provide the response as a JSON object that adheres to the provided schema.
"""


def build_plan_prompt(metrics: UserMetrics, goal: str) -> str:
    """Render the coach prompt for one plan request."""
    return _PLAN_PROMPT_TEMPLATE.format(
        age=metrics.age,
        height=metrics.height,
        weight=metrics.weight,
        gender=metrics.gender.value,
        activity_level=metrics.activity_level.label,
        goal=goal,
    )
