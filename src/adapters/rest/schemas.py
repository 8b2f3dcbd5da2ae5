"""Pydantic models for REST API request/response validation."""

from __future__ import annotations

from pydantic import BaseModel


# --- Auth ---

class RegisterBody(BaseModel):
    # Empty values are rejected by the service with a friendly message
    name: str = ""
    email: str = ""
    password: str = ""


class LoginBody(BaseModel):
    email: str = ""
    password: str = ""


class UserOut(BaseModel):
    name: str
    email: str


# --- Plans ---

class PlanBody(BaseModel):
    """Raw plan form values; validated by application.validation."""
    height: str = ""
    weight: str = ""
    age: str = ""
    gender: str = ""
    activityLevel: str = ""
    goal: str = ""

    def metric_fields(self) -> dict[str, str]:
        return {
            "height": self.height,
            "weight": self.weight,
            "age": self.age,
            "gender": self.gender,
            "activityLevel": self.activityLevel,
        }
