"""User profile and diet plan models."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    """Gender options offered during onboarding."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class ActivityLevel(str, Enum):
    """Activity levels, ordered from least to most active."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"
    EXTRA_ACTIVE = "Extra Active"


class Goal(str, Enum):
    """Body composition goal."""

    CUT = "Cut (Lose Fat)"
    MAINTAIN = "Maintain"
    BULK = "Bulk (Gain Muscle)"


class UserProfile(BaseModel):
    """Body metrics submitted once per session."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(gt=0)
    gender: Gender
    weight: float = Field(gt=0, description="Body weight in kg")
    height: float = Field(gt=0, description="Height in cm")
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goal: Goal = Goal.MAINTAIN
    body_type_notes: str | None = None


class DietPlan(BaseModel):
    """Daily targets returned by the plan oracle."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    target_calories: int = Field(gt=0, alias="targetCalories")
    target_protein_grams: int = Field(gt=0, alias="targetProteinGrams")
    advice: str

    @field_validator("target_calories", "target_protein_grams", mode="before")
    @classmethod
    def round_targets(cls, value: object) -> object:
        if isinstance(value, float) and math.isfinite(value):
            return round(value)
        return value
