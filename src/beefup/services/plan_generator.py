"""Diet plan generation from a user profile."""

import asyncio
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from beefup.domain.errors import OracleError, PlanError
from beefup.domain.profile import ActivityLevel, DietPlan, Gender, Goal, UserProfile
from beefup.services.oracle import (
    FieldKind,
    FieldSpec,
    ObjectShape,
    OracleClient,
    parse_structured,
)

PLAN_SHAPE = ObjectShape.of(
    FieldSpec("targetCalories", FieldKind.NUMBER),
    FieldSpec("targetProteinGrams", FieldKind.NUMBER),
    FieldSpec("advice", FieldKind.STRING),
)

_ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

_GOAL_ADJUSTMENTS = {
    Goal.CUT: -500,
    Goal.MAINTAIN: 0,
    Goal.BULK: 300,
}

_PROTEIN_PER_KG = {
    Goal.CUT: 2.0,
    Goal.MAINTAIN: 1.6,
    Goal.BULK: 1.8,
}

_GOAL_ADVICE = {
    Goal.CUT: "Stay in a steady deficit and keep protein high to hold on to muscle.",
    Goal.MAINTAIN: "Eat consistently and hit your protein to stay strong and steady.",
    Goal.BULK: "Eat a little above maintenance and train hard to build muscle.",
}

_logger = logging.getLogger(__name__)


@dataclass
class PlanGenerator:
    """Ask the oracle for calorie and protein targets."""

    oracle: OracleClient
    timeout_seconds: float = 20.0

    async def generate(self, profile: UserProfile) -> DietPlan:
        """Return the oracle's plan for the profile."""
        prompt = build_plan_prompt(profile)
        try:
            text = await asyncio.wait_for(
                self.oracle.complete(prompt, PLAN_SHAPE),
                timeout=self.timeout_seconds,
            )
            plan = DietPlan.model_validate(parse_structured(text, PLAN_SHAPE))
        except TimeoutError as exc:
            _logger.warning("Plan generation timed out")
            raise PlanError("Plan generation timed out") from exc
        except (OracleError, ValidationError) as exc:
            _logger.warning("Plan generation failed: %s", exc)
            raise PlanError("Could not generate a diet plan") from exc
        _logger.info(
            "Generated plan: calories=%s protein=%s",
            plan.target_calories,
            plan.target_protein_grams,
        )
        return plan


def build_plan_prompt(profile: UserProfile) -> str:
    """Embed every profile field into the plan request."""
    return (
        "Calculate the daily calorie and protein target for a user "
        "with the following stats:\n"
        f"Age: {profile.age}\n"
        f"Gender: {profile.gender.value}\n"
        f"Weight: {profile.weight}kg\n"
        f"Height: {profile.height}cm\n"
        f"Activity Level: {profile.activity_level.value}\n"
        f"Goal: {profile.goal.value}\n"
        f"Body Type/Notes: {profile.body_type_notes or 'Standard'}\n\n"
        "Return a JSON object with targetCalories (integer), "
        "targetProteinGrams (integer in grams), and a short advice string "
        "(max 20 words).\n"
        "The advice should be motivational and specific to their goal."
    )


def estimate_plan(profile: UserProfile) -> DietPlan:
    """Estimate targets locally with the Mifflin-St Jeor equation.

    Not used as an automatic fallback; oracle failures still raise PlanError.
    """
    bmr = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    if profile.gender is Gender.MALE:
        bmr += 5
    elif profile.gender is Gender.FEMALE:
        bmr -= 161
    else:
        bmr -= 78
    tdee = bmr * _ACTIVITY_FACTORS[profile.activity_level]
    calories = max(round(tdee + _GOAL_ADJUSTMENTS[profile.goal]), 1)
    protein = max(round(profile.weight * _PROTEIN_PER_KG[profile.goal]), 1)
    return DietPlan(
        target_calories=calories,
        target_protein_grams=protein,
        advice=_GOAL_ADVICE[profile.goal],
    )
