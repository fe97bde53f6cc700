"""Map calorie progress to an avatar state."""

import math

from beefup.domain.progress import AvatarState, BodyShape, Mood

SLIM_UPPER_BOUND = 0.5
MUSCULAR_UPPER_BOUND = 1.1
MUSCULAR_SPAN = 0.6
OVERLOAD_SPAN = 0.5


def progress_ratio(consumed: float, target: float) -> float:
    """Return consumed / target; target must be positive."""
    if not target > 0 or not math.isfinite(target):
        raise ValueError(f"target must be a positive number, got {target}")
    return max(consumed, 0.0) / target


def classify(ratio: float) -> AvatarState:
    """Classify a non-negative progress ratio.

    Below 0.5 the avatar is slim, from 0.5 through 1.1 inclusive it is
    muscular, and anything above 1.1 is overloaded.
    """
    if not math.isfinite(ratio) or ratio < 0:
        raise ValueError(f"ratio must be a finite non-negative number, got {ratio}")

    if ratio < SLIM_UPPER_BOUND:
        width = 2 + ratio * 2
        return AvatarState(
            ratio=ratio,
            shape=BodyShape.SLIM,
            mood=Mood.NEUTRAL,
            limb_width=width,
            torso_width=width,
        )

    if ratio <= MUSCULAR_UPPER_BOUND:
        beef = (ratio - SLIM_UPPER_BOUND) / MUSCULAR_SPAN
        return AvatarState(
            ratio=ratio,
            shape=BodyShape.MUSCULAR,
            mood=Mood.HAPPY,
            limb_width=3 + beef * 8,
            torso_width=3 + beef * 10,
            muscle_definition=beef,
        )

    fat = min((ratio - MUSCULAR_UPPER_BOUND) / OVERLOAD_SPAN, 1.0)
    return AvatarState(
        ratio=ratio,
        shape=BodyShape.OVERLOADED,
        mood=Mood.CONCERNED,
        limb_width=8 + fat * 4,
        torso_width=2.0,
        belly_scale=1 + fat * 2,
    )
