"""Avatar state models derived from calorie progress."""

from dataclasses import dataclass
from enum import Enum


class BodyShape(str, Enum):
    """Discrete body-shape classification."""

    SLIM = "slim"
    MUSCULAR = "muscular"
    OVERLOADED = "overloaded"


class Mood(str, Enum):
    """Facial expression of the avatar."""

    NEUTRAL = "neutral"
    HAPPY = "happy"
    CONCERNED = "concerned"


class TorsoShape(str, Enum):
    """Torso primitive used when drawing the avatar."""

    LINE = "line"
    TRIANGLE = "triangle"
    CIRCLE = "circle"


@dataclass(frozen=True)
class AvatarState:
    """Classification and render hints for a progress ratio."""

    ratio: float
    shape: BodyShape
    mood: Mood
    limb_width: float
    torso_width: float
    muscle_definition: float = 0.0
    belly_scale: float = 1.0
    head_radius: float = 12.0


@dataclass(frozen=True)
class FigureGeometry:
    """SVG path data for the stick figure."""

    state: AvatarState
    torso_shape: TorsoShape
    badge: str
    head_cy: float
    torso_path: str | None
    belly_rx: float | None
    belly_ry: float | None
    left_arm_path: str
    right_arm_path: str
    left_leg_path: str
    right_leg_path: str
    face_path: str
    torso_fill: str
