"""Stick-figure geometry and SVG rendering for an avatar state."""

from xml.sax.saxutils import escape

from beefup.domain.progress import (
    AvatarState,
    BodyShape,
    FigureGeometry,
    Mood,
    TorsoShape,
)

HEAD_CY = 40
CENTER_X = 100
HIP_Y = 110
ARM_LENGTH = 40
LEG_LENGTH = 50
FLEX_THRESHOLD = 0.5

_TORSO_SHAPES = {
    BodyShape.SLIM: TorsoShape.LINE,
    BodyShape.MUSCULAR: TorsoShape.TRIANGLE,
    BodyShape.OVERLOADED: TorsoShape.CIRCLE,
}

_BADGES = {
    TorsoShape.LINE: "Skinny / Normal",
    TorsoShape.TRIANGLE: "BEEFY",
    TorsoShape.CIRCLE: "OVERLOAD",
}

_FACES = {
    Mood.HAPPY: "M 95 42 Q 100 47 105 42",
    Mood.NEUTRAL: "M 95 42 L 105 42",
    Mood.CONCERNED: "M 95 45 Q 100 40 105 45",
}

_STROKE = "#111827"
_SKIN = "#e5e7eb"
_BEEF_STOPS = ("#ef4444", "#b91c1c")
_FAT_STOPS = ("#fca5a5", "#ef4444")


def build_figure(state: AvatarState) -> FigureGeometry:
    """Compute SVG paths for the stick figure."""
    torso_shape = _TORSO_SHAPES[state.shape]
    neck_y = HEAD_CY + state.head_radius
    shoulder = 5 + state.muscle_definition * 30

    torso_path: str | None = None
    belly_rx: float | None = None
    belly_ry: float | None = None
    if torso_shape is TorsoShape.LINE:
        torso_path = f"M {CENTER_X} {_fmt(neck_y)} L {CENTER_X} {HIP_Y}"
        torso_fill = "none"
    elif torso_shape is TorsoShape.TRIANGLE:
        top = neck_y + 5
        torso_path = (
            f"M {_fmt(CENTER_X - shoulder)} {_fmt(top)} "
            f"L {_fmt(CENTER_X + shoulder)} {_fmt(top)} "
            f"L {CENTER_X} {HIP_Y} Z"
        )
        torso_fill = "url(#beefGradient)"
    else:
        belly_rx = 20 * state.belly_scale
        belly_ry = 25 * state.belly_scale
        torso_fill = "url(#fatGradient)" if state.belly_scale > 1.5 else _SKIN

    arm_y = neck_y + 10
    flex = 20 if state.muscle_definition > FLEX_THRESHOLD else 0
    arm_offset = shoulder if torso_shape is TorsoShape.TRIANGLE else 0
    left_arm = (
        f"M {_fmt(CENTER_X - arm_offset)} {_fmt(arm_y)} "
        f"L {70 - flex} {_fmt(arm_y + 20)} L 60 {_fmt(arm_y + ARM_LENGTH)}"
    )
    right_arm = (
        f"M {_fmt(CENTER_X + arm_offset)} {_fmt(arm_y)} "
        f"L {130 + flex} {_fmt(arm_y + 20)} L 140 {_fmt(arm_y + ARM_LENGTH)}"
    )

    return FigureGeometry(
        state=state,
        torso_shape=torso_shape,
        badge=_BADGES[torso_shape],
        head_cy=HEAD_CY,
        torso_path=torso_path,
        belly_rx=belly_rx,
        belly_ry=belly_ry,
        left_arm_path=left_arm,
        right_arm_path=right_arm,
        left_leg_path=f"M {CENTER_X} {HIP_Y} L 80 {HIP_Y + LEG_LENGTH}",
        right_leg_path=f"M {CENTER_X} {HIP_Y} L 120 {HIP_Y + LEG_LENGTH}",
        face_path=_FACES[state.mood],
        torso_fill=torso_fill,
    )


def render_svg(figure: FigureGeometry) -> str:
    """Render the figure as a standalone SVG document."""
    state = figure.state
    limb = _fmt(state.limb_width)
    parts = [
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">',
        "<defs>",
        _gradient("beefGradient", _BEEF_STOPS),
        _gradient("fatGradient", _FAT_STOPS),
        "</defs>",
        f'<circle cx="{CENTER_X}" cy="{_fmt(figure.head_cy)}" '
        f'r="{_fmt(state.head_radius)}" fill="{_SKIN}" stroke="{_STROKE}" '
        'stroke-width="3"/>',
        f'<path d="{figure.face_path}" fill="none" stroke="{_STROKE}" '
        'stroke-width="2" stroke-linecap="round"/>',
    ]
    if figure.torso_shape is TorsoShape.CIRCLE:
        parts.append(
            f'<ellipse cx="{CENTER_X}" cy="90" rx="{_fmt(figure.belly_rx or 0)}" '
            f'ry="{_fmt(figure.belly_ry or 0)}" fill="{figure.torso_fill}" '
            f'stroke="{_STROKE}" stroke-width="3"/>'
        )
    else:
        parts.append(
            f'<path d="{figure.torso_path}" fill="{figure.torso_fill}" '
            f'stroke="{_STROKE}" stroke-width="{_fmt(state.torso_width)}" '
            'stroke-linecap="round" stroke-linejoin="round"/>'
        )
    for path in (
        figure.left_arm_path,
        figure.right_arm_path,
        figure.left_leg_path,
        figure.right_leg_path,
    ):
        parts.append(
            f'<path d="{path}" fill="none" stroke="{_STROKE}" '
            f'stroke-width="{limb}" stroke-linecap="round" stroke-linejoin="round"/>'
        )
    parts.append(
        f'<text x="{CENTER_X}" y="190" text-anchor="middle" font-size="12" '
        f'font-weight="bold">{escape(figure.badge)}</text>'
    )
    parts.append("</svg>")
    return "\n".join(parts)


def _gradient(gradient_id: str, stops: tuple[str, str]) -> str:
    inner, outer = stops
    return (
        f'<radialGradient id="{gradient_id}" '
        'cx="50%" cy="50%" r="50%" fx="50%" fy="50%">'
        f'<stop offset="0%" stop-color="{inner}"/>'
        f'<stop offset="100%" stop-color="{outer}"/>'
        "</radialGradient>"
    )


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")
