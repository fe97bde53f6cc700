"""Tests for stick-figure geometry and SVG rendering."""

from beefup.domain.progress import TorsoShape
from beefup.services.avatar import build_figure, render_svg
from beefup.services.progress import classify


def test_slim_figure_uses_line_torso() -> None:
    figure = build_figure(classify(0.2))

    assert figure.torso_shape is TorsoShape.LINE
    assert figure.badge == "Skinny / Normal"
    assert figure.torso_path == "M 100 52 L 100 110"
    assert figure.belly_rx is None
    assert figure.left_arm_path == "M 100 62 L 70 82 L 60 102"
    assert figure.face_path == "M 95 42 L 105 42"


def test_muscular_figure_has_shoulders_and_flexed_arms() -> None:
    figure = build_figure(classify(1.1))

    assert figure.torso_shape is TorsoShape.TRIANGLE
    assert figure.badge == "BEEFY"
    assert figure.torso_path == "M 65 57 L 135 57 L 100 110 Z"
    assert figure.left_arm_path == "M 65 62 L 50 82 L 60 102"
    assert figure.right_arm_path == "M 135 62 L 150 82 L 140 102"
    assert figure.torso_fill == "url(#beefGradient)"


def test_early_muscular_figure_does_not_flex() -> None:
    figure = build_figure(classify(0.5))

    assert figure.left_arm_path == "M 95 62 L 70 82 L 60 102"


def test_overloaded_figure_has_belly() -> None:
    figure = build_figure(classify(1.2))

    assert figure.torso_shape is TorsoShape.CIRCLE
    assert figure.badge == "OVERLOAD"
    assert figure.torso_path is None
    assert figure.belly_rx is not None
    assert round(figure.belly_rx, 6) == 28
    assert round(figure.belly_ry or 0, 6) == 35
    assert figure.torso_fill != "url(#fatGradient)"


def test_heavily_overloaded_figure_uses_fat_gradient() -> None:
    figure = build_figure(classify(2.0))

    assert figure.torso_fill == "url(#fatGradient)"
    assert figure.belly_rx == 60


def test_render_svg_contains_figure_parts() -> None:
    svg = render_svg(build_figure(classify(2.0)))

    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert '<ellipse cx="100" cy="90" rx="60" ry="75"' in svg
    assert "OVERLOAD" in svg
    assert svg.count("<path") == 5


def test_render_svg_uses_render_hints() -> None:
    svg = render_svg(build_figure(classify(0.1)))

    assert "Skinny / Normal" in svg
    assert 'stroke-width="2.2"' in svg
