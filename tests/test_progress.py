"""Tests for progress classification."""

import math

import pytest

from beefup.domain.progress import BodyShape, Mood
from beefup.services.progress import classify, progress_ratio


@pytest.mark.parametrize(
    ("ratio", "shape", "mood"),
    [
        (0.0, BodyShape.SLIM, Mood.NEUTRAL),
        (0.25, BodyShape.SLIM, Mood.NEUTRAL),
        (0.4999999, BodyShape.SLIM, Mood.NEUTRAL),
        (0.5, BodyShape.MUSCULAR, Mood.HAPPY),
        (0.8, BodyShape.MUSCULAR, Mood.HAPPY),
        (1.1, BodyShape.MUSCULAR, Mood.HAPPY),
        (1.1000001, BodyShape.OVERLOADED, Mood.CONCERNED),
        (1.6, BodyShape.OVERLOADED, Mood.CONCERNED),
        (25.0, BodyShape.OVERLOADED, Mood.CONCERNED),
    ],
)
def test_classify_regimes(ratio: float, shape: BodyShape, mood: Mood) -> None:
    state = classify(ratio)

    assert state.shape is shape
    assert state.mood is mood
    assert state.ratio == ratio


def test_slim_render_hints() -> None:
    state = classify(0.25)

    assert state.limb_width == 2.5
    assert state.torso_width == 2.5
    assert state.muscle_definition == 0
    assert state.belly_scale == 1


def test_muscular_render_hints() -> None:
    state = classify(0.8)

    assert state.muscle_definition == pytest.approx(0.5)
    assert state.limb_width == pytest.approx(7)
    assert state.torso_width == pytest.approx(8)
    assert state.belly_scale == 1


def test_muscular_peaks_at_upper_boundary() -> None:
    state = classify(1.1)

    assert state.muscle_definition == pytest.approx(1)
    assert state.limb_width == pytest.approx(11)
    assert state.torso_width == pytest.approx(13)


def test_overloaded_belly_is_capped() -> None:
    assert classify(1.6).belly_scale == pytest.approx(3)
    assert classify(4.0).belly_scale == 3
    assert classify(4.0).limb_width == 12
    assert classify(4.0).muscle_definition == 0


def test_target_scenario_at_boundary_is_muscular() -> None:
    state = classify(progress_ratio(2200, 2000))

    assert state.shape is BodyShape.MUSCULAR
    assert state.mood is Mood.HAPPY


def test_target_scenario_over_boundary_is_overloaded() -> None:
    state = classify(progress_ratio(2400, 2000))

    assert state.shape is BodyShape.OVERLOADED
    assert state.belly_scale == pytest.approx(1.4)


def test_classify_is_deterministic() -> None:
    assert classify(0.93) == classify(0.93)


@pytest.mark.parametrize("ratio", [-0.1, math.nan, math.inf])
def test_classify_rejects_invalid_ratios(ratio: float) -> None:
    with pytest.raises(ValueError):
        classify(ratio)


@pytest.mark.parametrize("target", [0, -100, math.nan, math.inf])
def test_progress_ratio_requires_positive_target(target: float) -> None:
    with pytest.raises(ValueError):
        progress_ratio(100, target)


def test_progress_ratio_clamps_negative_consumption() -> None:
    assert progress_ratio(-50, 2000) == 0
