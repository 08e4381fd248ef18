"""
Tests for the ring drawing helpers.
"""
import pytest

from configs.settings import BREAK_COLOR, FOCUS_COLOR
from domain.models import Phase
from ui.ring import blend, ease_progress, format_time, phase_color, pulse_alpha, ring_extent


@pytest.mark.parametrize(
    "seconds,expected",
    [(0, "00:00"), (5, "00:05"), (65, "01:05"), (25 * 60, "25:00"), (-3, "00:00")],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_ring_extent_runs_clockwise():
    assert ring_extent(1.0) == -360.0
    assert ring_extent(0.25) == -90.0
    assert ring_extent(0.0) == 0.0


def test_ring_extent_clamps():
    assert ring_extent(1.5) == -360.0
    assert ring_extent(-0.5) == 0.0


def test_ease_progress():
    assert ease_progress(1.0, 0.8, 0.0) == 1.0
    assert ease_progress(1.0, 0.8, 0.5) == pytest.approx(0.9)
    assert ease_progress(1.0, 0.8, 1.0) == pytest.approx(0.8)
    assert ease_progress(1.0, 0.8, 4.0) == pytest.approx(0.8)


def test_pulse_alpha_reverses():
    assert pulse_alpha(0) == pytest.approx(0.5)
    assert pulse_alpha(750) == pytest.approx(0.75)
    assert pulse_alpha(1500) == pytest.approx(1.0)
    assert pulse_alpha(2250) == pytest.approx(0.75)
    assert pulse_alpha(3000) == pytest.approx(0.5)


def test_pulse_alpha_stays_in_range():
    for ms in range(0, 10000, 37):
        assert 0.5 <= pulse_alpha(ms) <= 1.0


def test_blend():
    assert blend("#FFA726", "#FFFFFF", 1.0) == "#FFA726"
    assert blend("#FFA726", "#FFFFFF", 0.0) == "#FFFFFF"
    assert blend("#000000", "#FFFFFF", 0.5) == "#808080"


def test_phase_color():
    assert phase_color(Phase.FOCUS) == FOCUS_COLOR
    assert phase_color(Phase.BREAK) == BREAK_COLOR
