# -*- coding: utf-8 -*-

from configs.settings import BREAK_COLOR, FOCUS_COLOR
from domain.models import Phase


def format_time(seconds: int) -> str:
    m = max(0, seconds) // 60
    s = max(0, seconds) % 60
    return f"{m:02d}:{s:02d}"


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def ring_extent(progress: float) -> float:
    """Canvas arc extent in degrees; negative draws clockwise from 12 o'clock."""
    return -360.0 * _clamp01(progress)


def ease_progress(start: float, target: float, t: float) -> float:
    t = _clamp01(t)
    return start + (target - start) * t


def pulse_alpha(
    elapsed_ms: float,
    period_ms: float = 1500,
    low: float = 0.5,
    high: float = 1.0,
) -> float:
    """Triangle wave low -> high -> low, each leg taking period_ms."""
    if period_ms <= 0:
        return high
    cycle = (elapsed_ms % (2 * period_ms)) / period_ms
    t = cycle if cycle <= 1.0 else 2.0 - cycle
    return low + (high - low) * t


def _parse_hex(color: str):
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def blend(fg: str, bg: str, alpha: float) -> str:
    # Canvas items have no alpha channel, so composite against the background
    alpha = _clamp01(alpha)
    fr, fg_, fb = _parse_hex(fg)
    br, bg_, bb = _parse_hex(bg)
    r = round(fr * alpha + br * (1 - alpha))
    g = round(fg_ * alpha + bg_ * (1 - alpha))
    b = round(fb * alpha + bb * (1 - alpha))
    return f"#{r:02X}{g:02X}{b:02X}"


def phase_color(phase: Phase) -> str:
    return FOCUS_COLOR if phase is Phase.FOCUS else BREAK_COLOR
