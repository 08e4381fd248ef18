# -*- coding: utf-8 -*-

import logging

from domain.models import PhaseDurations

# Timer
FOCUS_SEC = 25 * 60
BREAK_SEC = 5 * 60
TICK_PERIOD_SEC = 1.0

# Animation
PROGRESS_ANIMATION_MS = 250
PULSE_PERIOD_MS = 1500
PULSE_LOW = 0.5
PULSE_HIGH = 1.0
ANIMATION_FRAME_MS = 33

# Window
WINDOW_TITLE = "Pomodoro"
WINDOW_GEOMETRY = "420x520"
CARD_TITLE = "Pomodoro Timer"

# Colours
FOCUS_COLOR = "#FFA726"  # orange 300
BREAK_COLOR = "#4FC3F7"  # light blue 300
CARD_BG = "#FFFFFF"
TRACK_COLOR = "#E6EAF2"
TEXT_COLOR = "#111827"

LOG_LEVEL = logging.INFO


def default_durations() -> PhaseDurations:
    return PhaseDurations(focus_sec=FOCUS_SEC, break_sec=BREAK_SEC)
