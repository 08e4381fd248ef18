# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    FOCUS = "focus"
    BREAK = "break"

    def other(self) -> "Phase":
        if self is Phase.FOCUS:
            return Phase.BREAK
        return Phase.FOCUS

    @property
    def label(self) -> str:
        return "Focus Time" if self is Phase.FOCUS else "Break"


@dataclass(frozen=True)
class PhaseDurations:
    focus_sec: int
    break_sec: int

    def __post_init__(self):
        for name in ("focus_sec", "break_sec"):
            value = getattr(self, name)
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be at least 1 second, got {value}")

    def duration_for(self, phase: Phase) -> int:
        if phase is Phase.FOCUS:
            return self.focus_sec
        return self.break_sec
