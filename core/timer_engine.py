# -*- coding: utf-8 -*-

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from configs.settings import default_durations
from domain.models import Phase, PhaseDurations


@dataclass(frozen=True)
class TimerState:
    phase: Phase
    initial_sec: int
    remaining_sec: int

    @classmethod
    def fresh(cls, phase: Phase, durations: PhaseDurations) -> "TimerState":
        seconds = durations.duration_for(phase)
        return cls(phase=phase, initial_sec=seconds, remaining_sec=seconds)

    @property
    def progress(self) -> float:
        if self.initial_sec <= 0:
            return 0.0
        return self.remaining_sec / self.initial_sec


@dataclass(frozen=True)
class EngineSnapshot:
    phase: Phase
    initial_sec: int
    remaining_sec: int
    is_running: bool

    @property
    def progress(self) -> float:
        if self.initial_sec <= 0:
            return 0.0
        return self.remaining_sec / self.initial_sec

    @property
    def button_label(self) -> str:
        return "Stop" if self.is_running else "Start"


def next_state(state: TimerState, durations: PhaseDurations) -> TimerState:
    """One running second: count down, or roll into the other phase at zero."""
    if state.remaining_sec > 0:
        return replace(state, remaining_sec=state.remaining_sec - 1)
    return TimerState.fresh(state.phase.other(), durations)


def advance(
    state: TimerState,
    running: bool,
    tick_occurred: bool,
    toggle_occurred: bool,
    durations: PhaseDurations,
) -> Tuple[TimerState, bool]:
    """
    Pure transition: (state, running, tick?, toggle?) -> (state, running).
    The toggle is applied before the tick.
    """
    if toggle_occurred:
        running = not running
    if tick_occurred and running:
        state = next_state(state, durations)
    return state, running


class TimerEngine:
    """
    Pure countdown engine (no Tkinter).
    UI / Service triggers tick() each second.
    """

    def __init__(self, durations: Optional[PhaseDurations] = None):
        if durations is None:
            durations = default_durations()
        self._durations = durations

        self._state = TimerState.fresh(Phase.FOCUS, durations)
        self._running = False

    @property
    def durations(self) -> PhaseDurations:
        return self._durations

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            phase=self._state.phase,
            initial_sec=self._state.initial_sec,
            remaining_sec=self._state.remaining_sec,
            is_running=self._running,
        )

    def toggle_running(self) -> bool:
        self._state, self._running = advance(
            self._state, self._running, False, True, self._durations
        )
        return self._running

    def tick(self) -> bool:
        """
        Returns True if phase changed on this tick.
        """
        before = self._state.phase
        self._state, self._running = advance(
            self._state, self._running, True, False, self._durations
        )
        return self._state.phase is not before
