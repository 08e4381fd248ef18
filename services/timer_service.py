# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.timer_engine import EngineSnapshot, TimerEngine
from domain.models import PhaseDurations

logger = logging.getLogger(__name__)


class TimerService:
    """
    Orchestrates:
    - TimerEngine state
    - Callbacks for UI (one push per tick while running, one per toggle)
    - Logging of toggles and phase changes
    """

    def __init__(
        self,
        engine: Optional[TimerEngine] = None,
        durations: Optional[PhaseDurations] = None,
    ):
        if engine is None:
            engine = TimerEngine(durations)
        self.engine = engine

        self._on_tick: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_phase_change: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[EngineSnapshot], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_phase_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_phase_change = fn

    def set_on_state_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_state_change = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.engine.snapshot())

    def _emit_phase_change(self) -> None:
        if self._on_phase_change:
            self._on_phase_change(self.engine.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot())

    # ----- Public API -----
    def get_snapshot(self) -> EngineSnapshot:
        return self.engine.snapshot()

    def toggle_running(self) -> bool:
        running = self.engine.toggle_running()
        snap = self.engine.snapshot()
        logger.info(
            "Timer %s in %s phase with %ss remaining",
            "started" if running else "stopped",
            snap.phase.value,
            snap.remaining_sec,
        )
        self._emit_state_change()
        self._emit_tick()
        return running

    def tick(self) -> None:
        """
        Should be called once per elapsed second by the UI loop.
        """
        if not self.engine.snapshot().is_running:
            return

        phase_changed = self.engine.tick()
        snap = self.engine.snapshot()
        logger.debug("Tick: %s %ss/%ss", snap.phase.value, snap.remaining_sec, snap.initial_sec)

        self._emit_tick()

        if phase_changed:
            logger.info("Phase changed to %s (%ss)", snap.phase.value, snap.initial_sec)
            self._emit_phase_change()
