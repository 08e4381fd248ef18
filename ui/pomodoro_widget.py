# -*- coding: utf-8 -*-

import logging
import time
import tkinter as tk
from tkinter import ttk

from configs.settings import (
    ANIMATION_FRAME_MS,
    CARD_BG,
    CARD_TITLE,
    PROGRESS_ANIMATION_MS,
    PULSE_HIGH,
    PULSE_LOW,
    PULSE_PERIOD_MS,
    TICK_PERIOD_SEC,
    TRACK_COLOR,
)
from core.timer_engine import EngineSnapshot
from services.tick_scheduler import DeadlineSchedule
from services.timer_service import TimerService
from ui.ring import blend, ease_progress, format_time, phase_color, pulse_alpha, ring_extent

logger = logging.getLogger(__name__)

RING_SIZE = 300
RING_WIDTH = 12
RING_PAD = 16


class PomodoroWidget(ttk.Frame):
    def __init__(self, master, timer_service: TimerService):
        super().__init__(master, style="Card.TFrame", padding=16)

        self.timer_service = timer_service
        self.schedule = DeadlineSchedule(period=TICK_PERIOD_SEC)

        self._tick_job = None
        self._anim_job = None
        self._started_at = time.monotonic()

        # progress animation state
        self._shown_progress = 1.0
        self._anim_from = 1.0
        self._anim_to = 1.0
        self._anim_started_at = self._started_at

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_phase_change(self._on_phase_change)
        self.timer_service.set_on_state_change(self._on_state_change)

        # initial render
        snap = self.timer_service.get_snapshot()
        self._shown_progress = self._anim_from = self._anim_to = snap.progress
        self._render(snap)
        self._animate()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.phase_var = tk.StringVar(value="")
        self.time_var = tk.StringVar(value="00:00")

        title = ttk.Label(self, text=CARD_TITLE, style="Title.TLabel")
        title.grid(row=0, column=0, sticky="w", pady=(0, 6))

        self.canvas = tk.Canvas(
            self,
            width=RING_SIZE,
            height=RING_SIZE,
            bg=CARD_BG,
            highlightthickness=0,
        )
        self.canvas.grid(row=1, column=0)

        box = (RING_PAD, RING_PAD, RING_SIZE - RING_PAD, RING_SIZE - RING_PAD)
        self._track = self.canvas.create_oval(*box, outline=TRACK_COLOR, width=RING_WIDTH)
        self._arc = self.canvas.create_arc(
            *box,
            start=90,
            extent=-359.9,
            style="arc",
            outline=TRACK_COLOR,
            width=RING_WIDTH,
        )

        # phase caption, clock and button sit inside the ring
        inner = ttk.Frame(self.canvas, style="Card.TFrame")
        self.phase_label = ttk.Label(inner, textvariable=self.phase_var, style="Phase.TLabel")
        self.phase_label.grid(row=0, column=0, pady=(0, 8))

        self.time_label = ttk.Label(inner, textvariable=self.time_var, style="Clock.TLabel")
        self.time_label.grid(row=1, column=0, pady=(0, 8))

        self.toggle_btn = ttk.Button(inner, text="Start", command=self._toggle)
        self.toggle_btn.grid(row=2, column=0)

        self.canvas.create_window(RING_SIZE // 2, RING_SIZE // 2, window=inner)

    # ---- User intent ----
    def _toggle(self):
        running = self.timer_service.toggle_running()
        if running:
            self._ensure_tick_loop()
        else:
            self._stop_tick_loop()

    # ---- Tick loop (UI-driven, deadline anchored) ----
    def _ensure_tick_loop(self):
        if self._tick_job is None:
            self.schedule.start()
            self._tick_job = self.after(self.schedule.delay_ms(), self._tick_once)

    def _stop_tick_loop(self):
        self.schedule.stop()
        self._tick_job = self._cancel(self._tick_job)

    def _tick_once(self):
        self._tick_job = None
        for _ in range(self.schedule.collect()):
            self.timer_service.tick()
        if self.timer_service.get_snapshot().is_running and self.schedule.is_active:
            # schedule next tick
            self._tick_job = self.after(self.schedule.delay_ms(), self._tick_once)

    def _cancel(self, job) -> None:
        if job is not None:
            try:
                self.after_cancel(job)
            except tk.TclError as e:
                logger.debug("after_cancel(%s) failed: %s", job, e)
        return None

    # ---- Service callbacks ----
    def _on_tick(self, snap: EngineSnapshot):
        self._render(snap)

    def _on_phase_change(self, snap: EngineSnapshot):
        # new phase starts from a full ring without easing back up
        self._shown_progress = self._anim_from = self._anim_to = snap.progress
        self._render(snap)

    def _on_state_change(self, snap: EngineSnapshot):
        self._render(snap)

    def _render(self, snap: EngineSnapshot):
        self.time_var.set(format_time(snap.remaining_sec))
        self.phase_var.set(snap.phase.label)
        self.toggle_btn.config(text=snap.button_label)

        self._color = phase_color(snap.phase)
        if snap.progress != self._anim_to:
            self._anim_from = self._shown_progress
            self._anim_to = snap.progress
            self._anim_started_at = time.monotonic()

    # ---- Animation ----
    def _animate(self):
        self._anim_job = None
        now = time.monotonic()

        t = (now - self._anim_started_at) * 1000 / PROGRESS_ANIMATION_MS
        self._shown_progress = ease_progress(self._anim_from, self._anim_to, t)

        alpha = pulse_alpha(
            (now - self._started_at) * 1000,
            period_ms=PULSE_PERIOD_MS,
            low=PULSE_LOW,
            high=PULSE_HIGH,
        )
        extent = ring_extent(self._shown_progress)
        # a full 360 arc renders as nothing on some Tk builds
        self.canvas.itemconfigure(
            self._arc,
            extent=max(extent, -359.9),
            outline=blend(self._color, CARD_BG, alpha),
            state="hidden" if extent == 0 else "normal",
        )
        self._anim_job = self.after(ANIMATION_FRAME_MS, self._animate)

    def shutdown(self):
        self._stop_tick_loop()
        self._anim_job = self._cancel(self._anim_job)
