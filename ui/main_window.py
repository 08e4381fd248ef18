# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import ttk

from configs.settings import CARD_BG, TEXT_COLOR, WINDOW_GEOMETRY, WINDOW_TITLE
from services.timer_service import TimerService
from ui.pomodoro_widget import PomodoroWidget

logger = logging.getLogger(__name__)


class MainWindow:
    def __init__(self, timer_service: TimerService):
        self.timer_service = timer_service

        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._build_styles()
        self._build_ui()

    def _build_styles(self):
        style = ttk.Style(self.root)
        style.configure("Card.TFrame", background=CARD_BG)
        style.configure(
            "Title.TLabel",
            background=CARD_BG,
            foreground=TEXT_COLOR,
            font=("Sans", 16, "bold"),
        )
        style.configure(
            "Phase.TLabel",
            background=CARD_BG,
            foreground=TEXT_COLOR,
            font=("Sans", 13),
        )
        style.configure(
            "Clock.TLabel",
            background=CARD_BG,
            foreground=TEXT_COLOR,
            font=("Sans", 36),
        )

    def _build_ui(self):
        outer = ttk.Frame(self.root, padding=20)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)
        outer.rowconfigure(0, weight=1)

        self.pomodoro = PomodoroWidget(outer, timer_service=self.timer_service)
        self.pomodoro.grid(row=0, column=0)

    def run(self):
        logger.info("Opening %s window", WINDOW_TITLE)
        self.root.mainloop()

    def _on_close(self):
        logger.info("Window closed")
        self.pomodoro.shutdown()
        self.root.destroy()
