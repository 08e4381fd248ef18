#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from configs.logging_config import setup_logging
from configs.settings import LOG_LEVEL, default_durations
from services.timer_service import TimerService
from ui.main_window import MainWindow


def main():
    setup_logging(LOG_LEVEL)

    timer_service = TimerService(durations=default_durations())

    app = MainWindow(timer_service)
    app.run()


if __name__ == "__main__":
    main()
