# -*- coding: utf-8 -*-

import logging
import math
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DeadlineSchedule:
    """
    Periodic deadlines anchored to an absolute clock.

    The UI wakes up with after(delay_ms()), then asks collect() how many
    periods have elapsed. Late wake-ups are absorbed by the anchor instead
    of being added to the next sleep, so drift does not accumulate.
    """

    def __init__(self, period: float = 1.0, clock: Callable[[], float] = time.monotonic):
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self.period = float(period)
        self._clock = clock
        self._next_deadline: Optional[float] = None

    @property
    def is_active(self) -> bool:
        return self._next_deadline is not None

    def start(self) -> None:
        self._next_deadline = self._clock() + self.period

    def stop(self) -> None:
        self._next_deadline = None

    def collect(self) -> int:
        """Number of deadlines passed since the last call."""
        if self._next_deadline is None:
            return 0

        now = self._clock()
        if now < self._next_deadline:
            return 0

        due = int((now - self._next_deadline) // self.period) + 1
        self._next_deadline += due * self.period
        if due > 1:
            logger.warning("Tick source woke up late, catching up %d ticks", due)
        return due

    def delay_ms(self) -> int:
        if self._next_deadline is None:
            return int(self.period * 1000)
        remaining = self._next_deadline - self._clock()
        return max(0, int(math.ceil(remaining * 1000)))
