import sys
from pathlib import Path

import pytest

# Add project root to path so the top-level packages import without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.timer_engine import TimerEngine
from domain.models import PhaseDurations
from services.timer_service import TimerService


class FakeClock:
    """Monotonic clock stand-in that only moves when told to"""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def quick_durations():
    """Fixture providing the 5s focus / 2s break durations"""
    return PhaseDurations(focus_sec=5, break_sec=2)


@pytest.fixture
def engine(quick_durations):
    """Fixture providing a stopped engine at the start of a focus phase"""
    return TimerEngine(quick_durations)


@pytest.fixture
def service(engine):
    """Fixture providing a TimerService around the quick engine"""
    return TimerService(engine=engine)


@pytest.fixture
def fake_clock():
    """Fixture providing a controllable clock"""
    return FakeClock()
