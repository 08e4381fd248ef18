"""
Tests for the deadline anchored tick schedule.
"""
import logging

import pytest

from services.tick_scheduler import DeadlineSchedule


class TestDeadlineSchedule:

    @pytest.fixture
    def schedule(self, fake_clock):
        return DeadlineSchedule(period=1.0, clock=fake_clock)

    def test_inactive_until_started(self, schedule, fake_clock):
        assert not schedule.is_active
        fake_clock.advance(5)
        assert schedule.collect() == 0
        assert schedule.delay_ms() == 1000

    def test_nothing_due_before_first_deadline(self, schedule, fake_clock):
        schedule.start()
        fake_clock.advance(0.5)
        assert schedule.collect() == 0
        assert schedule.delay_ms() == 500

    def test_one_tick_per_period(self, schedule, fake_clock):
        schedule.start()
        for _ in range(10):
            fake_clock.advance(1.0)
            assert schedule.collect() == 1
        assert schedule.collect() == 0

    def test_late_wakeup_does_not_drift(self, schedule, fake_clock):
        schedule.start()
        fake_clock.advance(1.25)
        assert schedule.collect() == 1
        # next deadline stays on the whole-second grid
        assert schedule.delay_ms() == 750

    def test_missed_deadlines_are_caught_up(self, schedule, fake_clock, caplog):
        schedule.start()
        fake_clock.advance(3.5)
        with caplog.at_level(logging.WARNING, logger="services.tick_scheduler"):
            assert schedule.collect() == 3
        assert "catching up 3 ticks" in caplog.text
        assert schedule.delay_ms() == 500

    def test_total_ticks_match_elapsed_time(self, schedule, fake_clock):
        schedule.start()
        total = 0
        # uneven wake-ups around the period
        for step in [1.125, 0.875, 1.25, 0.5, 1.25] * 20:
            fake_clock.advance(step)
            total += schedule.collect()
        assert total == 100

    def test_stop_clears_anchor(self, schedule, fake_clock):
        schedule.start()
        schedule.stop()
        fake_clock.advance(2)
        assert not schedule.is_active
        assert schedule.collect() == 0

    def test_delay_never_negative(self, schedule, fake_clock):
        schedule.start()
        fake_clock.advance(1.5)
        assert schedule.delay_ms() == 0

    @pytest.mark.parametrize("period", [0, -1])
    def test_rejects_non_positive_period(self, period):
        with pytest.raises(ValueError):
            DeadlineSchedule(period=period)
