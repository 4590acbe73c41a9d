"""Tests for the engine time resource and the system clock source."""

from datetime import datetime

from perfui.engine.app_time import Time
from perfui.engine.clock import SystemClock

DAY = 86_400
NS = 1_000_000_000


def _ns(h, m, s, nanos=0, days=19_000):
    return ((days * DAY) + h * 3600 + m * 60 + s) * NS + nanos


class FakeMonotonic:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class TestTime:
    def test_starts_at_zero(self):
        t = Time(clock=FakeMonotonic(50.0))
        assert t.elapsed == 0.0
        assert t.tick_count == 0

    def test_tick_advances_elapsed_and_delta(self):
        clock = FakeMonotonic(50.0)
        t = Time(clock=clock)
        clock.now = 52.5
        assert t.tick() == 2.5
        clock.now = 53.0
        t.tick()
        assert t.elapsed == 3.0
        assert t.delta == 0.5
        assert t.tick_count == 2


class TestSystemClockUtc:
    def test_decomposes_time_of_day(self):
        clock = SystemClock(now_ns=lambda: _ns(14, 5, 9, 123))
        assert clock.utc_hms() == (14, 5, 9, 123)

    def test_wraps_hours_at_midnight(self):
        clock = SystemClock(now_ns=lambda: _ns(23, 59, 59, 999_999_999))
        assert clock.utc_hms() == (23, 59, 59, 999_999_999)
        clock = SystemClock(now_ns=lambda: _ns(0, 0, 0, days=19_001))
        assert clock.utc_hms() == (0, 0, 0, 0)

    def test_before_epoch_has_no_value(self):
        clock = SystemClock(now_ns=lambda: -1)
        assert clock.utc_hms() is None
        assert clock.local_hms() is None

    def test_os_error_has_no_value(self):
        def broken():
            raise OSError("clock unavailable")

        clock = SystemClock(now_ns=broken)
        assert clock.utc_hms() is None


class TestSystemClockLocal:
    def test_local_time_matches_datetime(self):
        ns = _ns(8, 30, 15, 42)
        clock = SystemClock(local_time=True, now_ns=lambda: ns)
        expected = datetime.fromtimestamp(ns // NS)
        assert clock.local_hms() == (expected.hour, expected.minute, expected.second, 42)

    def test_without_capability_falls_back_to_utc(self):
        clock = SystemClock(local_time=False, now_ns=lambda: _ns(8, 30, 15))
        assert not clock.has_local_time
        assert clock.local_hms() == (8, 30, 15, 0)
