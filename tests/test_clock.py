"""Tests for clock primitives (app/utils/clock.py)."""

from __future__ import annotations

from datetime import datetime

import pytest

from app.utils.clock import ClockTime, DayOfWeek, Moment


def test_day_of_week_counts_from_sunday():
    assert DayOfWeek.of(datetime(2025, 8, 24)) == DayOfWeek.SUNDAY
    assert DayOfWeek.of(datetime(2025, 8, 25)) == DayOfWeek.MONDAY
    assert DayOfWeek.of(datetime(2025, 8, 30)) == DayOfWeek.SATURDAY


def test_clock_time_parse():
    t = ClockTime.parse("07:45")
    assert t == 465
    assert (t.hour, t.minute) == (7, 45)
    assert str(t) == "07:45"


def test_clock_time_orders_numerically():
    assert ClockTime.parse("09:05") < ClockTime.parse("10:00")


@pytest.mark.parametrize("bad", ["7:45", "24:00", "12:60", "noon", ""])
def test_clock_time_rejects_malformed(bad):
    with pytest.raises(ValueError):
        ClockTime.parse(bad)


def test_clock_time_range():
    with pytest.raises(ValueError):
        ClockTime(24 * 60)


def test_clock_time_on_keeps_date():
    dt = datetime(2025, 8, 25, 8, 12, 59, 500)
    assert ClockTime.parse("09:30").on(dt) == datetime(2025, 8, 25, 9, 30)


def test_moment_from_single_read():
    m = Moment.of(datetime(2025, 8, 24, 23, 59, 59))
    assert m.day == DayOfWeek.SUNDAY
    assert str(m.time) == "23:59"
