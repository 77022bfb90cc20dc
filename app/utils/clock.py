# app/utils/clock.py
from __future__ import annotations

import re
from datetime import datetime
from enum import IntEnum
from typing import NamedTuple

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
_HHMM_RE = re.compile(HHMM_PATTERN)


class DayOfWeek(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, dt: datetime) -> "DayOfWeek":
        # datetime.weekday() counts from Monday = 0
        return cls((dt.weekday() + 1) % 7)


class ClockTime(int):
    """
    Wall-clock time of day as minutes since midnight (0..1439).
    "07:45" -> 465
    """

    def __new__(cls, minutes: int):
        if not 0 <= minutes < 24 * 60:
            raise ValueError(f"time of day out of range: {minutes}")
        return super().__new__(cls, minutes)

    @classmethod
    def parse(cls, value: "str | ClockTime") -> "ClockTime":
        if isinstance(value, ClockTime):
            return value
        if not _HHMM_RE.match(value):
            raise ValueError(f"expected HH:MM, got {value!r}")
        hours, minutes = value.split(":")
        return cls(int(hours) * 60 + int(minutes))

    @classmethod
    def of(cls, dt: datetime) -> "ClockTime":
        return cls(dt.hour * 60 + dt.minute)

    @property
    def hour(self) -> int:
        return self // 60

    @property
    def minute(self) -> int:
        return self % 60

    def on(self, dt: datetime) -> datetime:
        """Same calendar date as dt, at this time of day."""
        return dt.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __repr__(self) -> str:
        return f"ClockTime({str(self)!r})"


class Moment(NamedTuple):
    """A single clock read split into the day of week and the minute of day."""

    day: DayOfWeek
    time: ClockTime

    @classmethod
    def of(cls, dt: datetime) -> "Moment":
        return cls(DayOfWeek.of(dt), ClockTime.of(dt))


def local_now() -> datetime:
    """Current host-local wall-clock time (naive)."""
    return datetime.now()


def get_now() -> datetime:
    """FastAPI dependency; tests override it to pin the clock."""
    return local_now()
