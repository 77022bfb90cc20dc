# app/utils/activity.py
"""
What is happening now / next, over a flat collection of schedule items.

Items are anything exposing ``day_of_week`` (0-6, Sunday = 0) and
``start_time`` / ``end_time`` ("HH:MM" or ClockTime). Items never cross
midnight. Callers pass items ordered by start time: overlapping items on the
same day resolve to the first one in input order.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional, Protocol, TypeVar

from app.utils.clock import ClockTime, DayOfWeek, Moment, local_now

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60


class TimeBlock(Protocol):
    day_of_week: int
    start_time: str | ClockTime
    end_time: str | ClockTime


T = TypeVar("T", bound=TimeBlock)


def _start(item: TimeBlock) -> ClockTime:
    return ClockTime.parse(item.start_time)


def _end(item: TimeBlock) -> ClockTime:
    return ClockTime.parse(item.end_time)


def _on_day(items: Iterable[T], day: int) -> list[T]:
    return [i for i in items if i.day_of_week == day]


def _whole_minutes(delta: timedelta) -> int:
    return int(delta.total_seconds() // 60)


def get_current_activity(items: Iterable[T], now: datetime | None = None) -> Optional[T]:
    """First item of today with start <= now < end, or None."""
    moment = Moment.of(now or local_now())
    for item in _on_day(items, moment.day):
        if _start(item) <= moment.time < _end(item):
            return item
    return None


def get_next_activity(items: Iterable[T], now: datetime | None = None) -> Optional[T]:
    """
    Soonest item starting after the current activity ends (or after now when
    nothing is running), looking ahead at most six days.

    An item starting exactly when the current one ends is NOT picked for today;
    the search then moves on to the following days.
    """
    items = list(items)
    now = now or local_now()
    moment = Moment.of(now)

    current = get_current_activity(items, now)
    after = _end(current) if current is not None else moment.time

    today = sorted(
        (i for i in _on_day(items, moment.day) if _start(i) > after),
        key=_start,
    )
    if today:
        return today[0]

    for offset in range(1, 7):
        day = (moment.day + offset) % 7
        day_items = _on_day(items, day)
        if day_items:
            return min(day_items, key=_start)

    return None


def get_time_until(item: Optional[TimeBlock], now: datetime | None = None) -> str:
    """
    in 25 minutes / in 3 hours / in 1 day
    """
    if item is None:
        return ""

    now = now or local_now()
    today = DayOfWeek.of(now)
    target = _start(item).on(now)

    if item.day_of_week != today or target <= now:
        if item.day_of_week > today:
            days_until = item.day_of_week - today
        else:
            days_until = 7 - (today - item.day_of_week)
        target += timedelta(days=days_until)

    minutes = _whole_minutes(target - now)

    if minutes < MINUTES_PER_HOUR:
        return f"in {minutes} minutes"
    if minutes < MINUTES_PER_DAY:
        hours = minutes // MINUTES_PER_HOUR
        return f"in {hours} hour{'s' if hours > 1 else ''}"
    days = minutes // MINUTES_PER_DAY
    return f"in {days} day{'s' if days > 1 else ''}"


def get_time_remaining(item: Optional[TimeBlock], now: datetime | None = None) -> str:
    """
    Time left before item ends today: 42 min remaining / 1h 5m remaining.
    """
    if item is None:
        return ""

    now = now or local_now()
    minutes = _whole_minutes(_end(item).on(now) - now)

    if minutes <= 0:
        return "ending now"
    if minutes < MINUTES_PER_HOUR:
        return f"{minutes} min remaining"

    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours}h {mins}m remaining"
