from datetime import datetime, timedelta

from app.utils.clock import ClockTime, DayOfWeek, local_now

# English names, independent of the host locale
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBR = tuple(m[:3] for m in MONTH_NAMES)


def _to_12h(hour: int) -> tuple[int, str]:
    ampm = "PM" if hour >= 12 else "AM"
    return (hour % 12 or 12), ampm


def get_current_time(now: datetime | None = None) -> str:
    """
    2:05:09 PM
    """
    now = now or local_now()
    hour, ampm = _to_12h(now.hour)
    return f"{hour}:{now.minute:02d}:{now.second:02d} {ampm}"


def get_current_date(now: datetime | None = None) -> str:
    """
    Thursday, August 28, 2025
    """
    now = now or local_now()
    weekday = WEEKDAY_NAMES[DayOfWeek.of(now)]
    return f"{weekday}, {MONTH_NAMES[now.month - 1]} {now.day}, {now.year}"


def get_current_week_range(now: datetime | None = None) -> str:
    """
    Sunday-to-Saturday week containing now, e.g. "Aug 24-Aug 30, 2025".
    The year is the one of the Saturday.
    """
    now = now or local_now()
    start = now.date() - timedelta(days=DayOfWeek.of(now))
    end = start + timedelta(days=6)
    return (
        f"{MONTH_ABBR[start.month - 1]} {start.day}-"
        f"{MONTH_ABBR[end.month - 1]} {end.day}, {end.year}"
    )


def get_day_name(day_of_week: int) -> str:
    # raises ValueError outside 0..6
    return DAY_NAMES[DayOfWeek(day_of_week)]


def format_time(time: str | ClockTime) -> str:
    """
    "00:15" -> "12:15 AM", "13:05" -> "1:05 PM"
    """
    t = ClockTime.parse(time)
    hour, ampm = _to_12h(t.hour)
    return f"{hour}:{t.minute:02d} {ampm}"
