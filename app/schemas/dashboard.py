from typing import Optional

from app.schemas.schedule import CamelModel
from app.schemas.schedule_item import ScheduleItemOut


class CurrentActivityOut(CamelModel):
    item: ScheduleItemOut
    starts_at: str  # "7:45 AM"
    ends_at: str
    time_remaining: str  # "42 min remaining"


class NextActivityOut(CamelModel):
    item: ScheduleItemOut
    day_name: str  # "Mon"
    starts_at: str
    ends_at: str
    time_until: str  # "in 3 hours"


class DashboardOut(CamelModel):
    current_time: str
    current_date: str
    week_range: str
    today: str
    current_activity: Optional[CurrentActivityOut] = None
    next_activity: Optional[NextActivityOut] = None
