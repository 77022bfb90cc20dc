from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.dashboard import DashboardOut, CurrentActivityOut, NextActivityOut
from app.schemas.schedule_item import ScheduleItemOut
from app.storage import ScheduleStorage, get_storage
from app.utils.activity import (
    get_current_activity,
    get_next_activity,
    get_time_remaining,
    get_time_until,
)
from app.utils.clock import DayOfWeek, get_now
from app.utils.time_format import (
    format_time,
    get_current_date,
    get_current_time,
    get_current_week_range,
    get_day_name,
)

import logging
logger = logging.getLogger("app.dashboard")

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardOut)
def get_dashboard(
    schedule_id: list[str] | None = Query(None, alias="scheduleId"),
    storage: ScheduleStorage = Depends(get_storage),
    now: datetime = Depends(get_now),
):
    try:
        # ordered by (day, start), as the resolver expects
        items = storage.get_all_schedule_items(schedule_id)
    except SQLAlchemyError:
        logger.exception("load dashboard items failed")
        raise HTTPException(500, "Failed to fetch schedule items")

    current = get_current_activity(items, now)
    upcoming = get_next_activity(items, now)

    current_out = None
    if current is not None:
        current_out = CurrentActivityOut(
            item=ScheduleItemOut.model_validate(current),
            starts_at=format_time(current.start_time),
            ends_at=format_time(current.end_time),
            time_remaining=get_time_remaining(current, now),
        )

    next_out = None
    if upcoming is not None:
        next_out = NextActivityOut(
            item=ScheduleItemOut.model_validate(upcoming),
            day_name=get_day_name(upcoming.day_of_week),
            starts_at=format_time(upcoming.start_time),
            ends_at=format_time(upcoming.end_time),
            time_until=get_time_until(upcoming, now),
        )

    return DashboardOut(
        current_time=get_current_time(now),
        current_date=get_current_date(now),
        week_range=get_current_week_range(now),
        today=get_day_name(DayOfWeek.of(now)),
        current_activity=current_out,
        next_activity=next_out,
    )
