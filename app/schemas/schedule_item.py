from typing import Annotated, Optional
from datetime import datetime
from pydantic import Field, StringConstraints, model_validator

from app.schemas.schedule import CamelModel
from app.utils.clock import HHMM_PATTERN, DayOfWeek

HHMM = Annotated[str, StringConstraints(pattern=HHMM_PATTERN)]


class ScheduleItemBase(CamelModel):
    schedule_id: str
    title: str
    description: Optional[str] = None
    teacher: Optional[str] = None
    room: Optional[str] = None
    period: Optional[int] = Field(None, ge=0)
    grade: Optional[str] = None
    day_of_week: DayOfWeek
    start_time: HHMM
    end_time: HHMM
    is_completed: bool = False


class ScheduleItemCreate(ScheduleItemBase):
    # filled from end_time - start_time when omitted
    duration: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_order(self):
        # zero-padded HH:MM compares like the numeric time
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be earlier than endTime")
        return self


class ScheduleItemUpdate(CamelModel):
    schedule_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    teacher: Optional[str] = None
    room: Optional[str] = None
    period: Optional[int] = Field(None, ge=0)
    grade: Optional[str] = None
    day_of_week: Optional[DayOfWeek] = None
    start_time: Optional[HHMM] = None
    end_time: Optional[HHMM] = None
    duration: Optional[int] = Field(None, ge=0)
    is_completed: Optional[bool] = None


class ScheduleItemOut(ScheduleItemBase):
    id: str
    duration: int
    created_at: datetime
