# app/storage.py
import logging
import uuid
from typing import Iterable, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.schedule import Schedule
from app.models.schedule_item import ScheduleItem
from app.utils.clock import ClockTime

logger = logging.getLogger("app.storage")

# columns that may not be set to null on update
REQUIRED_ITEM_FIELDS = (
    "schedule_id", "title", "day_of_week", "start_time", "end_time", "duration", "is_completed",
)


class InvalidScheduleItem(ValueError):
    """Item payload is well-formed but inconsistent with stored data."""


def new_id() -> str:
    return str(uuid.uuid4())


def _duration(start_time: str, end_time: str) -> int:
    return ClockTime.parse(end_time) - ClockTime.parse(start_time)


class ScheduleStorage:
    """
    CRUD over schedules and their items.
    Deleting a schedule deletes its items.
    """

    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    # ---- schedules ----

    def get_schedules(self) -> list[Schedule]:
        return self.db.query(Schedule).order_by(Schedule.created_at, Schedule.id).all()

    def get_schedule(self, schedule_id: str) -> Optional[Schedule]:
        return self.db.get(Schedule, schedule_id)

    def create_schedule(self, data: dict, schedule_id: str | None = None) -> Schedule:
        schedule = Schedule(id=schedule_id or new_id(), **data)
        self.db.add(schedule)
        self._commit()
        self.db.refresh(schedule)
        logger.info("Created schedule %s (%s)", schedule.id, schedule.name)
        return schedule

    def update_schedule(self, schedule_id: str, data: dict) -> Optional[Schedule]:
        schedule = self.get_schedule(schedule_id)
        if not schedule:
            return None

        for k, v in data.items():
            setattr(schedule, k, v)

        self._commit()
        self.db.refresh(schedule)
        return schedule

    def delete_schedule(self, schedule_id: str) -> bool:
        schedule = self.get_schedule(schedule_id)
        if not schedule:
            return False

        deleted_items = (
            self.db.query(ScheduleItem)
            .filter(ScheduleItem.schedule_id == schedule_id)
            .delete(synchronize_session=False)
        )
        self.db.delete(schedule)
        self._commit()
        logger.info("Deleted schedule %s with %d items", schedule_id, deleted_items)
        return True

    # ---- schedule items ----

    def _items_query(self):
        return self.db.query(ScheduleItem).order_by(
            ScheduleItem.day_of_week, ScheduleItem.start_time, ScheduleItem.id
        )

    def get_schedule_items(self, schedule_id: str) -> list[ScheduleItem]:
        return self._items_query().filter(ScheduleItem.schedule_id == schedule_id).all()

    def get_all_schedule_items(self, schedule_ids: Iterable[str] | None = None) -> list[ScheduleItem]:
        q = self._items_query()
        if schedule_ids:
            q = q.filter(ScheduleItem.schedule_id.in_(list(schedule_ids)))
        return q.all()

    def get_schedule_item(self, item_id: str) -> Optional[ScheduleItem]:
        return self.db.get(ScheduleItem, item_id)

    def create_schedule_item(self, data: dict, item_id: str | None = None) -> ScheduleItem:
        if not self.get_schedule(data["schedule_id"]):
            raise InvalidScheduleItem(f"Schedule {data['schedule_id']} not found")

        data = dict(data)
        if data.get("duration") is None:
            data["duration"] = _duration(data["start_time"], data["end_time"])

        item = ScheduleItem(id=item_id or new_id(), **data)
        self.db.add(item)
        self._commit()
        self.db.refresh(item)
        return item

    def update_schedule_item(self, item_id: str, data: dict) -> Optional[ScheduleItem]:
        item = self.get_schedule_item(item_id)
        if not item:
            return None

        for k in REQUIRED_ITEM_FIELDS:
            if k in data and data[k] is None:
                raise InvalidScheduleItem(f"{k} cannot be null")

        schedule_id = data.get("schedule_id")
        if schedule_id is not None and not self.get_schedule(schedule_id):
            raise InvalidScheduleItem(f"Schedule {schedule_id} not found")

        start_time = data.get("start_time") or item.start_time
        end_time = data.get("end_time") or item.end_time
        if start_time >= end_time:
            raise InvalidScheduleItem("startTime must be earlier than endTime")

        data = dict(data)
        times_changed = "start_time" in data or "end_time" in data
        if times_changed and data.get("duration") is None:
            data["duration"] = _duration(start_time, end_time)

        for k, v in data.items():
            setattr(item, k, v)

        self._commit()
        self.db.refresh(item)
        return item

    def delete_schedule_item(self, item_id: str) -> bool:
        item = self.get_schedule_item(item_id)
        if not item:
            return False

        self.db.delete(item)
        self._commit()
        return True


def get_storage(db: Session = Depends(get_db)) -> ScheduleStorage:
    return ScheduleStorage(db)
