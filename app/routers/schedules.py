from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.schedule import ScheduleCreate, ScheduleUpdate, ScheduleOut
from app.schemas.schedule_item import ScheduleItemOut
from app.storage import ScheduleStorage, get_storage

import logging
logger = logging.getLogger("app.schedules")

router = APIRouter(prefix="/api/schedules", tags=["Schedules"])


@router.get("", response_model=list[ScheduleOut])
def list_schedules(storage: ScheduleStorage = Depends(get_storage)):
    try:
        return storage.get_schedules()
    except SQLAlchemyError:
        logger.exception("list schedules failed")
        raise HTTPException(500, "Failed to fetch schedules")


@router.get("/{schedule_id}", response_model=ScheduleOut)
def get_schedule(schedule_id: str, storage: ScheduleStorage = Depends(get_storage)):
    try:
        schedule = storage.get_schedule(schedule_id)
    except SQLAlchemyError:
        logger.exception("get schedule %s failed", schedule_id)
        raise HTTPException(500, "Failed to fetch schedule")

    if not schedule:
        raise HTTPException(404, "Schedule not found")
    return schedule


@router.post("", response_model=ScheduleOut, status_code=201)
def create_schedule(body: ScheduleCreate, storage: ScheduleStorage = Depends(get_storage)):
    try:
        return storage.create_schedule(body.model_dump())
    except SQLAlchemyError:
        logger.exception("create schedule failed")
        raise HTTPException(400, "Invalid schedule data")


@router.put("/{schedule_id}", response_model=ScheduleOut)
def update_schedule(
    schedule_id: str,
    body: ScheduleUpdate,
    storage: ScheduleStorage = Depends(get_storage),
):
    # every schedule column is NOT NULL, so null means "leave as is"
    data = body.model_dump(exclude_none=True)
    try:
        schedule = storage.update_schedule(schedule_id, data)
    except SQLAlchemyError:
        logger.exception("update schedule %s failed", schedule_id)
        raise HTTPException(400, "Invalid schedule data")

    if not schedule:
        raise HTTPException(404, "Schedule not found")
    return schedule


@router.delete("/{schedule_id}", status_code=204)
def delete_schedule(schedule_id: str, storage: ScheduleStorage = Depends(get_storage)):
    try:
        deleted = storage.delete_schedule(schedule_id)
    except SQLAlchemyError:
        logger.exception("delete schedule %s failed", schedule_id)
        raise HTTPException(500, "Failed to delete schedule")

    if not deleted:
        raise HTTPException(404, "Schedule not found")
    return Response(status_code=204)


@router.get("/{schedule_id}/items", response_model=list[ScheduleItemOut])
def list_schedule_items(schedule_id: str, storage: ScheduleStorage = Depends(get_storage)):
    try:
        return storage.get_schedule_items(schedule_id)
    except SQLAlchemyError:
        logger.exception("list items of schedule %s failed", schedule_id)
        raise HTTPException(500, "Failed to fetch schedule items")
