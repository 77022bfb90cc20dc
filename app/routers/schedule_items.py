from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.schedule_item import ScheduleItemCreate, ScheduleItemUpdate, ScheduleItemOut
from app.storage import InvalidScheduleItem, ScheduleStorage, get_storage

import logging
logger = logging.getLogger("app.schedule_items")

router = APIRouter(prefix="/api/schedule-items", tags=["Schedule Items"])


@router.get("", response_model=list[ScheduleItemOut])
def list_all_items(storage: ScheduleStorage = Depends(get_storage)):
    try:
        return storage.get_all_schedule_items()
    except SQLAlchemyError:
        logger.exception("list schedule items failed")
        raise HTTPException(500, "Failed to fetch schedule items")


@router.get("/{item_id}", response_model=ScheduleItemOut)
def get_item(item_id: str, storage: ScheduleStorage = Depends(get_storage)):
    try:
        item = storage.get_schedule_item(item_id)
    except SQLAlchemyError:
        logger.exception("get schedule item %s failed", item_id)
        raise HTTPException(500, "Failed to fetch schedule item")

    if not item:
        raise HTTPException(404, "Schedule item not found")
    return item


@router.post("", response_model=ScheduleItemOut, status_code=201)
def create_item(body: ScheduleItemCreate, storage: ScheduleStorage = Depends(get_storage)):
    try:
        return storage.create_schedule_item(body.model_dump(mode="json"))
    except InvalidScheduleItem as e:
        raise HTTPException(400, str(e))
    except SQLAlchemyError:
        logger.exception("create schedule item failed")
        raise HTTPException(400, "Invalid schedule item data")


@router.put("/{item_id}", response_model=ScheduleItemOut)
def update_item(
    item_id: str,
    body: ScheduleItemUpdate,
    storage: ScheduleStorage = Depends(get_storage),
):
    data = body.model_dump(mode="json", exclude_unset=True)
    try:
        item = storage.update_schedule_item(item_id, data)
    except InvalidScheduleItem as e:
        raise HTTPException(400, str(e))
    except SQLAlchemyError:
        logger.exception("update schedule item %s failed", item_id)
        raise HTTPException(400, "Invalid schedule item data")

    if not item:
        raise HTTPException(404, "Schedule item not found")
    return item


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: str, storage: ScheduleStorage = Depends(get_storage)):
    try:
        deleted = storage.delete_schedule_item(item_id)
    except SQLAlchemyError:
        logger.exception("delete schedule item %s failed", item_id)
        raise HTTPException(500, "Failed to delete schedule item")

    if not deleted:
        raise HTTPException(404, "Schedule item not found")
    return Response(status_code=204)
