"""HTTP tests for /api/schedules and /api/schedule-items."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.main import app
from app.storage import get_storage

SCHEDULE = {
    "name": "Monday Classes",
    "description": "Monday class schedule",
    "category": "academic",
    "color": "hsl(142.1 76.2% 36.3%)",
}


def _item(schedule_id, **overrides):
    body = {
        "scheduleId": schedule_id,
        "title": "Block A",
        "teacher": "Yeager, Gabriel",
        "room": "230",
        "period": 1,
        "dayOfWeek": 1,
        "startTime": "07:45",
        "endTime": "08:44",
    }
    body.update(overrides)
    return body


@pytest.fixture
def schedule(client):
    res = client.post("/api/schedules", json=SCHEDULE)
    assert res.status_code == 201
    return res.json()


def test_root(client):
    assert client.get("/").json() == {"message": "Schedule backend is running!"}


# schedules


def test_create_schedule_returns_camel_case(schedule):
    assert schedule["isActive"] is True
    assert {"id", "createdAt", "updatedAt"} <= schedule.keys()


def test_create_schedule_accepts_snake_case(client):
    res = client.post("/api/schedules", json={**SCHEDULE, "is_active": False})
    assert res.status_code == 201
    assert res.json()["isActive"] is False


def test_create_schedule_missing_field(client):
    body = {k: v for k, v in SCHEDULE.items() if k != "name"}
    assert client.post("/api/schedules", json=body).status_code == 400


def test_list_and_get_schedule(client, schedule):
    assert [s["id"] for s in client.get("/api/schedules").json()] == [schedule["id"]]
    assert client.get(f"/api/schedules/{schedule['id']}").json()["name"] == "Monday Classes"


def test_get_missing_schedule(client):
    res = client.get("/api/schedules/nope")
    assert res.status_code == 404
    assert res.json()["detail"] == "Schedule not found"


def test_update_schedule(client, schedule):
    res = client.put(f"/api/schedules/{schedule['id']}", json={"name": "Mon", "isActive": False})
    assert res.status_code == 200
    body = res.json()
    assert (body["name"], body["isActive"], body["category"]) == ("Mon", False, "academic")


def test_update_schedule_null_leaves_field(client, schedule):
    res = client.put(f"/api/schedules/{schedule['id']}", json={"name": None, "color": "red"})
    assert res.status_code == 200
    assert (res.json()["name"], res.json()["color"]) == ("Monday Classes", "red")


def test_update_schedule_bad_type(client, schedule):
    res = client.put(f"/api/schedules/{schedule['id']}", json={"isActive": "maybe"})
    assert res.status_code == 400


def test_update_missing_schedule(client):
    assert client.put("/api/schedules/nope", json={"name": "x"}).status_code == 404


def test_delete_schedule_removes_items(client, schedule):
    item = client.post("/api/schedule-items", json=_item(schedule["id"])).json()

    res = client.delete(f"/api/schedules/{schedule['id']}")
    assert res.status_code == 204
    assert res.content == b""
    assert client.get(f"/api/schedule-items/{item['id']}").status_code == 404
    assert client.get(f"/api/schedules/{schedule['id']}/items").json() == []


def test_delete_missing_schedule(client):
    assert client.delete("/api/schedules/nope").status_code == 404


def test_storage_failure_is_500(client):
    class Broken:
        def get_schedules(self):
            raise OperationalError("SELECT", {}, Exception("db down"))

    app.dependency_overrides[get_storage] = lambda: Broken()
    try:
        res = client.get("/api/schedules")
    finally:
        app.dependency_overrides.pop(get_storage, None)

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to fetch schedules"


# schedule items


def test_create_item(client, schedule):
    res = client.post("/api/schedule-items", json=_item(schedule["id"]))
    assert res.status_code == 201
    body = res.json()
    assert body["dayOfWeek"] == 1
    assert body["duration"] == 59
    assert body["isCompleted"] is False
    assert body["description"] is None


def test_create_item_keeps_explicit_duration(client, schedule):
    res = client.post("/api/schedule-items", json=_item(schedule["id"], duration=50))
    assert res.json()["duration"] == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"dayOfWeek": 7},
        {"dayOfWeek": -1},
        {"startTime": "7:45"},
        {"endTime": "24:00"},
        {"startTime": "09:00", "endTime": "08:00"},
        {"startTime": "08:00", "endTime": "08:00"},
        {"period": -2},
        {"title": None},
    ],
)
def test_create_item_rejects_bad_payload(client, schedule, overrides):
    res = client.post("/api/schedule-items", json=_item(schedule["id"], **overrides))
    assert res.status_code == 400


def test_create_item_unknown_schedule(client):
    res = client.post("/api/schedule-items", json=_item("nope"))
    assert res.status_code == 400
    assert "not found" in res.json()["detail"]


def test_list_items(client, schedule):
    client.post("/api/schedule-items", json=_item(schedule["id"], title="late", startTime="13:00", endTime="14:00"))
    client.post("/api/schedule-items", json=_item(schedule["id"], title="early"))

    titles = [i["title"] for i in client.get(f"/api/schedules/{schedule['id']}/items").json()]
    assert titles == ["early", "late"]
    assert len(client.get("/api/schedule-items").json()) == 2


def test_update_item(client, schedule):
    item = client.post("/api/schedule-items", json=_item(schedule["id"])).json()

    res = client.put(f"/api/schedule-items/{item['id']}", json={"room": "101", "endTime": "09:00"})
    assert res.status_code == 200
    body = res.json()
    assert (body["room"], body["endTime"], body["duration"]) == ("101", "09:00", 75)
    assert body["title"] == "Block A"


def test_update_item_inverted_times(client, schedule):
    item = client.post("/api/schedule-items", json=_item(schedule["id"])).json()
    res = client.put(f"/api/schedule-items/{item['id']}", json={"startTime": "10:00"})
    assert res.status_code == 400


def test_update_item_null_title(client, schedule):
    item = client.post("/api/schedule-items", json=_item(schedule["id"])).json()
    res = client.put(f"/api/schedule-items/{item['id']}", json={"title": None})
    assert res.status_code == 400


def test_update_missing_item(client):
    assert client.put("/api/schedule-items/nope", json={"title": "x"}).status_code == 404


def test_delete_item(client, schedule):
    item = client.post("/api/schedule-items", json=_item(schedule["id"])).json()
    assert client.delete(f"/api/schedule-items/{item['id']}").status_code == 204
    assert client.delete(f"/api/schedule-items/{item['id']}").status_code == 404
