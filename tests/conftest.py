"""Shared fixtures: in-memory database, API client, pinned clock."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db, make_engine
from app.main import app
from app.storage import ScheduleStorage
from app.utils.clock import get_now
from app.utils.seed import seed_week

# Monday, 2025-08-25 08:00 local time
MONDAY_0800 = datetime(2025, 8, 25, 8, 0, 0)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage(db):
    return ScheduleStorage(db)


@pytest.fixture
def seeded(storage):
    """The demo Monday-Friday block week."""
    seed_week(storage)
    return storage


@pytest.fixture
def clock():
    """Pin the dashboard clock; call clock.set(dt) to move it."""

    class _Clock:
        now = MONDAY_0800

        def set(self, dt: datetime):
            self.now = dt

    c = _Clock()
    app.dependency_overrides[get_now] = lambda: c.now
    yield c
    app.dependency_overrides.pop(get_now, None)


@pytest.fixture
def client(session_factory, clock):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    # no context manager: skip lifespan (file database + seeding)
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)
