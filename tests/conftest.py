"""Shared fixtures: an isolated in-memory store per test and a client bound to it."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

# Must be set before the app (and its module-level engine) is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ACTION_LOG_PATH"] = os.path.join(tempfile.gettempdir(), "hiketracker-test.log")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.crud.trailhead_crud import seed_trailheads
from app.database import get_db
from app.main import app
from app.models import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    seed_trailheads(db)
    db.commit()
    db.close()
    return factory


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: startup (Alembic against DATABASE_URL) stays off.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def hike_payload():
    def _payload(**overrides) -> dict:
        payload = {
            "name": "Sunrise on Wiliwilinui",
            "organization": "Oahu Trail Club",
            "trailheadName": "Wiliwilinui Ridge",
            "leader": {"uuid": "leader-1", "name": "Kai Leader", "phone": "808-555-0100"},
            "latitude": 21.29927,
            "longitude": -157.76274,
            "startTime": (datetime.now(timezone.utc) + timedelta(minutes=15)).isoformat(),
            "photoRelease": False,
            "description": "Bring two liters of water.",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def create_hike(client, hike_payload):
    """POST /hike and return the creation body (both codes included)."""

    def _create(**overrides) -> dict:
        resp = client.post("/hike", json=hike_payload(**overrides))
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create


@pytest.fixture
def join_hike(client):
    """POST a participant to a join code and return the raw response."""

    def _join(join_code: str, uuid: str = "hiker-1", name: str = "Alex Hiker", **profile):
        user = {"uuid": uuid, "name": name, "phone": "808-555-0199", **profile}
        return client.post(f"/hike/{join_code}/participant", json={"user": user})

    return _join