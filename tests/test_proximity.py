"""Tests for the coarse nearby-hike box filter."""

from datetime import datetime, timedelta, timezone

import pytest

from app.crud import hike_crud
from app.crud.hike_crud import LAT_TOLERANCE, LON_TOLERANCE
from app.schemas.common import UserSchema
from app.schemas.hike import HikeCreate

BASE_LAT = 21.3
BASE_LON = -157.8
NOW = datetime(2026, 10, 18, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def add_hike(db_session):
    def _add(name: str, latitude: float = BASE_LAT, longitude: float = BASE_LON, start: datetime = NOW):
        body = HikeCreate(
            name=name,
            leader=UserSchema(uuid="leader-geo", name="Geo Leader"),
            latitude=latitude,
            longitude=longitude,
            start_time=start,
        )
        hike = hike_crud.create_hike(db_session, body, now=NOW - timedelta(days=1))
        db_session.commit()
        return hike.join_code

    return _add


def _nearby_names(db_session) -> set:
    return {h.name for h in hike_crud.get_nearby_open_hikes(db_session, BASE_LAT, BASE_LON, now=NOW)}


def test_hike_at_box_edge_is_included(add_hike, db_session):
    add_hike("north-east edge", BASE_LAT + LAT_TOLERANCE, BASE_LON + LON_TOLERANCE)
    add_hike("south-west edge", BASE_LAT - LAT_TOLERANCE, BASE_LON - LON_TOLERANCE)
    assert _nearby_names(db_session) == {"north-east edge", "south-west edge"}


def test_hike_ten_tolerances_away_is_excluded(add_hike, db_session):
    add_hike("here")
    add_hike("far north", BASE_LAT + 10 * LAT_TOLERANCE, BASE_LON)
    add_hike("far west", BASE_LAT, BASE_LON - 10 * LON_TOLERANCE)
    assert _nearby_names(db_session) == {"here"}


def test_start_time_window_is_one_hour_each_way(add_hike, db_session):
    add_hike("starts in 30 min", start=NOW + timedelta(minutes=30))
    add_hike("started an hour ago", start=NOW - timedelta(hours=1))
    add_hike("starts in an hour", start=NOW + timedelta(hours=1))
    add_hike("starts in two hours", start=NOW + timedelta(hours=2))
    add_hike("started yesterday", start=NOW - timedelta(days=1))
    assert _nearby_names(db_session) == {
        "starts in 30 min",
        "started an hour ago",
        "starts in an hour",
    }


def test_start_time_offsets_are_normalized(add_hike, db_session):
    hst = timezone(timedelta(hours=-10))
    add_hike("local time", start=NOW.astimezone(hst) + timedelta(minutes=10))
    assert _nearby_names(db_session) == {"local time"}


def test_closed_hikes_are_excluded(add_hike, db_session):
    join_code = add_hike("closing")
    add_hike("still open")
    leader_code = hike_crud.get_open_hike(db_session, join_code).leader_code
    hike_crud.end_hike(db_session, leader_code)
    db_session.commit()
    assert _nearby_names(db_session) == {"still open"}


def test_nearby_endpoint(client, create_hike):
    near = create_hike(name="Near", latitude=BASE_LAT, longitude=BASE_LON)
    create_hike(name="Far", latitude=BASE_LAT + 10 * LAT_TOLERANCE, longitude=BASE_LON)

    resp = client.get("/hike", params={"latitude": BASE_LAT, "longitude": BASE_LON})
    assert resp.status_code == 200
    body = resp.json()
    assert [h["joinCode"] for h in body] == [near["joinCode"]]
    assert body[0]["sourceType"] == "location"
    assert "leaderCode" not in body[0]
