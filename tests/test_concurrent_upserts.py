"""Interleaved sessions writing the same first-time user must not collide."""

from datetime import datetime, timedelta, timezone

from app.crud import hike_crud, participant_crud
from app.models.hike import Hike
from app.models.membership import Membership
from app.models.user import User
from app.schemas.common import UserSchema
from app.schemas.hike import HikeCreate

START = datetime.now(timezone.utc) + timedelta(minutes=30)


def _open_hike(session_factory, name: str) -> str:
    db = session_factory()
    try:
        body = HikeCreate(name=name, leader=UserSchema(uuid=f"leader-{name}", name="Lee"), start_time=START)
        join_code = hike_crud.create_hike(db, body).join_code
        db.commit()
        return join_code
    finally:
        db.close()


def test_first_join_to_two_hikes_at_once(session_factory, db_session):
    code_a = _open_hike(session_factory, "a")
    code_b = _open_hike(session_factory, "b")
    newbie = UserSchema(uuid="newbie", name="New Hiker", phone="808-555-0123")

    s1, s2 = session_factory(), session_factory()
    try:
        participant_crud.upsert_participant(s1, newbie)

        participant_crud.join_hike(s2, code_b, newbie)
        s2.commit()

        participant_crud.join_hike(s1, code_a, newbie)
        s1.commit()
    finally:
        s1.close()
        s2.close()

    assert db_session.get(User, "newbie").name == "New Hiker"
    joined = {m.hike_join_code for m in db_session.query(Membership).filter(Membership.user_uuid == "newbie")}
    assert joined == {code_a, code_b}


def test_new_leader_creating_two_hikes_at_once(session_factory, db_session):
    leader = UserSchema(uuid="new-leader", name="Nalu", phone="808-555-0177")

    s1, s2 = session_factory(), session_factory()
    try:
        hike_crud.upsert_leader(s1, leader)

        hike_crud.create_hike(s2, HikeCreate(name="second", leader=leader, start_time=START))
        s2.commit()

        first = hike_crud.create_hike(s1, HikeCreate(name="first", leader=leader, start_time=START))
        assert first.leader.name == "Nalu"
        s1.commit()
    finally:
        s1.close()
        s2.close()

    names = {h.name for h in db_session.query(Hike).filter(Hike.leader_uuid == "new-leader")}
    assert names == {"first", "second"}


def test_rejoin_in_a_stale_session_updates_membership(session_factory, db_session):
    code = _open_hike(session_factory, "c")
    hiker = UserSchema(uuid="hiker", name="Hoku")

    s1, s2 = session_factory(), session_factory()
    try:
        participant_crud.join_hike(s1, code, hiker)

        participant_crud.join_hike(s2, code, hiker)
        s2.commit()

        s1.commit()
    finally:
        s1.close()
        s2.close()

    memberships = db_session.query(Membership).filter(Membership.hike_join_code == code).all()
    assert [(m.user_uuid, m.status) for m in memberships] == [("hiker", "active")]
