# Hike lifecycle CRUD: create, lookup by code, end, discovery queries
import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.crud.upsert import upsert
from app.models.hike import Hike, HikeStatus
from app.models.membership import Membership, MembershipStatus
from app.models.user import User
from app.schemas.common import UserSchema
from app.schemas.hike import HikeCreate
from app.services.codes import allocate_codes
from app.services.hike_status import can_transition
from app.utils.timeutils import as_utc, utcnow

logger = logging.getLogger(__name__)

# Fixed box of roughly a quarter mile around the caller. The longitude span is
# not scaled by latitude; results depend on these exact bounds.
LAT_TOLERANCE = 0.003623
LON_TOLERANCE = 0.003896
START_WINDOW = timedelta(hours=1)


def upsert_leader(db: Session, leader: UserSchema) -> User:
    """Insert the leader, or refresh only name and phone of an existing row."""
    upsert(
        db,
        User,
        {"uuid": leader.uuid, "name": leader.name, "phone": leader.phone},
        index_elements=["uuid"],
        update_columns=["name", "phone"],
    )
    return db.get(User, leader.uuid, populate_existing=True)


def _codes_taken(db: Session, codes: Iterable[str]) -> bool:
    codes = list(codes)
    hit = (
        db.query(Hike.join_code)
        .filter(or_(Hike.join_code.in_(codes), Hike.leader_code.in_(codes)))
        .first()
    )
    return hit is not None


def create_hike(db: Session, body: HikeCreate, now: Optional[datetime] = None) -> Hike:
    """
    Create an open hike and hand out its two codes.

    - Leader row is upserted first (name/phone only).
    - Codes are regenerated a bounded number of times if either already exists.

    ⚠️ Does not commit. The router owns the transaction.
    """
    leader = upsert_leader(db, body.leader)
    join_code, leader_code = allocate_codes(lambda codes: _codes_taken(db, codes))

    hike = Hike(
        name=body.name,
        organization=body.organization,
        trailhead_name=body.trailhead_name,
        leader=leader,
        latitude=body.latitude,
        longitude=body.longitude,
        created_at=as_utc(now) or utcnow(),
        start_time=as_utc(body.start_time),
        status=HikeStatus.OPEN.value,
        join_code=join_code,
        leader_code=leader_code,
        photo_release=body.photo_release,
        description=body.description,
    )
    db.add(hike)
    # Surface unique-constraint violations here rather than at commit.
    db.flush()
    return hike


def get_open_hike(db: Session, code: str, leader_code: Optional[str] = None) -> Optional[Hike]:
    """
    Resolve a code to an open hike.

    With leader_code the lookup is by leader code only. Otherwise `code` may be
    either the join code or the leader code. Closed hikes resolve to None, the
    same as unknown codes.
    """
    q = db.query(Hike).filter(Hike.status == HikeStatus.OPEN.value)
    if leader_code:
        q = q.filter(Hike.leader_code == leader_code)
    else:
        q = q.filter(or_(Hike.join_code == code, Hike.leader_code == code))
    return q.first()


def end_hike(db: Session, leader_code: str) -> Tuple[bool, int]:
    """
    Close the hike owned by leader_code and finish its active memberships.

    Idempotent: a second call closes nothing and finishes nothing, an unknown
    leader code likewise. Returns (closed_now, memberships_finished).

    ⚠️ Does not commit. Both writes land in the caller's transaction.
    """
    hike = (
        db.query(Hike)
        .filter(Hike.leader_code == leader_code)
        .with_for_update(of=Hike)
        .first()
    )
    if hike is None:
        return False, 0

    closed_now = False
    if can_transition(hike.status, HikeStatus.CLOSED.value):
        hike.status = HikeStatus.CLOSED.value
        closed_now = True
    else:
        logger.info("Hike %s is already %s, nothing to close", hike.join_code, hike.status)

    finished = (
        db.query(Membership)
        .filter(
            Membership.hike_join_code == hike.join_code,
            Membership.status == MembershipStatus.ACTIVE.value,
        )
        .update({Membership.status: MembershipStatus.FINISHED.value}, synchronize_session=False)
    )
    return closed_now, finished


def get_nearby_open_hikes(
    db: Session,
    latitude: float,
    longitude: float,
    now: Optional[datetime] = None,
) -> List[Hike]:
    """
    Open hikes inside the tolerance box whose start is within an hour of now.

    Both ranges are inclusive. This is a coarse box filter, not a distance.
    """
    now = as_utc(now) or utcnow()
    q = db.query(Hike).filter(
        Hike.latitude.between(latitude - LAT_TOLERANCE, latitude + LAT_TOLERANCE),
        Hike.longitude.between(longitude - LON_TOLERANCE, longitude + LON_TOLERANCE),
        Hike.status == HikeStatus.OPEN.value,
        Hike.start_time.between(now - START_WINDOW, now + START_WINDOW),
    )
    return q.all()


def get_hikes_joined_by(db: Session, user_uuid: str) -> List[Hike]:
    """Open hikes where the user still holds an active membership, latest start first."""
    q = (
        db.query(Hike)
        .join(Membership, Membership.hike_join_code == Hike.join_code)
        .filter(
            Membership.user_uuid == user_uuid,
            Membership.status == MembershipStatus.ACTIVE.value,
            Hike.status == HikeStatus.OPEN.value,
        )
        .order_by(Hike.start_time.desc())
    )
    return q.all()


def get_hikes_led_by(db: Session, user_uuid: str) -> List[Hike]:
    q = (
        db.query(Hike)
        .filter(Hike.leader_uuid == user_uuid, Hike.status == HikeStatus.OPEN.value)
        .order_by(Hike.start_time.desc())
    )
    return q.all()


def get_last_description(db: Session, hike_name: str, leader_uuid: str) -> str:
    """Description of the leader's most recent hike with this name, "" if none."""
    row = (
        db.query(Hike.description)
        .filter(Hike.name == hike_name, Hike.leader_uuid == leader_uuid)
        .order_by(Hike.created_at.desc())
        .first()
    )
    if row is None or row.description is None:
        return ""
    return row.description
