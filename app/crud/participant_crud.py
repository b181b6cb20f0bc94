# Participant CRUD: join, leave, list, status updates under a join code
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from app.crud.upsert import upsert
from app.crud.waiver_crud import delete_signature, sign_waiver
from app.models.hike import Hike
from app.models.membership import Membership, MembershipStatus
from app.models.user import User
from app.models.waiver_signature import WaiverSignature
from app.schemas.common import UserSchema
from app.services.hike_status import accepts_participants
from app.utils.timeutils import as_utc, utcnow

logger = logging.getLogger(__name__)


class JoinError(Exception):
    """Join refused (unknown hike or hike already ended)."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code


class LeaveError(Exception):
    """Leave refused (no membership, or membership no longer active)."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code


def upsert_participant(db: Session, profile: UserSchema) -> None:
    """Insert the participant or overwrite every profile field of the existing row."""
    upsert(
        db,
        User,
        {
            "uuid": profile.uuid,
            "name": profile.name,
            "phone": profile.phone,
            "license_plate": profile.license_plate,
            "emergency_contact": profile.emergency_contact,
        },
        index_elements=["uuid"],
        update_columns=["name", "phone", "license_plate", "emergency_contact"],
    )


def join_hike(
    db: Session,
    join_code: str,
    profile: UserSchema,
    user_agent: str = "",
    ip_address: str = "",
    now: Optional[datetime] = None,
) -> Hike:
    """
    Join (or rejoin) a hike and sign its waiver.

    - The hike row is locked FOR UPDATE so a join racing an end serializes.
    - Nothing is written unless the hike is open.
    - User, membership and waiver signature are single-statement upserts.
    - Rejoining resets status to active and joined_at to now.

    ⚠️ Does not commit. The router owns the transaction.
    """
    hike = (
        db.query(Hike)
        .filter(Hike.join_code == join_code)
        .with_for_update(of=Hike)
        .first()
    )
    if hike is None:
        raise JoinError("Hike not found", 404)
    if not accepts_participants(hike.status):
        logger.info("Join refused for closed hike %s", join_code)
        raise JoinError("Hike has already ended", 400)

    now = as_utc(now) or utcnow()
    upsert_participant(db, profile)
    upsert(
        db,
        Membership,
        {
            "hike_join_code": join_code,
            "user_uuid": profile.uuid,
            "status": MembershipStatus.ACTIVE.value,
            "joined_at": now,
        },
        index_elements=["hike_join_code", "user_uuid"],
        update_columns=["status", "joined_at"],
    )
    sign_waiver(db, hike, profile.uuid, user_agent, ip_address, now=now)
    return hike


def list_participants(db: Session, leader_code: str) -> List[Tuple[Membership, Optional[datetime]]]:
    """
    (membership, waiver signed_at) pairs of the hike owned by leader_code, in no
    particular order.

    An unknown leader code matches no hike and so no membership: [] rather than 404.
    """
    owned = select(Hike.join_code).where(Hike.leader_code == leader_code)
    return (
        db.query(Membership, WaiverSignature.signed_at)
        .outerjoin(
            WaiverSignature,
            and_(
                WaiverSignature.hike_join_code == Membership.hike_join_code,
                WaiverSignature.user_uuid == Membership.user_uuid,
            ),
        )
        .filter(Membership.hike_join_code.in_(owned))
        .all()
    )


def update_participant_status(db: Session, join_code: str, user_uuid: str, status: str) -> int:
    """
    Overwrite a membership status with any string, whatever state the hike is in.

    Returns the number of rows changed (0 or 1).
    """
    return (
        db.query(Membership)
        .filter(Membership.hike_join_code == join_code, Membership.user_uuid == user_uuid)
        .update({Membership.status: status}, synchronize_session=False)
    )


def leave_hike(db: Session, join_code: str, user_uuid: str) -> None:
    """
    Remove an active membership and its waiver signature. Finished or completed
    ones stay on record.
    """
    membership = db.get(Membership, (join_code, user_uuid))
    if membership is None:
        raise LeaveError("Participant not found for this hike", 404)
    if membership.status != MembershipStatus.ACTIVE.value:
        raise LeaveError(
            f"Cannot leave. Participant status is '{membership.status}', not 'active'.",
            400,
        )
    db.delete(membership)
    delete_signature(db, join_code, user_uuid)
