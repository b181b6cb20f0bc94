# Waiver CRUD: render a hike's waiver, record and withdraw signatures
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.crud.upsert import upsert
from app.models.hike import Hike
from app.models.waiver_signature import WaiverSignature
from app.services.waiver import render_waiver
from app.utils.timeutils import as_utc, utcnow

logger = logging.getLogger(__name__)


def waiver_text_for(hike: Hike) -> str:
    leader = hike.leader
    return render_waiver(leader.name if leader else "", hike.organization, bool(hike.photo_release))


def get_waiver_text(db: Session, join_code: str) -> Optional[str]:
    """Waiver of the hike with this join code, open or closed. None if no such hike."""
    hike = db.get(Hike, join_code)
    if hike is None:
        return None
    return waiver_text_for(hike)


def sign_waiver(
    db: Session,
    hike: Hike,
    user_uuid: str,
    user_agent: str,
    ip_address: str,
    now: Optional[datetime] = None,
) -> None:
    """
    Record that user_uuid accepted the hike's current waiver. A rejoin replaces
    the earlier signature.

    ⚠️ Does not commit. Written in the same transaction as the membership.
    """
    upsert(
        db,
        WaiverSignature,
        {
            "user_uuid": user_uuid,
            "hike_join_code": hike.join_code,
            "signed_at": as_utc(now) or utcnow(),
            "user_agent": user_agent,
            "ip_address": ip_address,
            "waiver_text": waiver_text_for(hike),
        },
        index_elements=["user_uuid", "hike_join_code"],
        update_columns=["signed_at", "user_agent", "ip_address", "waiver_text"],
    )


def delete_signature(db: Session, join_code: str, user_uuid: str) -> int:
    deleted = (
        db.query(WaiverSignature)
        .filter(WaiverSignature.hike_join_code == join_code, WaiverSignature.user_uuid == user_uuid)
        .delete(synchronize_session=False)
    )
    if not deleted:
        logger.info("No waiver signature to remove for %s on %s", user_uuid, join_code)
    return deleted
