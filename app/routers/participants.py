# Participant API: join, leave, list, status updates
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.action_log import action_logger
from app.crud.participant_crud import (
    JoinError,
    LeaveError,
    join_hike,
    leave_hike,
    list_participants,
    update_participant_status,
)
from app.database import get_db
from app.routers.hikes import hike_to_response
from app.schemas.common import UserSchema
from app.schemas.hike import HikeResponse
from app.schemas.participant import JoinBody, ParticipantOut, StatusBody
from app.utils.timeutils import as_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hike", tags=["Participants"])


def client_ip(request: Request) -> str:
    """First X-Forwarded-For hop when behind a proxy, else the peer address."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else ""


@router.post("/{join_code}/participant", response_model=HikeResponse)
def post_join(join_code: str, body: JoinBody, request: Request, db: Session = Depends(get_db)) -> HikeResponse:
    """Join an open hike with the join code and sign its waiver. Rejoining reactivates the membership."""
    try:
        hike = join_hike(
            db,
            join_code,
            body.user,
            user_agent=request.headers.get("user-agent", ""),
            ip_address=client_ip(request),
        )
        db.commit()  # ✅ transaction owned by the router
    except JoinError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Join failed")
        raise HTTPException(status_code=500, detail=str(e))

    response = hike_to_response(hike)
    action_logger.info("Participant joined hike: %s (%s), waiver signed", body.user.name, response.name)
    return response


@router.get("/{hike_code}/participant", response_model=List[ParticipantOut])
def get_participants(
    hike_code: str,
    leader_code: str = Query("", alias="leaderCode"),
    db: Session = Depends(get_db),
) -> List[ParticipantOut]:
    """Participants of the leader's hike. The path segment is not consulted; an unmatched leader code gives []."""
    return [
        ParticipantOut(
            user=UserSchema.model_validate(m.user),
            status=m.status,
            joined_at=as_utc(m.joined_at),
            signed_at=as_utc(signed_at),
        )
        for m, signed_at in list_participants(db, leader_code)
    ]


@router.put("/{join_code}/participant/{user_id}")
def put_participant_status(
    join_code: str,
    user_id: str,
    body: StatusBody,
    db: Session = Depends(get_db),
) -> Response:
    """Set a participant's status to any string, even after the hike has closed."""
    try:
        updated = update_participant_status(db, join_code, user_id, body.status)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Status update failed")
        raise HTTPException(status_code=500, detail=str(e))

    if updated:
        action_logger.info("Participant status updated: %s, new status: %s", user_id, body.status)
    else:
        logger.info("Status update matched no participant (user %s)", user_id)
    return Response(status_code=200)


@router.delete("/{join_code}/participant/{user_id}")
def delete_participant(join_code: str, user_id: str, db: Session = Depends(get_db)) -> Response:
    """Leave a hike. Only an active membership can be withdrawn."""
    try:
        leave_hike(db, join_code, user_id)
        db.commit()
    except LeaveError as e:
        db.rollback()
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Leave failed")
        raise HTTPException(status_code=500, detail=str(e))

    action_logger.info("Participant left hike: %s, waiver withdrawn", user_id)
    return Response(status_code=200)
