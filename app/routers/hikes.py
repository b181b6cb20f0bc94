# Hike API: create, read by code, end, discovery
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.action_log import action_logger
from app.crud.hike_crud import (
    create_hike,
    end_hike,
    get_hikes_joined_by,
    get_hikes_led_by,
    get_last_description,
    get_nearby_open_hikes,
    get_open_hike,
)
from app.database import get_db
from app.models.hike import Hike
from app.schemas.hike import HikeCreate, HikeCreated, HikeEndBody, HikeResponse, LastDescriptionOut, LeaderOut
from app.services.codes import CodeAllocationError
from app.services.description import render_description
from app.utils.timeutils import as_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hike", tags=["Hikes"])


def _hike_fields(hike: Hike) -> Dict[str, Any]:
    leader = hike.leader
    return {
        "name": hike.name,
        "organization": hike.organization,
        "trailhead_name": hike.trailhead_name,
        "leader": LeaderOut(name=leader.name if leader else "", phone=leader.phone if leader else None),
        "latitude": hike.latitude,
        "longitude": hike.longitude,
        "start_time": as_utc(hike.start_time),
        "status": hike.status,
        "join_code": hike.join_code,
        "photo_release": bool(hike.photo_release),
        "description": render_description(hike.description),
    }


def hike_to_response(hike: Hike, source_type: Optional[str] = None) -> HikeResponse:
    """Public view of a hike, description as HTML. HikeResponse has no leader code field."""
    return HikeResponse(**_hike_fields(hike), source_type=source_type)


@router.post("", response_model=HikeCreated)
def post_hike(body: HikeCreate, db: Session = Depends(get_db)) -> HikeCreated:
    """Create an open hike. The only response that ever contains the leader code."""
    try:
        hike = create_hike(db, body)
        db.commit()
    except CodeAllocationError as e:
        db.rollback()
        logger.error("Hike creation failed: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Hike creation failed")
        raise HTTPException(status_code=500, detail=str(e))

    response = HikeCreated(**_hike_fields(hike), leader_code=hike.leader_code)
    action_logger.info(
        "Hike created: %s by %s, starting at %s",
        response.name,
        response.leader.name,
        response.start_time.isoformat(),
    )
    return response


@router.get("", response_model=List[HikeResponse])
def list_hikes(
    latitude: Optional[float] = Query(None),
    longitude: Optional[float] = Query(None),
    user_uuid: Optional[str] = Query(None, alias="userUUID"),
    db: Session = Depends(get_db),
) -> List[HikeResponse]:
    """
    Discovery. latitude+longitude: open hikes nearby starting within the hour.
    userUUID: open hikes the user joined, then those the user leads.
    Results of both filters are concatenated as-is; no parameters gives [].
    """
    hikes: List[HikeResponse] = []
    if latitude is not None and longitude is not None:
        hikes += [hike_to_response(h, "location") for h in get_nearby_open_hikes(db, latitude, longitude)]
    if user_uuid:
        hikes += [hike_to_response(h, "joined") for h in get_hikes_joined_by(db, user_uuid)]
        hikes += [hike_to_response(h, "led_by_user") for h in get_hikes_led_by(db, user_uuid)]
    return hikes


@router.get("/lastdescription", response_model=LastDescriptionOut)
def get_hike_last_description(
    hike_name: Optional[str] = Query(None, alias="hikeName"),
    leader_uuid: Optional[str] = Query(None, alias="leaderUUID"),
    db: Session = Depends(get_db),
) -> LastDescriptionOut:
    """Prefill for a leader re-running a hike they have organized before."""
    if not hike_name or not leader_uuid:
        raise HTTPException(status_code=400, detail="hikeName and leaderUUID query parameters are required")
    return LastDescriptionOut(description=get_last_description(db, hike_name, leader_uuid))


@router.get("/{code}", response_model=HikeResponse)
def get_hike(
    code: str,
    leader_code: Optional[str] = Query(None, alias="leaderCode"),
    db: Session = Depends(get_db),
) -> HikeResponse:
    """Open hike by join code, or by leader code (path or query). Closed hikes are 404 too."""
    hike = get_open_hike(db, code, leader_code)
    if hike is None:
        raise HTTPException(status_code=404, detail="Hike not found or already closed")
    return hike_to_response(hike)


@router.put("/{leader_code}")
def put_end_hike(leader_code: str, body: HikeEndBody, db: Session = Depends(get_db)) -> Response:
    """
    End the hike owned by leader_code and finish its active participants.

    Both writes commit together. Already closed or unknown: still 200.
    """
    try:
        closed_now, finished = end_hike(db, leader_code)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Ending hike failed")
        raise HTTPException(status_code=500, detail=str(e))

    if closed_now:
        action_logger.info("Hike closed, %d participants finished", finished)
    else:
        logger.info("End requested for a hike that is unknown or already closed")
    return Response(status_code=200)
