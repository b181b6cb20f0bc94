# Trailhead autocomplete API
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.crud.trailhead_crud import suggest_trailheads
from app.database import get_db
from app.schemas.trailhead import TrailheadOut

router = APIRouter(prefix="/trailhead", tags=["Trailheads"])


@router.get("", response_model=List[TrailheadOut])
def get_trailhead_suggestions(q: str = Query(""), db: Session = Depends(get_db)) -> List[TrailheadOut]:
    """At most five name matches for the hike form. Empty q gives []."""
    return [TrailheadOut.model_validate(t) for t in suggest_trailheads(db, q)]
