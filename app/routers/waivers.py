# Waiver API: the text a participant accepts by joining
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.crud.waiver_crud import get_waiver_text
from app.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hike", tags=["Waivers"])


@router.get("/{join_code}/waiver", response_class=PlainTextResponse)
def get_hike_waiver(join_code: str, db: Session = Depends(get_db)) -> str:
    """Waiver for the hike, shown to a participant before joining."""
    text = get_waiver_text(db, join_code)
    if text is None:
        logger.info("Waiver requested for unknown hike %s", join_code)
        raise HTTPException(status_code=404, detail="Hike not found.")
    return text
