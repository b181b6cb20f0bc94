# Trailhead seeding and autocomplete lookup

import logging
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.data.trailheads import PREDEFINED_TRAILHEADS
from app.models.trailhead import Trailhead

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 5


def seed_trailheads(db: Session) -> int:
    """Insert the predefined trailheads if the table is empty. Returns rows added."""
    if db.query(Trailhead.id).first() is not None:
        return 0
    db.add_all(
        Trailhead(name=name, latitude=lat, longitude=lon)
        for name, lat, lon in PREDEFINED_TRAILHEADS
    )
    logger.info("Seeded %d trailheads", len(PREDEFINED_TRAILHEADS))
    return len(PREDEFINED_TRAILHEADS)


def suggest_trailheads(db: Session, query: str) -> List[Trailhead]:
    """
    Up to SUGGESTION_LIMIT trailheads whose name contains `query`.

    Apostrophes are stripped from names before matching so "Kaena" finds "Ka'ena".
    """
    if not query:
        return []
    bare_name = func.replace(Trailhead.name, "'", "")
    return (
        db.query(Trailhead)
        .filter(bare_name.ilike(f"%{query}%"))
        .limit(SUGGESTION_LIMIT)
        .all()
    )
