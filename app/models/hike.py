# Hike model: one planned outing, addressed by its capability codes

from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String, Text, false
from sqlalchemy.orm import relationship

from app.models.base import Base


class HikeStatus(str, PyEnum):
    """Hike lifecycle. OPEN -> CLOSED once, never back."""

    OPEN = "open"
    CLOSED = "closed"


# Stored as String(20); compared against HikeStatus values in the app.
STATUS_DEFAULT = HikeStatus.OPEN.value


class Hike(Base):
    """Hikes table. Coordinates are raw values, not a trailhead reference."""

    __tablename__ = "hikes"

    name = Column(String(200), nullable=False)
    organization = Column(String(200), nullable=True)
    trailhead_name = Column(String(200), nullable=True)  # free text, no FK to trailheads
    leader_uuid = Column(String(64), ForeignKey("users.uuid"), nullable=False, index=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), nullable=False, default=STATUS_DEFAULT, server_default=STATUS_DEFAULT)
    join_code = Column(String(64), primary_key=True)
    leader_code = Column(String(64), unique=True, nullable=False)
    photo_release = Column(Boolean, nullable=False, default=False, server_default=false())
    description = Column(Text, nullable=True)

    leader = relationship("User", lazy="joined")
