# Membership model: a user's participation in one hike

from enum import Enum as PyEnum

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class MembershipStatus(str, PyEnum):
    """Statuses the server itself assigns. Clients may store any other string."""

    ACTIVE = "active"
    FINISHED = "finished"


class Membership(Base):
    """hike_users table. One row per (hike, user); rejoining overwrites it."""

    __tablename__ = "hike_users"

    hike_join_code = Column(String(64), ForeignKey("hikes.join_code"), primary_key=True)
    user_uuid = Column(String(64), ForeignKey("users.uuid"), primary_key=True)
    status = Column(
        String(50),
        nullable=False,
        default=MembershipStatus.ACTIVE.value,
        server_default=MembershipStatus.ACTIVE.value,
    )
    joined_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("User", lazy="joined")
