# Waiver signature: the liability waiver a participant accepted on joining

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.models.base import Base


class WaiverSignature(Base):
    """
    waiver_signatures table. One row per (user, hike), replaced on rejoin and
    removed on leave. waiver_text is the exact text rendered at signing time.
    """

    __tablename__ = "waiver_signatures"

    user_uuid = Column(String(64), ForeignKey("users.uuid"), primary_key=True)
    hike_join_code = Column(String(64), ForeignKey("hikes.join_code"), primary_key=True)
    signed_at = Column(DateTime(timezone=True), nullable=False)
    user_agent = Column(Text, nullable=False)
    ip_address = Column(String(64), nullable=False)
    waiver_text = Column(Text, nullable=False)
