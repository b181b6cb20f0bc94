# Participant request/response schemas

from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel, UserSchema


class JoinBody(CamelModel):
    """Join request: the full participant profile, overwritten on every join."""

    user: UserSchema


class StatusBody(CamelModel):
    """Any string is accepted; "finished" and "completed" are the usual ones."""

    status: str


class ParticipantOut(CamelModel):
    user: UserSchema
    status: str
    joined_at: datetime
    # When the participant accepted the hike's waiver.
    signed_at: Optional[datetime] = None
