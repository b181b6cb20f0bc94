# Hike API request/response schemas

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.common import CamelModel, UserSchema

HikeSourceLiteral = Literal["location", "joined", "led_by_user"]


class HikeCreate(CamelModel):
    """Hike creation request. Only decodability is checked, not plausibility."""

    name: str = ""
    organization: Optional[str] = None
    trailhead_name: Optional[str] = None
    leader: UserSchema = Field(default_factory=UserSchema)
    latitude: float = 0.0
    longitude: float = 0.0
    start_time: datetime
    photo_release: bool = False
    description: Optional[str] = None


class HikeEndBody(CamelModel):
    """Body of the end-hike call. The path leader code is what authorizes it."""

    join_code: Optional[str] = None
    leader_code: Optional[str] = None


class LeaderOut(CamelModel):
    name: str
    phone: Optional[str] = None


class HikeResponse(CamelModel):
    """Hike as any code holder sees it. Never carries the leader code."""

    name: str
    organization: Optional[str] = None
    trailhead_name: Optional[str] = None
    leader: LeaderOut
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    start_time: datetime
    status: str
    join_code: str
    photo_release: bool = False
    description: Optional[str] = None
    # Only set by GET /hike listings: which filter matched.
    source_type: Optional[HikeSourceLiteral] = None


class HikeCreated(HikeResponse):
    """Creation response, the one place the leader code is handed out."""

    leader_code: str


class LastDescriptionOut(BaseModel):
    description: str = ""
