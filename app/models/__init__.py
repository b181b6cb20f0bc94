from app.models.base import Base
from app.models.hike import Hike, HikeStatus
from app.models.membership import Membership, MembershipStatus
from app.models.trailhead import Trailhead
from app.models.user import User
from app.models.waiver_signature import WaiverSignature

__all__ = [
    "Base",
    "Hike",
    "HikeStatus",
    "Membership",
    "MembershipStatus",
    "Trailhead",
    "User",
    "WaiverSignature",
]
