# Hike status rules: open -> closed, closed is terminal

from app.models.hike import HikeStatus

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    HikeStatus.OPEN.value: {HikeStatus.CLOSED.value},
    HikeStatus.CLOSED.value: set(),
}


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, set())


def accepts_participants(status: str) -> bool:
    """Memberships may only be created while the hike is open."""
    return status == HikeStatus.OPEN.value
