from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize to an aware UTC datetime.

    SQLite hands back naive values and clients may send naive ones; both are
    taken to be UTC already. Everything written to the store goes through here
    so that string comparison on SQLite and timestamptz on Postgres agree.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
