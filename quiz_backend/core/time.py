"""Time helpers shared by models and serialisers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """Render a stored timestamp as ISO-8601 with an explicit UTC marker.

    SQLite hands back naive datetimes even though we always write UTC, so a
    missing tzinfo is taken to mean UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.isoformat() + "Z"
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


__all__ = ["isoformat_utc", "utcnow"]
