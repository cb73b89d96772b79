"""Database model for quiz participants."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow

NAME_MAX_LENGTH = 50


class User(SQLModel, table=True):
    """Participant identified by a unique, case-sensitive display name.

    Rows are created on first score submission and never renamed or removed.
    """

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True, max_length=NAME_MAX_LENGTH)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["NAME_MAX_LENGTH", "User"]
