"""Database model for persisted quiz results."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow

CATEGORY_MAX_LENGTH = 50


class ScoreRecord(SQLModel, table=True):
    """Outcome of one quiz session. Append-only."""

    __tablename__ = "score_record"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="user.id", index=True)
    category: str = ORMField(index=True, max_length=CATEGORY_MAX_LENGTH)
    score: int
    created_at: datetime = ORMField(default_factory=utcnow, index=True)


__all__ = ["CATEGORY_MAX_LENGTH", "ScoreRecord"]
