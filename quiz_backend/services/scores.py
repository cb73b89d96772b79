"""Append-only persistence of quiz results."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Session

from ..core.errors import InvalidInput, storage_guard
from ..core.time import utcnow
from ..models import CATEGORY_MAX_LENGTH, ScoreRecord


def normalize_category(category: object) -> str:
    if not isinstance(category, str) or not category.strip():
        raise InvalidInput("Category is required")
    cleaned = category.strip()
    if len(cleaned) > CATEGORY_MAX_LENGTH:
        raise InvalidInput(f"Category must be {CATEGORY_MAX_LENGTH} characters or less")
    return cleaned


def record_score(
    session: Session,
    user_id: int,
    category: str,
    score: int,
    timestamp: Optional[datetime] = None,
) -> int:
    """Insert one score row and return its id. Storage errors are not retried."""

    if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= 100:
        raise InvalidInput("Score must be an integer between 0 and 100")

    record = ScoreRecord(
        user_id=user_id,
        category=normalize_category(category),
        score=score,
        created_at=timestamp or utcnow(),
    )
    with storage_guard("store quiz score"):
        session.add(record)
        session.commit()
        session.refresh(record)
    return record.id


__all__ = ["normalize_category", "record_score"]
