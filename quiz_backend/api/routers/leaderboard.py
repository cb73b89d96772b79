"""Leaderboard endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import (
    LEADERBOARD_LIMIT,
    SQL_INTEGER_MAX,
    InvalidInput,
    NoData,
    get_session,
)
from ...services.leaderboard import best_scores, top_scores, top_users
from ...services.ranking import with_ranks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quiz", tags=["leaderboard"])


def _parse_min_categories(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidInput("min_categories must be an integer") from exc
    if not 0 <= value <= SQL_INTEGER_MAX:
        raise InvalidInput(f"min_categories must be between 0 and {SQL_INTEGER_MAX}")
    return value


@router.get("/leaderboard")
def get_leaderboard(session: Session = Depends(get_session)):
    """Top individual scores, newest first among ties."""

    entries = top_scores(session, limit=LEADERBOARD_LIMIT)
    if not entries:
        logger.warning("No leaderboard entries found.")
        raise NoData("No leaderboard entries found.")
    return with_ranks(entries, "score")


@router.get("/top-users")
def get_top_users(
    sort: Optional[str] = "score",
    min_categories: Optional[str] = None,
    session: Session = Depends(get_session),
):
    """Users by average score, name or categories played."""

    rows = top_users(
        session,
        sort=sort,
        min_categories=_parse_min_categories(min_categories),
        limit=LEADERBOARD_LIMIT,
    )
    if not rows:
        raise NoData("No top users found.")

    rank_field = {"categories": "categoriesPlayed", "name": "name"}.get(sort, "avgScore")
    return {"topUsers": with_ranks(rows, rank_field)}


@router.get("/user-performance")
def get_user_performance(
    name: Optional[str] = None,
    category: Optional[str] = None,
    session: Session = Depends(get_session),
):
    """Best score per category for a user, or best score per user in a category."""

    view, rows = best_scores(
        session, name=name, category=category, limit=LEADERBOARD_LIMIT
    )

    if view == "user":
        user = name.strip()
        if not rows:
            raise NoData(f"No performance data for user '{user}'")
        return {"user": user, "performance": rows}

    category = category.strip()
    if not rows:
        raise NoData(f"No scores found for category '{category}'")
    return {"category": category, "topUsers": with_ranks(rows, "topScore")}


__all__ = ["router"]
