"""Read-only leaderboard queries over scores joined with users.

Every view is recomputed from ``ScoreRecord`` on each call. An empty list is
a normal answer; turning it into "not found" is the caller's decision.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlmodel import Session, func, select

from ..core.errors import InvalidInput, storage_guard
from ..core.time import isoformat_utc
from ..models import ScoreRecord, User

DEFAULT_LIMIT = 10


def top_scores(session: Session, limit: int = DEFAULT_LIMIT) -> List[Dict[str, Any]]:
    """Best individual attempts, newest first among equal scores."""

    statement = (
        select(User.name, ScoreRecord.category, ScoreRecord.score, ScoreRecord.created_at)
        .join(ScoreRecord, ScoreRecord.user_id == User.id)
        .order_by(
            ScoreRecord.score.desc(),
            ScoreRecord.created_at.desc(),
            ScoreRecord.id.desc(),
        )
        .limit(limit)
    )
    with storage_guard("fetch leaderboard data"):
        rows = session.exec(statement).all()

    return [
        {
            "name": name,
            "category": category,
            "score": score,
            "timestamp": isoformat_utc(created_at),
        }
        for name, category, score, created_at in rows
    ]


def top_users(
    session: Session,
    sort: Optional[str] = "score",
    min_categories: Optional[int] = None,
    limit: int = DEFAULT_LIMIT,
) -> List[Dict[str, Any]]:
    """Users ranked by average score, name or number of categories played.

    Unknown ``sort`` values fall back to average score.
    """

    categories_played = func.count(func.distinct(ScoreRecord.category))
    avg_score = func.round(func.avg(ScoreRecord.score), 2)

    orderings = {
        "score": (avg_score.desc(), categories_played.desc(), User.name.asc()),
        "name": (User.name.asc(),),
        "categories": (categories_played.desc(), avg_score.desc(), User.name.asc()),
    }
    order_by = orderings.get(sort or "score", orderings["score"])

    statement = (
        select(
            User.name,
            categories_played.label("categories_played"),
            avg_score.label("avg_score"),
        )
        .join(ScoreRecord, ScoreRecord.user_id == User.id)
        .group_by(User.id, User.name)
        .order_by(*order_by)
        .limit(limit)
    )
    if min_categories is not None:
        statement = statement.having(categories_played >= min_categories)

    with storage_guard("fetch top user rankings"):
        rows = session.exec(statement).all()

    return [
        {
            "name": name,
            "categoriesPlayed": int(played),
            "avgScore": float(average),
        }
        for name, played, average in rows
    ]


def best_scores_for_user(session: Session, name: str) -> List[Dict[str, Any]]:
    best = func.max(ScoreRecord.score)
    statement = (
        select(ScoreRecord.category, best.label("best_score"))
        .join(User, ScoreRecord.user_id == User.id)
        .where(User.name == name)
        .group_by(ScoreRecord.category)
        .order_by(best.desc(), ScoreRecord.category.asc())
    )
    with storage_guard("fetch user performance rankings"):
        rows = session.exec(statement).all()
    return [{"category": category, "bestScore": int(value)} for category, value in rows]


def best_scores_for_category(
    session: Session, category: str, limit: int = DEFAULT_LIMIT
) -> List[Dict[str, Any]]:
    best = func.max(ScoreRecord.score)
    statement = (
        select(User.name, best.label("top_score"))
        .join(ScoreRecord, ScoreRecord.user_id == User.id)
        .where(ScoreRecord.category == category)
        .group_by(User.id, User.name)
        .order_by(best.desc(), User.name.asc())
        .limit(limit)
    )
    with storage_guard("fetch user performance rankings"):
        rows = session.exec(statement).all()
    return [{"name": name, "topScore": int(value)} for name, value in rows]


def best_scores(
    session: Session,
    *,
    name: Optional[str] = None,
    category: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
) -> Tuple[str, List[Dict[str, Any]]]:
    """Per-category bests for ``name`` or per-user bests within ``category``.

    Returns which view was produced (``"user"`` or ``"category"``) with its
    rows. ``name`` takes precedence when both are given.
    """

    name = (name or "").strip()
    category = (category or "").strip()
    if name:
        return "user", best_scores_for_user(session, name)
    if category:
        return "category", best_scores_for_category(session, category, limit)
    raise InvalidInput("Provide either 'name' or 'category' as a query parameter.")


__all__ = [
    "DEFAULT_LIMIT",
    "best_scores",
    "best_scores_for_category",
    "best_scores_for_user",
    "top_scores",
    "top_users",
]
