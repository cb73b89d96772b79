"""Helpers for the question catalogue."""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from sqlmodel import Session, func, select

from ..core.errors import storage_guard
from ..models import Question

MAX_CATEGORIES = 10


def question_to_dict(question: Question, *, shuffle: bool = False) -> Dict[str, Any]:
    """Serialise a question to an API-friendly dict."""

    options = question.options
    if shuffle:
        options = random.sample(options, k=len(options))
    return {
        "id": question.id,
        "question_text": question.question_text,
        "category": question.category,
        "difficulty_level": question.difficulty_level,
        "correct_answer": question.correct_answer,
        "options": options,
    }


def list_categories(session: Session) -> List[str]:
    statement = (
        select(Question.category)
        .distinct()
        .order_by(Question.category)
        .limit(MAX_CATEGORIES)
    )
    with storage_guard("fetch quiz categories"):
        return list(session.exec(statement).all())


def questions_for_category(
    session: Session, category: str, limit: int
) -> List[Dict[str, Any]]:
    """Random selection of questions from ``category`` with shuffled options."""

    statement = (
        select(Question)
        .where(Question.category == category)
        .order_by(func.random())
        .limit(limit)
    )
    with storage_guard("fetch quiz questions"):
        questions = session.exec(statement).all()
    return [question_to_dict(question, shuffle=True) for question in questions]


def get_question(session: Session, question_id: int) -> Optional[Question]:
    with storage_guard("fetch quiz question"):
        return session.get(Question, question_id)


def questions_by_id(
    session: Session, category: str, question_ids: List[int]
) -> List[Question]:
    """Questions of ``category`` among ``question_ids``, in id order."""

    if not question_ids:
        return []
    statement = (
        select(Question)
        .where(Question.category == category)
        .where(Question.id.in_(question_ids))
        .order_by(Question.id)
    )
    with storage_guard("fetch correct answers"):
        return list(session.exec(statement).all())


__all__ = [
    "get_question",
    "list_categories",
    "question_to_dict",
    "questions_by_id",
    "questions_for_category",
]
