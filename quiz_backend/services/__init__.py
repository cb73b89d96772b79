"""Service layer helpers."""

from .leaderboard import best_scores, top_scores, top_users
from .questions import (
    get_question,
    list_categories,
    question_to_dict,
    questions_for_category,
)
from .ranking import assign_ranks, medal_for, with_ranks
from .scores import record_score
from .scoring import matches, normalize, score
from .submissions import evaluate, parse_answers, submit_quiz
from .users import resolve_user

__all__ = [
    "assign_ranks",
    "best_scores",
    "evaluate",
    "get_question",
    "list_categories",
    "matches",
    "medal_for",
    "normalize",
    "parse_answers",
    "question_to_dict",
    "questions_for_category",
    "record_score",
    "resolve_user",
    "score",
    "submit_quiz",
    "top_scores",
    "top_users",
    "with_ranks",
]
