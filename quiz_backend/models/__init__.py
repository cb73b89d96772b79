"""Database model exports."""

from .question import Question
from .score import CATEGORY_MAX_LENGTH, ScoreRecord
from .user import NAME_MAX_LENGTH, User

__all__ = [
    "CATEGORY_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "Question",
    "ScoreRecord",
    "User",
]
