"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_ECHO,
    DB_RESET,
    DB_TIMEOUT_SECONDS,
    LEADERBOARD_LIMIT,
    LOG_LEVEL,
    QUESTIONS_PER_QUIZ,
)
from .database import SQL_INTEGER_MAX, build_engine, get_session
from .errors import (
    EmptyAttemptSet,
    InvalidInput,
    NoData,
    QuizError,
    StorageUnavailable,
    storage_guard,
)
from .logger import configure_logging
from .time import isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_ECHO",
    "DB_RESET",
    "DB_TIMEOUT_SECONDS",
    "EmptyAttemptSet",
    "InvalidInput",
    "LEADERBOARD_LIMIT",
    "LOG_LEVEL",
    "NoData",
    "QUESTIONS_PER_QUIZ",
    "QuizError",
    "SQL_INTEGER_MAX",
    "StorageUnavailable",
    "build_engine",
    "configure_logging",
    "get_session",
    "isoformat_utc",
    "storage_guard",
    "utcnow",
]
