"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Return an integer environment variable or raise a descriptive error."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage ---------------------------------------------------------------------
DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{_PROJECT_ROOT / 'data' / 'quiz.db'}"
)
DB_RESET = _env_bool("DB_RESET", False)
DB_ECHO = _env_bool("DB_ECHO", False)
DB_TIMEOUT_SECONDS = _env_int("DB_TIMEOUT_SECONDS", 5)


# CORS ------------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Quiz behaviour --------------------------------------------------------------
QUESTIONS_PER_QUIZ = _env_int("QUESTIONS_PER_QUIZ", 20)
LEADERBOARD_LIMIT = _env_int("LEADERBOARD_LIMIT", 10)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_ECHO",
    "DB_RESET",
    "DB_TIMEOUT_SECONDS",
    "LEADERBOARD_LIMIT",
    "LOG_LEVEL",
    "QUESTIONS_PER_QUIZ",
]
