"""Error taxonomy shared by the scoring engine and the HTTP layer."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class QuizError(Exception):
    """Base class for every error the service reports to callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(QuizError, ValueError):
    """Missing or malformed request data. Never retried."""

    status_code = 400


class NoData(QuizError):
    """A well-formed query matched zero rows."""

    status_code = 404


class EmptyAttemptSet(QuizError):
    """A score was requested for zero outcomes."""

    def __init__(self, message: str = "At least one outcome is required to compute a score") -> None:
        super().__init__(message)


class StorageUnavailable(QuizError):
    """The backing store failed or timed out."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Internal Server Error: Unable to {operation}")
        self.operation = operation


@contextmanager
def storage_guard(operation: str) -> Iterator[None]:
    """Translate driver failures inside the block into ``StorageUnavailable``.

    ``IntegrityError`` passes through untouched; callers that expect
    constraint violations handle it themselves.
    """

    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        logger.error("Storage failure while trying to %s: %s", operation, exc)
        raise StorageUnavailable(operation) from exc


__all__ = [
    "EmptyAttemptSet",
    "InvalidInput",
    "NoData",
    "QuizError",
    "StorageUnavailable",
    "storage_guard",
]
