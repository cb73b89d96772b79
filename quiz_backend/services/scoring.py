"""Answer matching and percentage scoring.

This module has no database or web dependencies so any client written in
Python can import it and display exactly the score the server will persist.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Any, Iterable

from ..core.errors import EmptyAttemptSet

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> str:
    """Trim, lower-case and drop everything that is not an ASCII letter or digit.

    Accented letters are folded to their base letter first ("Pelé" -> "pele").
    """

    folded = unicodedata.normalize("NFKD", text.strip().lower())
    return _NON_ALPHANUMERIC.sub("", folded)


def matches(correct: Any, submitted: Any) -> bool:
    """Return whether ``submitted`` is accepted for the canonical ``correct`` text.

    The normalised canonical answer must *contain* the normalised submission,
    so "sachin" is accepted for "Sachin Tendulkar" but not the other way
    round. A submission that normalises to the empty string never matches.
    """

    if not isinstance(submitted, str) or not isinstance(correct, str):
        return False

    cleaned = normalize(submitted)
    if not cleaned:
        logger.debug("Answer %r is empty after normalisation; treated as wrong", submitted)
        return False
    return cleaned in normalize(correct)


def score(outcomes: Iterable[bool]) -> int:
    """Percentage of true outcomes, rounded half up to an integer in 0..100."""

    results = list(outcomes)
    total = len(results)
    if total == 0:
        raise EmptyAttemptSet()
    correct = sum(1 for outcome in results if outcome)
    # floor(correct * 100 / total + 0.5) without floating point error
    return (correct * 200 + total) // (2 * total)


__all__ = ["matches", "normalize", "score"]
