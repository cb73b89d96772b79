"""Competition ranking for leaderboard rows."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Tuple, TypeVar

T = TypeVar("T")

_MEDALS = {1: "\U0001F947", 2: "\U0001F948", 3: "\U0001F949"}


def assign_ranks(
    entries: Iterable[T], key: Callable[[T], Any]
) -> List[Tuple[T, int]]:
    """Pair each entry (already ordered best first) with its competition rank.

    Tied entries share the rank of the first entry in the tie and the next
    distinct entry takes its own 1-based position, so ``[95, 90, 90, 80]``
    ranks as ``[1, 2, 2, 4]``.
    """

    ranked: List[Tuple[T, int]] = []
    previous_value: Any = None
    current_rank = 0
    for position, entry in enumerate(entries, start=1):
        value = key(entry)
        if position == 1 or value != previous_value:
            current_rank = position
        ranked.append((entry, current_rank))
        previous_value = value
    return ranked


def medal_for(rank: int) -> str:
    """Display marker for a rank: a medal for the podium, the number otherwise."""

    return _MEDALS.get(rank, str(rank))


def with_ranks(rows: Iterable[Dict[str, Any]], score_field: str) -> List[Dict[str, Any]]:
    """Return copies of ``rows`` with ``rank`` and ``medal`` keys in front."""

    output: List[Dict[str, Any]] = []
    for row, rank in assign_ranks(rows, key=lambda item: item[score_field]):
        decorated: Dict[str, Any] = {"rank": rank, "medal": medal_for(rank)}
        decorated.update(row)
        output.append(decorated)
    return output


__all__ = ["assign_ranks", "medal_for", "with_ranks"]
