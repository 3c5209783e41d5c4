"""
Bounded search helpers.

Search stages are written as generators of candidates; `bounded` caps how many
are drawn and `best_of` keeps the best seen so far. Keeping the two apart lets a
stage add a different budget (time, iterations) without touching its callers.
"""

import itertools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SearchOutcome(Generic[T]):
    """Best candidate found plus how much of the budget was used."""

    best: T | None
    best_key: float
    explored: int
    exhausted_budget: bool

    @property
    def found(self) -> bool:
        return self.best is not None


def bounded(candidates: Iterable[T], limit: int | None) -> Iterator[T]:
    """Yield at most `limit` candidates (all of them when limit is None)."""
    if limit is None:
        yield from candidates
        return
    if limit <= 0:
        return
    yield from itertools.islice(candidates, limit)


def best_of(
    candidates: Iterable[T],
    key: Callable[[T], float],
    limit: int | None = None,
    stop_at: float | None = None,
) -> SearchOutcome[T]:
    """
    Return the candidate with the lowest key.

    Ties keep the first candidate found, so results are reproducible for a
    fixed candidate order.

    Args:
        candidates: Candidate generator
        key: Cost function, lower is better
        limit: Maximum number of candidates to evaluate
        stop_at: Stop early once a candidate scores at or below this value

    Returns:
        SearchOutcome with the winner (None when no candidate was produced)
    """
    best: T | None = None
    best_key = float("inf")
    explored = 0
    iterator = iter(candidates)

    for candidate in bounded(iterator, limit):
        explored += 1
        candidate_key = key(candidate)
        if candidate_key < best_key:
            best = candidate
            best_key = candidate_key
            if stop_at is not None and candidate_key <= stop_at:
                return SearchOutcome(best, best_key, explored, exhausted_budget=False)

    exhausted = limit is not None and explored >= limit and _has_more(iterator)
    return SearchOutcome(best, best_key, explored, exhausted_budget=exhausted)


def _has_more(iterator: Iterator[T]) -> bool:
    for _ in iterator:
        return True
    return False
