"""Dictionary ranking by alignment cost.

Scores every usable dictionary entry against a query and keeps the
closest ones. Entries with equal cost stay in dictionary order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from wordmatch.errors import ValidationError
from wordmatch.matching.alignment import (
    DEFAULT_PENALTIES,
    Cost,
    PenaltyScheme,
    compute_distance,
)

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ScoredCandidate:
    """A dictionary word paired with its cost against the query.

    Attributes:
        word: Dictionary entry as stored
        distance: Alignment cost against the query
        index: Position of the entry in the dictionary
    """

    word: str
    distance: Cost
    index: int

    @property
    def sort_key(self) -> tuple[Cost, int]:
        """Ascending cost, then dictionary order."""
        return (self.distance, self.index)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {"word": self.word, "distance": self.distance}


def _usable_entries(dictionary: Sequence[str]) -> list[tuple[int, str]]:
    return [(i, w) for i, w in enumerate(dictionary) if w.strip()]


def score_dictionary(
    query: str,
    dictionary: Sequence[str],
    penalties: PenaltyScheme = DEFAULT_PENALTIES,
    workers: int | None = None,
) -> list[ScoredCandidate]:
    """Score every non-blank dictionary entry against ``query``.

    Args:
        query: Word to match
        dictionary: Candidate words, in their original order
        penalties: Costs to apply
        workers: Spread scoring over this many threads when greater than 1

    Returns:
        All candidates, sorted by cost with ties in dictionary order
    """
    entries = _usable_entries(dictionary)

    def score(entry: tuple[int, str]) -> ScoredCandidate:
        index, word = entry
        return ScoredCandidate(word, compute_distance(query, word, penalties), index)

    if workers is not None and workers > 1 and len(entries) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            scored = list(executor.map(score, entries))
    else:
        scored = [score(entry) for entry in entries]

    # Explicit index in the key keeps ties stable whatever produced the list.
    scored.sort(key=lambda c: c.sort_key)
    return scored


def rank_scored(
    query: str,
    dictionary: Sequence[str],
    limit: int = DEFAULT_LIMIT,
    penalties: PenaltyScheme = DEFAULT_PENALTIES,
    workers: int | None = None,
) -> list[ScoredCandidate]:
    """Return the ``limit`` closest candidates along with their costs.

    An empty query matches nothing.

    Raises:
        ValidationError: If ``limit`` is negative
    """
    if limit < 0:
        raise ValidationError("Result limit must be non-negative", context={"limit": limit})

    if query == "" or limit == 0:
        return []

    return score_dictionary(query, dictionary, penalties, workers)[:limit]


def rank_closest(
    query: str,
    dictionary: Sequence[str],
    limit: int = DEFAULT_LIMIT,
    penalties: PenaltyScheme = DEFAULT_PENALTIES,
    workers: int | None = None,
) -> list[str]:
    """Return up to ``limit`` dictionary words closest to ``query``.

    Args:
        query: Word to match
        dictionary: Candidate words; blank entries are skipped
        limit: Maximum number of words to return
        penalties: Costs to apply
        workers: Optional thread count for scoring

    Returns:
        Words ordered by ascending cost, ties in dictionary order
    """
    return [c.word for c in rank_scored(query, dictionary, limit, penalties, workers)]
