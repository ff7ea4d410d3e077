"""Matching core.

Weighted edit distance between words, and ranking of a dictionary by
that distance.
"""

from wordmatch.matching.alignment import (
    DEFAULT_PENALTIES,
    PenaltyScheme,
    compute_distance,
    is_vowel,
    substitution_cost,
)
from wordmatch.matching.ranker import (
    DEFAULT_LIMIT,
    ScoredCandidate,
    rank_closest,
    rank_scored,
    score_dictionary,
)

__all__ = [
    "DEFAULT_PENALTIES",
    "PenaltyScheme",
    "compute_distance",
    "is_vowel",
    "substitution_cost",
    "DEFAULT_LIMIT",
    "ScoredCandidate",
    "rank_closest",
    "rank_scored",
    "score_dictionary",
]
