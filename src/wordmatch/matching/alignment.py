"""Phonetically weighted edit distance.

Aligns two words character by character. Insertions and deletions cost a
fixed gap penalty; substitutions are priced by whether each character is a
vowel or a consonant, so swapping one vowel for another is cheap and
swapping a vowel for a consonant is expensive.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from wordmatch.errors import ValidationError

VOWELS = frozenset("aeiou")

Cost = int | float


@dataclass(frozen=True)
class PenaltyScheme:
    """Costs used by the alignment.

    Attributes:
        gap_penalty: Cost of inserting or deleting a single character
        vowel_vowel_mismatch: Cost of substituting one vowel for another
        consonant_consonant_mismatch: Cost of substituting one consonant for another
        vowel_consonant_mismatch: Cost of substituting a vowel for a consonant
    """

    gap_penalty: Cost = 2
    vowel_vowel_mismatch: Cost = 1
    consonant_consonant_mismatch: Cost = 1
    vowel_consonant_mismatch: Cost = 3

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValidationError(
                    f"Penalty '{f.name}' must be non-negative",
                    context={f.name: value},
                )


DEFAULT_PENALTIES = PenaltyScheme()


def is_vowel(char: str) -> bool:
    """Check whether a character is one of a, e, i, o, u (any case).

    Digits, punctuation and every other letter count as consonants.
    """
    return char.lower() in VOWELS


def substitution_cost(
    char1: str,
    char2: str,
    penalties: PenaltyScheme = DEFAULT_PENALTIES,
) -> Cost:
    """Cost of aligning ``char1`` against ``char2``.

    Identical characters (case-sensitive) are free.
    """
    if char1 == char2:
        return 0

    vowel1 = is_vowel(char1)
    vowel2 = is_vowel(char2)
    if vowel1 and vowel2:
        return penalties.vowel_vowel_mismatch
    if not vowel1 and not vowel2:
        return penalties.consonant_consonant_mismatch
    return penalties.vowel_consonant_mismatch


def compute_distance(
    word1: str,
    word2: str,
    penalties: PenaltyScheme = DEFAULT_PENALTIES,
) -> Cost:
    """Calculate the weighted alignment cost between two words.

    Classic edit-distance dynamic program: row ``i`` column ``j`` holds the
    cheapest alignment of ``word1[:i]`` with ``word2[:j]``. Only the
    previous row is needed, and since every cost is symmetric the table
    can be laid out along whichever word is shorter.

    Args:
        word1: First word
        word2: Second word
        penalties: Costs to apply

    Returns:
        Alignment cost, 0 for identical words
    """
    if len(word1) < len(word2):
        word1, word2 = word2, word1

    gap = penalties.gap_penalty

    if not word2:
        return len(word1) * gap

    previous_row = [j * gap for j in range(len(word2) + 1)]
    current_row = [0] * (len(word2) + 1)

    for i, c1 in enumerate(word1, start=1):
        current_row[0] = i * gap

        for j, c2 in enumerate(word2, start=1):
            current_row[j] = min(
                previous_row[j - 1] + substitution_cost(c1, c2, penalties),
                previous_row[j] + gap,  # deletion
                current_row[j - 1] + gap,  # insertion
            )

        previous_row, current_row = current_row, previous_row

    return previous_row[len(word2)]
