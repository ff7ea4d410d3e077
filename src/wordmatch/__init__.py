"""wordmatch - Phonetically weighted spelling suggestions.

Ranks the words of a dictionary by an edit distance in which swapping a
vowel for a vowel, or a consonant for a consonant, is cheaper than mixing
the two.
"""

__version__ = "0.1.0"

from wordmatch.matching import compute_distance, rank_closest

__all__ = ["__version__", "compute_distance", "rank_closest"]
