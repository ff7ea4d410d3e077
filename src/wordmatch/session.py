"""Suggestion sessions.

A session owns one loaded dictionary and answers raw user input with
ranked suggestions. It applies the input guards the matching core leaves
to its callers: surrounding whitespace is trimmed, and empty or overlong
input gets no suggestions without any scoring work.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from wordmatch.config import MatcherConfig
from wordmatch.dictionary import load_dictionary
from wordmatch.logging import get_logger
from wordmatch.matching import ScoredCandidate, rank_scored

logger = get_logger(__name__)


def is_exact_match(raw_input: str, result: str) -> bool:
    """Check whether a suggestion equals the trimmed input (case-sensitive)."""
    return result == raw_input.strip()


class SuggestionSession:
    """Ranked suggestions against a fixed dictionary."""

    def __init__(self, dictionary: Sequence[str], config: MatcherConfig | None = None):
        """Initialize the session.

        Args:
            dictionary: Word list; kept as an immutable tuple
            config: Matcher settings (defaults if omitted)
        """
        self.dictionary: tuple[str, ...] = tuple(dictionary)
        self.config = config or MatcherConfig()
        self.penalties = self.config.penalties.to_scheme()

    @classmethod
    def from_source(
        cls,
        source: str | Path,
        config: MatcherConfig | None = None,
    ) -> "SuggestionSession":
        """Create a session from a dictionary file or URL.

        Raises:
            DictionaryUnavailableError: If the dictionary cannot be loaded
        """
        config = config or MatcherConfig()
        return cls(load_dictionary(source, timeout=config.fetch_timeout), config)

    def __len__(self) -> int:
        return len(self.dictionary)

    def normalize(self, raw_input: str) -> str | None:
        """Trim input, returning None when it should not be matched."""
        word = raw_input.strip()
        if not word:
            return None
        if len(word) > self.config.max_query_length:
            logger.debug(
                "Input exceeds maximum length, skipping",
                extra={"length": len(word), "max_length": self.config.max_query_length},
            )
            return None
        return word

    def suggest_scored(self, raw_input: str) -> list[ScoredCandidate]:
        """Closest dictionary entries with their costs."""
        word = self.normalize(raw_input)
        if word is None:
            return []
        return rank_scored(
            word,
            self.dictionary,
            limit=self.config.limit,
            penalties=self.penalties,
            workers=self.config.workers,
        )

    def suggest(self, raw_input: str) -> list[str]:
        """Closest dictionary words for raw user input."""
        return [c.word for c in self.suggest_scored(raw_input)]

    def is_exact_match(self, raw_input: str, result: str) -> bool:
        """Check whether a suggestion is the input itself."""
        return is_exact_match(raw_input, result)
