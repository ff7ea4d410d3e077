"""Tests for suggestion sessions."""

from unittest.mock import patch

import pytest

from wordmatch.config import MatcherConfig, PenaltySettings
from wordmatch.errors import DictionaryUnavailableError
from wordmatch.session import SuggestionSession, is_exact_match


@pytest.fixture
def session():
    return SuggestionSession(["cat", "bat", "", "cot", "dog"])


class TestSuggestionSession:
    """Tests for SuggestionSession."""

    def test_suggest(self, session):
        assert session.suggest("cat") == ["cat", "bat", "cot", "dog"]

    def test_input_is_trimmed(self, session):
        assert session.suggest("  cat \n") == ["cat", "bat", "cot", "dog"]

    def test_empty_input(self, session):
        assert session.suggest("") == []
        assert session.suggest("   ") == []

    def test_overlong_input_skips_ranking(self, session):
        """Input over the maximum length is never scored."""
        with patch("wordmatch.session.rank_scored") as mock_rank:
            assert session.suggest("a" * 41) == []

        mock_rank.assert_not_called()

    def test_input_at_maximum_length(self, session):
        result = session.suggest("a" * 40)

        assert len(result) == 4

    def test_custom_max_length(self):
        session = SuggestionSession(["cat"], MatcherConfig(max_query_length=3))

        assert session.suggest("cat") == ["cat"]
        assert session.suggest("cats") == []

    def test_limit_from_config(self):
        session = SuggestionSession(["cat", "bat", "cot"], MatcherConfig(limit=2))

        assert session.suggest("cat") == ["cat", "bat"]

    def test_penalties_from_config(self):
        config = MatcherConfig(penalties=PenaltySettings(vowel_consonant_mismatch=0))
        session = SuggestionSession(["cot", "cbt"], config)

        assert session.suggest("cat") == ["cbt", "cot"]

    def test_suggest_scored(self, session):
        result = session.suggest_scored("cat")

        assert [c.distance for c in result] == [0, 1, 1, 3]

    def test_empty_dictionary(self):
        assert SuggestionSession([]).suggest("cat") == []

    def test_dictionary_is_copied(self):
        words = ["cat"]
        session = SuggestionSession(words)
        words.append("bat")

        assert session.dictionary == ("cat",)
        assert len(session) == 1

    def test_is_exact_match(self, session):
        assert session.is_exact_match(" cat ", "cat")
        assert not session.is_exact_match("cat", "Cat")


class TestFromSource:
    """Tests for SuggestionSession.from_source."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\nbat\ncot\ndog\n", encoding="utf-8")

        session = SuggestionSession.from_source(path)

        assert len(session) == 5
        assert session.suggest("cot") == ["cot", "cat", "bat", "dog"]

    def test_missing_source(self, tmp_path):
        with pytest.raises(DictionaryUnavailableError):
            SuggestionSession.from_source(tmp_path / "missing.txt")

    def test_fetch_timeout_from_config(self):
        config = MatcherConfig(fetch_timeout=2.5)

        with patch("wordmatch.session.load_dictionary", return_value=("cat",)) as mock_load:
            session = SuggestionSession.from_source("https://example.com/words.txt", config)

        mock_load.assert_called_once_with("https://example.com/words.txt", timeout=2.5)
        assert session.config is config


class TestIsExactMatch:
    """Tests for the module-level exact match predicate."""

    def test_trimmed_input(self):
        assert is_exact_match("  cat\n", "cat")

    def test_case_sensitive(self):
        assert not is_exact_match("cat", "Cat")

    def test_session_method_delegates(self, session):
        with patch("wordmatch.session.is_exact_match", return_value=True) as mock_match:
            assert session.is_exact_match("x", "y") is True

        mock_match.assert_called_once_with("x", "y")
