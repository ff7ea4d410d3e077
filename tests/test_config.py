"""Tests for configuration loading."""

import json
from unittest.mock import patch

import pytest

from wordmatch.config import (
    MatcherConfig,
    PenaltySettings,
    load_config,
    load_config_or_default,
    save_config,
)
from wordmatch.errors import ConfigurationError
from wordmatch.matching.alignment import DEFAULT_PENALTIES


class TestPenaltySettings:
    """Tests for PenaltySettings."""

    def test_defaults_match_system_scheme(self):
        assert PenaltySettings().to_scheme() == DEFAULT_PENALTIES

    def test_whole_numbers_become_ints(self):
        scheme = PenaltySettings().to_scheme()

        assert isinstance(scheme.gap_penalty, int)

    def test_fractional_cost_kept(self):
        scheme = PenaltySettings(gap_penalty=1.5).to_scheme()

        assert scheme.gap_penalty == 1.5

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            PenaltySettings(gap_penalty=-1)


class TestMatcherConfig:
    """Tests for MatcherConfig."""

    def test_defaults(self):
        config = MatcherConfig()

        assert config.limit == 10
        assert config.max_query_length == 40
        assert config.workers is None
        assert config.dictionary_path is None
        assert config.fetch_timeout == 10.0

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            MatcherConfig(limit=-1)
        with pytest.raises(ValueError):
            MatcherConfig(max_query_length=0)


class TestLoadConfig:
    """Tests for loading and saving config files."""

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"limit": 5, "dictionary_path": "words.txt", "penalties": {"gap_penalty": 4}}),
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.limit == 5
        assert config.dictionary_path == "words.txt"
        assert config.penalties.gap_penalty == 4
        assert config.penalties.vowel_consonant_mismatch == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert "not found" in exc_info.value.message

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"limit": -3}), encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert exc_info.value.context == {"path": str(path)}

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = MatcherConfig(limit=3, workers=2)

        saved = save_config(path, config)

        assert saved == path
        assert not (tmp_path / "nested" / "config.json.tmp").exists()
        assert load_config(path) == config

    def test_defaults_when_no_user_file(self, tmp_path):
        with patch(
            "wordmatch.config.get_default_config_path",
            return_value=tmp_path / "config.json",
        ):
            assert load_config_or_default() == MatcherConfig()

    def test_user_file_used(self, tmp_path):
        path = tmp_path / "config.json"
        save_config(path, MatcherConfig(limit=4))

        with patch("wordmatch.config.get_default_config_path", return_value=path):
            assert load_config_or_default().limit == 4

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config_or_default(tmp_path / "missing.json")
