"""Configuration loading and management for wordmatch.

Settings live in a JSON file (by default ``~/.wordmatch/config.json``)
and are validated with pydantic.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from wordmatch.errors import ConfigurationError
from wordmatch.matching.alignment import PenaltyScheme


class PenaltySettings(BaseModel):
    """Alignment costs. The defaults are the system's fixed scheme."""

    gap_penalty: float = Field(default=2, ge=0)
    vowel_vowel_mismatch: float = Field(default=1, ge=0)
    consonant_consonant_mismatch: float = Field(default=1, ge=0)
    vowel_consonant_mismatch: float = Field(default=3, ge=0)

    def to_scheme(self) -> PenaltyScheme:
        """Build the scheme used by the matching core.

        Whole-number costs stay ints so distances print as integers.
        """
        values = {
            name: int(value) if float(value).is_integer() else value
            for name, value in self.model_dump().items()
        }
        return PenaltyScheme(**values)


class MatcherConfig(BaseModel):
    """Settings for a suggestion session."""

    # Maximum number of suggestions returned
    limit: int = Field(default=10, ge=0)
    # Longer input is answered with no suggestions instead of being scored
    max_query_length: int = Field(default=40, ge=1)
    # Threads used to score the dictionary (None or 1 = sequential)
    workers: int | None = Field(default=None, ge=1)
    # Default word list: file path or http(s) URL
    dictionary_path: str | None = None
    # Seconds to wait when fetching a dictionary URL
    fetch_timeout: float = Field(default=10.0, gt=0)
    penalties: PenaltySettings = Field(default_factory=PenaltySettings)


def get_default_config_path() -> Path:
    """Get the user-level config file location."""
    return Path.home() / ".wordmatch" / "config.json"


def load_config(path: Path) -> MatcherConfig:
    """Load matcher configuration from a JSON file.

    Args:
        path: Config file to read

    Returns:
        Validated MatcherConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise ConfigurationError("Config file not found", context={"path": str(path)})

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return MatcherConfig(**data)
    except (OSError, json.JSONDecodeError, TypeError, PydanticValidationError) as e:
        raise ConfigurationError(
            f"Invalid config file: {e}", context={"path": str(path)}
        ) from e


def load_config_or_default(path: Path | None = None) -> MatcherConfig:
    """Load ``path`` if given, else the user-level file, else defaults.

    An explicitly given path must exist.
    """
    if path is not None:
        return load_config(path)

    default_path = get_default_config_path()
    if default_path.exists():
        return load_config(default_path)
    return MatcherConfig()


def save_config(path: Path, config: MatcherConfig) -> Path:
    """Save configuration to JSON file with atomic write.

    Args:
        path: Destination config file
        config: Configuration to save

    Returns:
        Path to the saved config file
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")

    # Atomic write: write to temp file, then rename
    with open(temp_path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(), f, indent=2)

    temp_path.replace(path)
    return path
