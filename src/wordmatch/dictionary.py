"""Word list loading.

A dictionary is plain text with one word per line, read from a local file
or fetched over HTTP. Lines are returned exactly as split; blank lines are
left in place for the ranker to skip.
"""

from __future__ import annotations

import logging
import re
import time
import urllib.error
import urllib.request
from pathlib import Path

from wordmatch.errors import DictionaryUnavailableError, ErrorContext
from wordmatch.logging import get_logger, log_operation_complete, log_operation_start

logger = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")

DEFAULT_FETCH_TIMEOUT = 10.0


def parse_dictionary(text: str) -> tuple[str, ...]:
    """Split word-list text into entries, one per line."""
    return tuple(_LINE_BREAK.split(text))


def is_url(source: str | Path) -> bool:
    """Check whether a dictionary source should be fetched over HTTP."""
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DictionaryUnavailableError("Dictionary file not found", source=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailableError(
            f"Could not read dictionary file: {e}", source=str(path)
        ) from e


def _fetch_url(url: str, timeout: float) -> str:
    req = urllib.request.Request(url, method="GET")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            if response.status != 200:
                raise DictionaryUnavailableError(
                    f"Network response was not ok: {response.status}",
                    source=url,
                    recoverable=True,
                    context={"status": response.status},
                )
            return response.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        raise DictionaryUnavailableError(
            f"Network response was not ok: {e.code} {e.reason}",
            source=url,
            recoverable=True,
            context={"status": e.code},
        ) from e
    except (urllib.error.URLError, TimeoutError) as e:
        raise DictionaryUnavailableError(
            f"Could not fetch dictionary: {e}", source=url, recoverable=True
        ) from e
    except UnicodeDecodeError as e:
        raise DictionaryUnavailableError(
            "Dictionary is not valid UTF-8 text", source=url
        ) from e


def load_dictionary(
    source: str | Path,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> tuple[str, ...]:
    """Load a word list from a file path or an http(s) URL.

    Args:
        source: Path to a text file, or a URL
        timeout: Seconds to wait for a URL fetch

    Returns:
        Dictionary entries in file order

    Raises:
        DictionaryUnavailableError: If the source cannot be read
    """
    source_str = str(source)
    log_operation_start(logger, "load dictionary", source=source_str)
    started = time.perf_counter()

    # Callers report the raised error themselves.
    with ErrorContext("load dictionary", context={"source": source_str}, level=logging.DEBUG):
        if is_url(source):
            text = _fetch_url(source_str, timeout)
        else:
            text = _read_file(Path(source))

    words = parse_dictionary(text)
    log_operation_complete(
        logger,
        "load dictionary",
        duration=time.perf_counter() - started,
        source=source_str,
        entries=len(words),
    )
    return words
