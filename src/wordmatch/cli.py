"""Command-line interface for wordmatch.

Uses Typer for a modern, type-hinted CLI experience.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

# Load environment variables from .env files
# Priority: local .env > ~/.wordmatch/.env
_user_env = Path.home() / ".wordmatch" / ".env"
if _user_env.exists():
    load_dotenv(_user_env)
load_dotenv()

from wordmatch import __version__
from wordmatch.config import MatcherConfig, load_config_or_default
from wordmatch.display import render_results
from wordmatch.errors import (
    ConfigurationError,
    ValidationError,
    WordMatchError,
    format_error_for_display,
)
from wordmatch.logging import LogLevel, set_verbosity
from wordmatch.matching import compute_distance
from wordmatch.session import SuggestionSession

app = typer.Typer(
    name="wordmatch",
    help="Suggest similar dictionary words using a vowel/consonant weighted edit distance.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

REVERSE_COMMAND = "reverse"

DictionaryOption = Annotated[
    Optional[str],
    typer.Option(
        "--dictionary",
        "-d",
        help="Word list file or http(s) URL (one word per line).",
        envvar="WORDMATCH_DICTIONARY",
    ),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to a JSON config file."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Show informational log output."),
]
ReverseOption = Annotated[
    bool,
    typer.Option("--reverse", "-r", help="Display results backwards."),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"wordmatch version {__version__}")
        raise typer.Exit()


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(format_error_for_display(error))}")
    raise typer.Exit(1)


def _load_config(config_path: Path | None, limit: int | None = None) -> MatcherConfig:
    try:
        config = load_config_or_default(config_path)
    except WordMatchError as e:
        _fail(e)
    if limit is not None:
        config = config.model_copy(update={"limit": limit})
    return config


def _open_session(dictionary: str | None, config: MatcherConfig) -> SuggestionSession:
    """Load the dictionary named on the command line, env or config."""
    source = dictionary or config.dictionary_path
    try:
        if not source:
            raise ConfigurationError(
                "No dictionary given. Use --dictionary, WORDMATCH_DICTIONARY "
                "or 'dictionary_path' in the config file."
            )
        return SuggestionSession.from_source(source, config)
    except WordMatchError as e:
        _fail(e)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """wordmatch - find the dictionary words closest to what you typed.

    Substituting a vowel for a vowel or a consonant for a consonant is cheap;
    mixing the two, or inserting and deleting letters, costs more.
    """
    pass


@app.command()
def suggest(
    word: Annotated[str, typer.Argument(help="Word to look up")],
    dictionary: DictionaryOption = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=0, help="Maximum number of suggestions."),
    ] = None,
    reverse: ReverseOption = False,
    scores: Annotated[
        bool,
        typer.Option("--scores", "-s", help="Show the distance next to each word."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON."),
    ] = False,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show the closest dictionary words to WORD."""
    if verbose:
        set_verbosity(LogLevel.VERBOSE)

    config = _load_config(config_path, limit)
    session = _open_session(dictionary, config)
    candidates = session.suggest_scored(word)

    if as_json:
        typer.echo(json.dumps([c.to_dict() for c in candidates], ensure_ascii=False))
        return

    results = candidates if scores else [c.word for c in candidates]
    console.print(render_results(results, word, reverse=reverse))


@app.command()
def distance(
    word_a: Annotated[str, typer.Argument(help="First word")],
    word_b: Annotated[str, typer.Argument(help="Second word")],
    config_path: ConfigOption = None,
) -> None:
    """Print the weighted edit distance between two words.

    Words longer than the configured maximum query length are refused.
    """
    config = _load_config(config_path)
    for word in (word_a, word_b):
        if len(word) > config.max_query_length:
            _fail(
                ValidationError(
                    "Word exceeds maximum length",
                    context={"length": len(word), "max_length": config.max_query_length},
                )
            )

    cost = compute_distance(word_a, word_b, config.penalties.to_scheme())
    console.print(f"{cost}")


@app.command()
def interactive(
    dictionary: DictionaryOption = None,
    reverse: ReverseOption = False,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Look up words one per line until an empty line.

    Typing [bold]reverse[/bold] toggles backwards spelling; the toggle line
    itself also lists its suggestions worst match first.
    """
    if verbose:
        set_verbosity(LogLevel.VERBOSE)

    config = _load_config(config_path)
    session = _open_session(dictionary, config)
    console.print(f"[dim]Loaded {len(session)} dictionary entries. Empty line to quit.[/dim]")

    while True:
        try:
            line = typer.prompt("Word", default="", show_default=False)
        except typer.Abort:
            break

        if not line.strip():
            break

        if line.strip().lower() == REVERSE_COMMAND:
            reverse = not reverse
            state = "on" if reverse else "off"
            console.print(f"[magenta]Reverse mode {state}.[/magenta]")
            results = list(reversed(session.suggest(line)))
        else:
            results = session.suggest(line)

        console.print(render_results(results, line, reverse=reverse))


if __name__ == "__main__":
    app()
