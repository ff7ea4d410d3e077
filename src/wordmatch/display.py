"""Terminal rendering of suggestion lists.

Everything here is presentation: the matching core never sees reversed
words or column layouts.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence

from rich.table import Table
from rich.text import Text

from wordmatch.matching import ScoredCandidate
from wordmatch.session import is_exact_match

RESULTS_TITLE = "Similar Words:"
CHECK_MARK = "✔"


def reverse_text(text: str) -> str:
    """Reverse a string character by character."""
    return text[::-1]


def reverse_for_display(results: Sequence[str]) -> list[str]:
    """Spell every word backwards, keeping the ranked order."""
    return [reverse_text(word) for word in results]


def split_columns(items: Sequence) -> tuple[list, list]:
    """Distribute items alternately into left and right columns."""
    return list(items[0::2]), list(items[1::2])


def _cell(word: str, exact: bool, distance=None) -> Text:
    cell = Text(word, style="bold green" if exact else "cyan")
    if distance is not None:
        cell.append(f" ({distance})", style="dim")
    if exact:
        cell.append(f" {CHECK_MARK}", style="green")
    return cell


def render_results(
    results: Sequence[str] | Sequence[ScoredCandidate],
    query: str,
    reverse: bool = False,
) -> Table | Text:
    """Build a two-column table of suggestions.

    Args:
        results: Ranked words, or scored candidates to show costs as well
        query: The user's input; a matching entry gets a check mark
        reverse: Spell the title and every word backwards

    Returns:
        Rich renderable for the console
    """
    if not results:
        return Text("No similar words found.", style="yellow")

    words = [r.word if isinstance(r, ScoredCandidate) else r for r in results]
    distances = [r.distance if isinstance(r, ScoredCandidate) else None for r in results]
    shown = reverse_for_display(words) if reverse else words

    # The check mark compares the stored word, not its displayed spelling.
    cells = [
        _cell(text, is_exact_match(query, word), distance)
        for text, word, distance in zip(shown, words, distances)
    ]

    title = reverse_text(RESULTS_TITLE) if reverse else RESULTS_TITLE
    table = Table(title=title, show_header=False, box=None, padding=(0, 3))
    table.add_column("left")
    table.add_column("right")

    left, right = split_columns(cells)
    for left_cell, right_cell in zip_longest(left, right, fillvalue=Text("")):
        table.add_row(left_cell, right_cell)

    return table
