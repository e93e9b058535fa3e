"""
Command-line interface for Typo Matcher.

Classifies a single compared text against an exemplary text, or a whole file
of text pairs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .classifier import classify
from .config import DEFAULT_MAX_TEXT_LENGTH, LETTER_CASE_ACTIONS, MatchingConfig
from .pairs_loader import PairsLoadError, TextPair, load_pairs
from .rendering import render_markup, render_plain, summarize

console = Console()


@click.command()
@click.argument("compared", required=False)
@click.argument("exemplary", required=False)
@click.option(
    "--pairs",
    "-p",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a CSV or Excel file with compared and exemplary columns.",
)
@click.option(
    "--letter-case",
    type=click.Choice(LETTER_CASE_ACTIONS),
    default=None,
    help="Letter-case action (default: ignore letter case).",
)
@click.option(
    "--min-matched",
    type=str,
    default=None,
    help="Required quantity of correct chars, e.g. '50%' or '3'.",
)
@click.option(
    "--max-wrong",
    type=str,
    default=None,
    help="Acceptable quantity of wrong chars, e.g. '25%' or '2'.",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_TEXT_LENGTH,
    show_default=True,
    help="Longest compared or exemplary text accepted (0: no limit).",
)
@click.option(
    "--plain",
    is_flag=True,
    default=False,
    help="Print plain bracketed text instead of colors.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    compared: Optional[str],
    exemplary: Optional[str],
    pairs: Optional[Path],
    letter_case: Optional[str],
    min_matched: Optional[str],
    max_wrong: Optional[str],
    max_length: int,
    plain: bool,
    verbose: bool,
) -> None:
    """
    Typo Matcher - Find correct, extra and missing chars in a text.

    Compares COMPARED against EXEMPLARY char by char using the best possible
    alignment.

    Examples:

        typo-match hola hello

        typo-match --pairs answers.csv --letter-case compare_as_is --min-matched 50%
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if pairs is None and (compared is None or exemplary is None):
        console.print("[red]Error:[/red] Provide COMPARED and EXEMPLARY texts or --pairs")
        sys.exit(1)

    if pairs is not None and compared is not None:
        console.print("[red]Error:[/red] Provide only one of COMPARED/EXEMPLARY or --pairs")
        sys.exit(1)

    try:
        config = MatchingConfig.from_dict({
            "letter_case_action": letter_case,
            "required_matched_chars": min_matched,
            "acceptable_wrong_chars": max_wrong,
        })

        if pairs is not None:
            text_pairs = load_pairs(pairs)
            if verbose:
                console.print(f"  Loaded {len(text_pairs)} pairs from: {pairs}")
        else:
            text_pairs = [TextPair(compared=compared, exemplary=exemplary, row_number=1)]

        if max_length:
            _check_lengths(text_pairs, max_length)

        rows = []
        for pair in text_pairs:
            classified = classify(pair.compared, pair.exemplary, config)
            rendered = render_plain(classified) if plain else render_markup(classified)
            rows.append((pair, rendered, summarize(classified)))

        if len(rows) == 1:
            pair, rendered, summary = rows[0]
            _print_rendered(rendered, plain)
            _display_summary([(pair, summary)])
        else:
            _display_batch(rows, plain)

    except PairsLoadError as e:
        console.print(f"[red]Pairs loading error:[/red] {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Input error:[/red] {e}")
        sys.exit(1)


def _check_lengths(text_pairs: list[TextPair], max_length: int) -> None:
    """Reject pairs with a text longer than max_length chars."""
    for pair in text_pairs:
        longest = max(len(pair.compared), len(pair.exemplary))
        if longest > max_length:
            raise ValueError(
                f"Row {pair.row_number}: text of {longest} chars exceeds --max-length {max_length}"
            )


def _print_rendered(rendered: str, plain: bool) -> None:
    """Print a rendered classification, without markup parsing for plain text."""
    if plain:
        console.print(rendered, markup=False, highlight=False)
    else:
        console.print(rendered, highlight=False)


def _display_summary(items: list[tuple[TextPair, dict]]) -> None:
    """Display classification summary."""
    table = Table(title="Classification Summary", show_header=True)
    table.add_column("Row", style="cyan")
    table.add_column("Correct", style="green")
    table.add_column("Missing", style="green")
    table.add_column("Extra", style="red")
    table.add_column("Case", style="yellow")
    table.add_column("Exact", style="bold")

    for pair, summary in items:
        table.add_row(
            str(pair.row_number),
            str(summary["correct"]),
            str(summary["missing"]),
            str(summary["extra"]),
            str(summary["letter_case_mistakes"]),
            "Yes" if summary["is_exact"] else "No",
        )

    console.print(table)


def _display_batch(rows: list[tuple[TextPair, str, dict]], plain: bool) -> None:
    """Display every rendered pair followed by one summary table."""
    for pair, rendered, _ in rows:
        console.print(f"[cyan]{pair.row_number}.[/cyan] ", end="")
        _print_rendered(rendered, plain)

    _display_summary([(pair, summary) for pair, _, summary in rows])

    exact = sum(1 for _, _, summary in rows if summary["is_exact"])
    console.print(f"\n[bold]{exact}/{len(rows)}[/bold] texts typed exactly")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
