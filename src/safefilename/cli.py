"""CLI entry point for safefilename."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import get_settings
from .exceptions import EmptyResultError
from .rules import DEFAULT_RULESET
from .sanitizer import Sanitizer
from .version import get_version_info

app = typer.Typer(
    name="safefilename",
    help="Sanitize strings for safe use as filenames",
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Set up root logging from settings, or DEBUG when verbose."""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_names(names: Optional[List[str]]) -> List[str]:
    """Return names from arguments, or one per stdin line if none were given."""
    if names:
        return list(names)
    if sys.stdin.isatty():
        return []
    return [line.rstrip("\n") for line in sys.stdin]


@app.command()
def sanitize(
    names: Optional[List[str]] = typer.Argument(
        None,
        help="Names to sanitize (read from stdin, one per line, if omitted)",
    ),
    extended: Optional[bool] = typer.Option(
        None,
        "--extended/--no-extended",
        help="Also replace shell/markup/code punctuation",
    ),
    remove: Optional[bool] = typer.Option(
        None,
        "--remove/--keep",
        help="Delete unsafe characters instead of using fullwidth lookalikes",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail when a name sanitizes to an empty string",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show a table of original and sanitized names",
    ),
):
    """Sanitize names and print one result per line."""
    _configure_logging(verbose)
    settings = get_settings()

    sanitizer = Sanitizer(
        extended=settings.extended if extended is None else extended,
        remove=settings.remove if remove is None else remove,
        allow_empty=settings.allow_empty and not strict,
    )
    logger.debug(f"Using {sanitizer!r}")

    rows: list[tuple[str, str]] = []
    failed = 0
    for name in _read_names(names):
        try:
            result = sanitizer(name)
        except EmptyResultError as e:
            err_console.print(f"[red]✗ {escape(str(e))}[/red]")
            failed += 1
            continue
        rows.append((name, result))
        if not verbose:
            typer.echo(result)

    if verbose and rows:
        table = Table(title=f"Sanitized Names ({len(rows)} total)")
        table.add_column("Original", style="cyan")
        table.add_column("Sanitized", style="green")
        for original, result in rows:
            table.add_row(escape(repr(original)), escape(repr(result)))
        console.print(table)

    if failed:
        raise typer.Exit(1)


@app.command()
def rules():
    """Show the sanitization rules in the order they are applied."""
    table = Table(title=f"Sanitization Rules ({len(DEFAULT_RULESET)} total)")
    table.add_column("#", justify="right")
    table.add_column("Set", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Description")
    table.add_column("Pattern", style="dim")

    groups = (("base", DEFAULT_RULESET.base), ("extended", DEFAULT_RULESET.extended))
    index = 0
    for set_name, ruleset in groups:
        for rule in ruleset:
            index += 1
            pattern = rule.pattern.pattern
            if len(pattern) > 60:
                pattern = pattern[:60] + "..."
            table.add_row(
                str(index), set_name, rule.kind.value, escape(rule.description), escape(pattern)
            )

    console.print(table)


@app.command()
def version():
    """Show version information."""
    info = get_version_info()
    console.print(f"safefilename [bold]{info['version']}[/bold]")
    console.print(
        f"[dim]{info['base_rules']} base rules, {info['extended_rules']} extended rules[/dim]"
    )


if __name__ == "__main__":
    app()
