"""Rich rendering of a :class:`~argscan.core.result.ParserResult`.

All display-related logic for ``argscan`` lives here — no parsing, no
option handling.
"""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from argscan.cli.console import report_console
from argscan.core.models import ParsedEntry
from argscan.core.result import ParserResult


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _format_short(entry: ParsedEntry) -> str:
    return entry.short_name if entry.short_name is not None else "—"


def _format_value(entry: ParsedEntry) -> str:
    """Render the converted value, or ``"—"`` when there is none."""
    if entry.value is None:
        return "—"
    return repr(entry.value)


def build_entries_table(result: ParserResult) -> Table:
    """Build a table with one row per parsed option entry."""
    table = Table(
        title="Parsed options",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Text", justify="left", min_width=10)
    table.add_column("Long", justify="left")
    table.add_column("Short", justify="center")
    table.add_column("Argument", justify="left")
    table.add_column("Value", justify="left")

    for i, entry in enumerate(result, start=1):
        table.add_row(
            str(i),
            Text(entry.original_text),
            Text(entry.long_name or "—"),
            Text(_format_short(entry)),
            Text(entry.argument),
            Text(_format_value(entry)),
        )
    return table


def build_positional_table(result: ParserResult) -> Table:
    """Build a table listing the positional arguments in order."""
    table = Table(
        title="Positional arguments",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Argument", justify="left", min_width=10)
    for i, argument in enumerate(result.positional, start=1):
        table.add_row(str(i), Text(argument))
    return table


# ---------------------------------------------------------------------------
# Public rendering function
# ---------------------------------------------------------------------------

def render_result(result: ParserResult, output: Any = report_console) -> None:
    """Print the entries and positional arguments of *result*."""
    if result.program_name is not None:
        output.print(f"[bold]Program:[/bold] {escape(result.program_name)}", highlight=False)

    if result:
        output.print(build_entries_table(result))
    else:
        output.print("[dim]No options.[/dim]")

    if result.positional:
        output.print(build_positional_table(result))
    else:
        output.print("[dim]No positional arguments.[/dim]")
