"""CLI application entry point for the ``argscan`` inspection tool.

``argscan`` shows how a command line is read against an option table
declared on its own command line::

    argscan -o v,verbose -o "f,file=FILE" -- -vf out.txt input.txt

The tool parses its own arguments with argscan.  Everything after
``--`` (or any token that is not one of the tool's options) is the
command line being analysed.

This module is the **sole error boundary** of the tool.  It catches
:class:`~argscan.exceptions.ArgscanError`, ``KeyboardInterrupt`` and
any unexpected ``Exception``, renders a message via Rich and returns a
well-defined exit code.
"""

from __future__ import annotations

import sys

from rich.markup import escape

from argscan.cli import exit_codes
from argscan.cli.console import console, report_console
from argscan.cli.option_syntax import parse_option_spec
from argscan.cli.report import render_result
from argscan.core.config import HelpLayout
from argscan.core.models import ArgumentType
from argscan.core.parser import Parser
from argscan.core.result import ParserResult
from argscan.exceptions import ArgscanError, ParseError
from argscan.version import __version__

USAGE: str = "Usage: argscan [OPTION]... [--] [TOKEN]..."


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> Parser:
    """Construct the parser for argscan's own options."""
    parser = Parser()
    parser.add_option(
        "option", "o",
        "declare an option of the analysed command line, as "
        "NAMES[=ARG|[=ARG]][:TYPE][@GROUP] [DESCRIPTION]; repeatable",
        "SPEC", True, group="Analysis",
    )
    parser.add_option(
        "string", "s",
        "analyse CMDLINE, split shell-style, instead of the TOKEN arguments",
        "CMDLINE", True, group="Analysis",
    )
    parser.add_option(
        "first-is-program", "f",
        "treat the first token as the program name",
        group="Analysis",
    )
    parser.add_option(
        "show-help", "H",
        "print the help listing of the declared options instead of analysing",
        group="Output",
    )
    parser.add_option(
        "width", "w",
        "line width for --show-help (default 78)",
        "N", True, group="Output", argument_type=ArgumentType.UINT,
    ).bind()
    parser.add_option("help", "h", "show this help and exit", group="General")
    parser.add_option("version", "V", "show version information and exit", group="General")
    return parser


def _read_own_arguments(parser: Parser, argv: list[str]) -> ParserResult:
    try:
        return parser.parse(argv, ignore_first=False)
    except ParseError as exc:
        if exc.hint is None:
            exc.hint = "Run 'argscan --help' for usage."
        raise


def _build_target_parser(specs: list[str]) -> Parser:
    """Register every ``-o SPEC`` declaration on a fresh parser."""
    target = Parser()
    for spec in specs:
        target.add(parse_option_spec(spec))
    return target


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_help(parser: Parser) -> int:
    report_console.print(USAGE, markup=False, highlight=False)
    report_console.print(
        "Read a command line against the declared options and show the result.\n",
        markup=False,
        highlight=False,
    )
    report_console.print(parser.format_help(), markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_show_help(target: Parser, width: int | None) -> int:
    layout = HelpLayout() if width is None else HelpLayout(max_line_length=width)
    text = target.format_help(layout)
    if not text:
        console.print("[yellow]No options declared.[/yellow] Use -o SPEC to add some.")
        return exit_codes.SUCCESS
    report_console.print(text, markup=False, highlight=False, soft_wrap=True)
    return exit_codes.SUCCESS


def _handle_analyse(target: Parser, own: ParserResult) -> int:
    first_is_program = "first-is-program" in own
    string_entry = own.find_long("string")
    if string_entry is not None:
        result = target.parse_string(string_entry.argument, ignore_first=first_is_program)
    else:
        result = target.parse(own.positional, ignore_first=first_is_program)
    render_result(result)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the argscan CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    parser = _build_parser()
    own = _read_own_arguments(parser, args)

    if "help" in own:
        return _handle_help(parser)
    if "version" in own:
        report_console.print(f"argscan {__version__}", highlight=False)
        return exit_codes.SUCCESS

    target = _build_target_parser([entry.argument for entry in own.find_all("option")])

    if "show-help" in own:
        width_target = parser["width"].target
        width = width_target.value if width_target is not None and width_target.is_set else None
        return _handle_show_help(target, width)

    return _handle_analyse(target, own)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ArgscanError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
