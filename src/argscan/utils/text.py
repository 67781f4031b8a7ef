"""Text helpers: word wrapping and shell-style command-line splitting.

Both are thin, configurable wrappers over the standard library
(:mod:`textwrap` and :mod:`shlex`).
"""

from __future__ import annotations

import shlex
import textwrap

from argscan.exceptions import InvalidArgumentError


def wrap_text(
    text: str,
    width: int,
    indent: int = 0,
    first_line_indent: int | None = None,
) -> str:
    """Word-wrap *text* to *width* columns.

    Parameters
    ----------
    text:
        Text to wrap.  Embedded newlines start new paragraphs.
    width:
        Maximum line length, indentation included.
    indent:
        Indentation of every line after the first.
    first_line_indent:
        Indentation of the first line; defaults to *indent*.

    Words longer than a line are broken.
    """
    if first_line_indent is None:
        first_line_indent = indent

    lines: list[str] = []
    for number, paragraph in enumerate(text.split("\n")):
        first = first_line_indent if number == 0 else indent
        wrapped = textwrap.wrap(
            paragraph,
            width=max(width, 1),
            initial_indent=" " * first,
            subsequent_indent=" " * indent,
        )
        lines.extend(wrapped or [""])
    return "\n".join(lines)


def split_command_line(
    text: str,
    delimiters: str = " \t\r\n",
    quote_chars: str = "\"'",
    escape_char: str = "\\",
) -> list[str]:
    """Split a command-line string into tokens.

    Any run of *delimiters* separates tokens.  Text between matching
    *quote_chars* is kept together with the quotes removed, and
    *escape_char* makes the following character literal.  An empty pair
    of quotes yields an empty token.

    Raises
    ------
    InvalidArgumentError
        If a quotation is never closed or the string ends in an escape.
    """
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace = delimiters
    lexer.whitespace_split = True
    lexer.quotes = quote_chars
    lexer.escapedquotes = quote_chars
    lexer.escape = escape_char
    lexer.commenters = ""
    try:
        return list(lexer)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"cannot split command line: {exc}",
            fn_name="argscan.utils.text.split_command_line",
            option=text,
        ) from exc
