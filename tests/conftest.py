"""Shared pytest fixtures and configuration for the argscan test suite.

Guidelines
----------
* No I/O beyond captured stdout/stderr.
* Core tests must be pure — no side effects outside bound targets.
* Tests must not depend on OS state or terminal size.
"""

from __future__ import annotations

import pytest

from argscan.core.models import ArgumentType
from argscan.core.parser import Parser


def build_less_parser() -> Parser:
    """Option table modelled on ``less``: many short flags, a few arguments.

    ``P`` and ``tag`` take *optional* arguments; every other option with
    an argument label requires one.
    """
    parser = Parser()
    add = parser.add_option
    add("help", "?", "display help text")
    add("version", None, "display program version")
    add("verbose", "v", "verbose mode")
    add("force", "f", "write file even if it exists")
    add("all", "a", "list all files", group="Listing")
    add("almost-all", "A", "do not list . and ..", group="Listing")
    add("block-size", None, "scale sizes by SIZE", "SIZE", True)
    add("buffer", "b", "buffer size for each file", "N", True)
    add("auto-buffers", "B", "buffers allocated automatically")
    add("clear-screen", "c", "clear screen on each repaint")
    add("dumb", "d", "suppress error message if terminal is dumb")
    add("color", None, "set color of text displayed", "COLOR", True)
    add("quit-at-eof", "e", "automatically exit when end-of-file is reached")
    add("max-back-scroll", "h", "maximum number of lines to scroll backward", "N", True)
    add("ignore-case", "i", "searches ignore case")
    add("IGNORE-CASE", "I", "really really ignores case")
    add("line-numbers", "n", "show line numbers")
    add("pattern", "p", "start at first occurrence of PATTERN", "PATTERN", True)
    add("", "P", "use custom prompt", "PROMPT", False)
    add("quiet", "q", "quiet mode, do not ring terminal bell")
    add("", "s", "squeeze consecutive blank lines into one")
    add("", "S", "chop long lines")
    add("tag", "t", "edit file containing tag TAG", "TAG", False)
    add("underline-special", "u", "underline special characters")
    add("window", "z", "change default scrolling window to N lines", "N", True,
        argument_type=ArgumentType.INT)
    return parser


@pytest.fixture()
def less_parser() -> Parser:
    return build_less_parser()


@pytest.fixture()
def typed_parser() -> Parser:
    """Parser with one option per numeric argument type."""
    parser = Parser()
    parser.add_option("count", "c", "number of items", "N", True, argument_type=ArgumentType.INT)
    parser.add_option("size", "s", "size in bytes", "BYTES", True, argument_type=ArgumentType.UINT)
    parser.add_option("ratio", "r", "scale factor", "X", True, argument_type=ArgumentType.FLOAT)
    parser.add_option("level", "l", "optional level", "L", False, argument_type=ArgumentType.INT)
    parser.add_option("name", "n", "free text", "NAME", True)
    return parser
