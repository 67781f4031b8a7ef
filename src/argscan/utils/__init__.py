"""Shared utilities — text wrapping and command-line splitting.

Rules
-----
* No parsing logic.
* No I/O.
* Importable by any layer.
"""

from argscan.utils.text import split_command_line, wrap_text

__all__: list[str] = ["split_command_line", "wrap_text"]
