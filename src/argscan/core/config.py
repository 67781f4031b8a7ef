"""Parser and help-layout configuration.

Both configuration objects are frozen dataclasses.  Every field has a
default, and :meth:`ParserConfig.with_overrides` treats an empty string
as "keep the current value" so callers can override just the pieces
they care about.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Syntax used to recognize options on a command line."""

    short_prefix: str = "-"
    """Prefix introducing a cluster of short options."""

    long_prefix: str = "--"
    """Prefix introducing a long option."""

    equals: str = "="
    """Separator between an option and an attached argument."""

    end_indicator: str = "--"
    """Token after which every argument is positional."""

    delimiters: str = " \t\r\n"
    """Characters separating tokens in :meth:`Parser.parse_string`."""

    quote_chars: str = "\"'"
    """Quote characters honoured by :meth:`Parser.parse_string`."""

    escape_char: str = "\\"
    """Escape character honoured by :meth:`Parser.parse_string`."""

    def with_overrides(self, **strings: str) -> ParserConfig:
        """Return a copy with every non-empty override applied.

        Raises
        ------
        TypeError
            If an override names a field that does not exist.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(strings) - known)
        if unknown:
            raise TypeError(f"unknown parser setting(s): {', '.join(unknown)}")
        changes = {key: value for key, value in strings.items() if value}
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class HelpLayout:
    """Column layout used when rendering option help."""

    max_line_length: int = 78
    group_indent: int = 0
    option_indent: int = 2
    desc_first_line_indent: int = 30
    desc_multiline_indent: int = 32
