"""Parser facade — an option registry plus syntax configuration.

:class:`Parser` is the convenient entry point: register options on it,
then call :meth:`Parser.parse` with ``sys.argv`` or
:meth:`Parser.parse_string` with a whole command line.  Code that keeps
its own :class:`~argscan.core.registry.OptionRegistry` can call
:func:`parse_args` instead.

Errors are raised as :class:`~argscan.exceptions.ParseError`
subclasses.  The ``try_*`` variants return a :class:`ParseOutcome`
instead, for callers that prefer to branch on ``outcome.kind``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from argscan.core.config import HelpLayout, ParserConfig
from argscan.core.help_format import format_help
from argscan.core.models import ArgumentType, Option
from argscan.core.registry import OptionGroup, OptionRegistry
from argscan.core.result import ParserResult
from argscan.core.scanner import scan
from argscan.exceptions import ErrorKind, ParseError
from argscan.utils.text import split_command_line


# ---------------------------------------------------------------------------
# Tagged outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Either a :class:`ParserResult` or the :class:`ParseError` that stopped it.

    Exactly one of :attr:`result` and :attr:`error` is set.  When the
    parse failed, :attr:`result` is ``None`` and :attr:`partial` holds
    the entries read before the bad token.
    """

    result: ParserResult | None = None
    error: ParseError | None = None
    partial: ParserResult | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """The error kind, or ``None`` on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> ParserResult:
        """Return the result, or raise the stored error."""
        if self.error is not None:
            raise self.error
        if self.result is None:
            raise ValueError("outcome holds neither a result nor an error")
        return self.result


# ---------------------------------------------------------------------------
# Registry-passing entry point
# ---------------------------------------------------------------------------

def parse_args(
    args: Iterable[str],
    registry: OptionRegistry,
    config: ParserConfig | None = None,
    *,
    ignore_first: bool = True,
    result: ParserResult | None = None,
) -> ParserResult:
    """Parse an ``argv``-style vector against *registry*.

    The first element is the program name and is skipped unless
    *ignore_first* is false.
    """
    return scan(args, registry, config, ignore_first=ignore_first, result=result)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Parser:
    """Option table plus syntax settings.

    Parameters
    ----------
    registry:
        Existing registry to use; a new, empty one by default.
    config:
        Option syntax; defaults to ``-``, ``--``, ``=`` and ``--``.
    """

    def __init__(
        self,
        registry: OptionRegistry | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self.registry: OptionRegistry = registry if registry is not None else OptionRegistry()
        self.config: ParserConfig = config if config is not None else ParserConfig()

    # ------------------------------------------------------------------
    # Option table
    # ------------------------------------------------------------------

    def add_option(
        self,
        long_name: str = "",
        short_name: str | None = None,
        description: str = "",
        argument_name: str = "",
        argument_required: bool = False,
        group: str = "",
        argument_type: ArgumentType = ArgumentType.STRING,
    ) -> Option:
        return self.registry.add_option(
            long_name,
            short_name,
            description,
            argument_name,
            argument_required,
            group,
            argument_type,
        )

    def add(self, option: Option) -> Option:
        return self.registry.add(option)

    def group(self, name: str = "") -> OptionGroup:
        return self.registry.group(name)

    def __getitem__(self, name: str) -> Option:
        """Return the option called *name*, registering it if missing.

        A one-character *name* is looked up as a short name first.
        """
        if len(name) == 1:
            found = self.registry.lookup_short(name)
            if found is not None:
                return found
            found = self.registry.lookup_long(name)
            if found is not None:
                return found
            return self.registry.get_or_add_short(name)
        return self.registry.get_or_add_long(name)

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def sort_groups(self) -> None:
        self.registry.sort_groups()

    def sort_options(self) -> None:
        self.registry.sort_options()

    def set_custom_strings(
        self,
        delimiters: str = "",
        short_prefix: str = "",
        long_prefix: str = "",
        end_indicator: str = "",
        equals: str = "",
    ) -> None:
        """Override option syntax; an empty string keeps the current value."""
        self.config = self.config.with_overrides(
            delimiters=delimiters,
            short_prefix=short_prefix,
            long_prefix=long_prefix,
            end_indicator=end_indicator,
            equals=equals,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(
        self,
        args: Iterable[str],
        ignore_first: bool = True,
        result: ParserResult | None = None,
    ) -> ParserResult:
        """Parse an ``argv``-style vector.

        Parameters
        ----------
        args:
            Tokens, conventionally starting with the program name.
        ignore_first:
            Skip the first token (kept as ``result.program_name``).
        result:
            Existing result to append to, e.g. one that was just
            :meth:`~ParserResult.clear`-ed.

        Raises
        ------
        ParseError
            For the first token that cannot be parsed.
        """
        return scan(
            args,
            self.registry,
            self.config,
            ignore_first=ignore_first,
            result=result,
        )

    def parse_string(
        self,
        command_line: str,
        ignore_first: bool = False,
        result: ParserResult | None = None,
    ) -> ParserResult:
        """Split *command_line* shell-style, then :meth:`parse` it."""
        tokens = split_command_line(
            command_line,
            self.config.delimiters,
            self.config.quote_chars,
            self.config.escape_char,
        )
        return self.parse(tokens, ignore_first=ignore_first, result=result)

    def try_parse(
        self,
        args: Iterable[str],
        ignore_first: bool = True,
    ) -> ParseOutcome:
        """Like :meth:`parse`, but return errors instead of raising them."""
        partial = ParserResult()
        try:
            result = self.parse(args, ignore_first=ignore_first, result=partial)
        except ParseError as exc:
            return ParseOutcome(error=exc, partial=partial)
        return ParseOutcome(result=result)

    def try_parse_string(
        self,
        command_line: str,
        ignore_first: bool = False,
    ) -> ParseOutcome:
        """Like :meth:`parse_string`, but return errors instead of raising them."""
        partial = ParserResult()
        try:
            result = self.parse_string(command_line, ignore_first=ignore_first, result=partial)
        except ParseError as exc:
            return ParseOutcome(error=exc, partial=partial)
        return ParseOutcome(result=result)

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def format_help(self, layout: HelpLayout | None = None) -> str:
        return format_help(self.registry, self.config, layout)

    def print_help(self, file: TextIO | None = None, layout: HelpLayout | None = None) -> None:
        """Write :meth:`format_help` output to *file* (stdout by default)."""
        stream = file if file is not None else sys.stdout
        stream.write(self.format_help(layout) + "\n")

    def __str__(self) -> str:
        return self.format_help()
