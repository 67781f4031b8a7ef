"""Core layer — option table, token classification, binding and results.

Rules
-----
* No ``print()`` calls; the only write is :meth:`Parser.print_help`,
  to a stream the caller chooses.
* No filesystem, network or environment access.
* No imports from ``cli``.
* Errors are raised as :class:`~argscan.exceptions.ArgscanError`
  subclasses only.
"""

from argscan.core.config import HelpLayout, ParserConfig
from argscan.core.models import ArgumentTarget, ArgumentType, Option, ParsedEntry
from argscan.core.parser import ParseOutcome, Parser, parse_args
from argscan.core.registry import OptionGroup, OptionRegistry
from argscan.core.result import ParserResult
from argscan.core.scanner import scan
from argscan.core.tokenizer import Classification, TokenKind, classify_token

__all__: list[str] = [
    "ArgumentTarget",
    "ArgumentType",
    "Classification",
    "HelpLayout",
    "Option",
    "OptionGroup",
    "OptionRegistry",
    "ParseOutcome",
    "ParsedEntry",
    "Parser",
    "ParserConfig",
    "ParserResult",
    "TokenKind",
    "classify_token",
    "parse_args",
    "scan",
]
