"""Scanner — walks a token list and builds a :class:`ParserResult`.

The scanner feeds tokens to :func:`~argscan.core.tokenizer.classify_token`
one at a time and resolves the single token of lookahead an option may
need for its argument:

* **required** — the next token is the argument, whatever it looks
  like, unless it is the end-of-options marker or input has run out
  (both are a :class:`~argscan.exceptions.MissingArgumentError`);
* **optional** — the next token is the argument only when it exists
  and is neither option-shaped nor the end-of-options marker.

The first error stops the scan.  Entries appended before the failing
token stay in the result object that was passed in.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from argscan.core.binder import bind_entry
from argscan.core.config import ParserConfig
from argscan.core.models import ParsedEntry
from argscan.core.registry import OptionRegistry
from argscan.core.result import ParserResult
from argscan.core.tokenizer import TokenKind, classify_token, looks_like_option
from argscan.exceptions import MissingArgumentError


def scan(
    tokens: Iterable[str],
    registry: OptionRegistry,
    config: ParserConfig | None = None,
    *,
    ignore_first: bool = False,
    result: ParserResult | None = None,
) -> ParserResult:
    """Parse *tokens* against *registry*.

    Parameters
    ----------
    tokens:
        Raw command-line tokens.
    registry:
        The options to recognize.
    config:
        Option syntax; defaults to :class:`ParserConfig`'s defaults.
    ignore_first:
        Skip the first token (the program name in an ``argv`` vector).
        The skipped token is kept as ``result.program_name``.
    result:
        Result to append to; a new one is created when ``None``.

    Returns
    -------
    ParserResult
        *result*, or the freshly created result.

    Raises
    ------
    ParseError
        Any of its subclasses, for the first bad token.
    """
    if config is None:
        config = ParserConfig()
    if result is None:
        result = ParserResult()

    remaining = list(tokens)
    if ignore_first and remaining:
        result.program_name = remaining.pop(0)

    end_of_options = False
    pending: ParsedEntry | None = None
    pending_required = False

    for token in remaining:
        if end_of_options:
            result.positional.append(token)
            continue

        if pending is not None:
            if token == config.end_indicator:
                if pending_required:
                    raise _missing_argument(pending)
                result.append(pending)
            elif pending_required or not looks_like_option(token, config):
                completed = replace(
                    pending,
                    original_text=f"{pending.original_text} {token}",
                    argument=token,
                )
                result.append(bind_entry(completed))
                pending = None
                continue
            else:
                result.append(pending)
            pending = None

        classification = classify_token(token, registry, config)
        kind = classification.kind

        if kind is TokenKind.END_OF_OPTIONS:
            end_of_options = True
            continue
        if kind is TokenKind.NON_OPTION:
            result.positional.append(token)
            continue

        entries = classification.entries
        if classification.wants_argument:
            for entry in entries[:-1]:
                result.append(entry)
            pending = entries[-1]
            pending_required = kind is TokenKind.ARGUMENT_REQUIRED
        else:
            for entry in entries:
                result.append(entry)

    if pending is not None:
        if pending_required:
            raise _missing_argument(pending)
        result.append(pending)

    return result


def _missing_argument(entry: ParsedEntry) -> MissingArgumentError:
    option_text = entry.original_without_argument
    return MissingArgumentError(
        f"option '{option_text}' requires an argument",
        fn_name="argscan.core.scanner.scan",
        option=option_text,
    )
