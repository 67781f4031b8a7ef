"""Token classifier — decides what a single command-line token is.

:func:`classify_token` looks at one raw token and reports one of five
outcomes (:class:`TokenKind`) together with the option entries the token
produced.  It never looks at the *next* token; when an option still
wants its argument the outcome says so and the scanner handles the
lookahead.

Token shapes (default syntax)
-----------------------------
``--``            end of options
``--name``        long option
``--name=value``  long option with an attached argument
``-abc``          cluster of short options ``a``, ``b``, ``c``
``-fVALUE``       short option ``f`` with argument ``VALUE``
``-f=value``      short option ``f`` with an attached argument
anything else     non-option (positional) argument
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from argscan.core.binder import bind_entry
from argscan.core.config import ParserConfig
from argscan.core.models import Option, ParsedEntry
from argscan.core.registry import OptionRegistry
from argscan.exceptions import (
    ArgumentNotAcceptedError,
    InvalidArgumentError,
    InvalidOptionError,
)


class TokenKind(Enum):
    """How the scanner must treat the token *after* the classified one."""

    NO_ARGUMENT = "no_argument"
    """Nothing pending; classify the next token normally."""

    ARGUMENT_REQUIRED = "argument_required"
    """The next token must be consumed as the last entry's argument."""

    ARGUMENT_OPTIONAL = "argument_optional"
    """The next token may be consumed as the last entry's argument."""

    NON_OPTION = "non_option"
    """The token was a positional argument."""

    END_OF_OPTIONS = "end_of_options"
    """The token was the end-of-options marker."""


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of classifying one token."""

    kind: TokenKind
    entries: tuple[ParsedEntry, ...] = ()

    @property
    def wants_argument(self) -> bool:
        return self.kind in (TokenKind.ARGUMENT_REQUIRED, TokenKind.ARGUMENT_OPTIONAL)


# ---------------------------------------------------------------------------
# Syntax predicates
# ---------------------------------------------------------------------------

def is_long_option(specifier: str, config: ParserConfig) -> bool:
    prefix = config.long_prefix
    return specifier.startswith(prefix) and len(specifier) > len(prefix)


def is_short_cluster(specifier: str, config: ParserConfig) -> bool:
    prefix = config.short_prefix
    return specifier.startswith(prefix) and len(specifier) > len(prefix)


def looks_like_option(token: str, config: ParserConfig) -> bool:
    """Whether *token* would be classified as an option or end marker.

    Used for optional-argument lookahead: such tokens are never taken
    as an optional argument.
    """
    if token == config.end_indicator:
        return True
    specifier = token.split(config.equals, 1)[0] if config.equals else token
    return is_long_option(specifier, config) or is_short_cluster(specifier, config)


def _pending_kind(option: Option) -> TokenKind:
    if option.argument_required:
        return TokenKind.ARGUMENT_REQUIRED
    return TokenKind.ARGUMENT_OPTIONAL


def _record_occurrence(option: Option) -> None:
    if option.target is not None:
        option.target.record_occurrence()


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_token(
    token: str,
    registry: OptionRegistry,
    config: ParserConfig | None = None,
) -> Classification:
    """Classify *token* against the options in *registry*.

    Returns
    -------
    Classification
        The outcome plus the entries produced, in command-line order.
        A trailing entry waiting for its argument has ``argument == ""``.

    Raises
    ------
    InvalidOptionError
        Unknown option.
    ArgumentNotAcceptedError
        An argument was attached to an option that takes none.
    InvalidArgumentError
        Malformed assignment such as ``-=`` / ``--=``, or an attached
        argument that failed type conversion.
    ArgumentOutOfRangeError
        An attached numeric argument does not fit its type.
    """
    if config is None:
        config = ParserConfig()

    if token == config.end_indicator:
        return Classification(TokenKind.END_OF_OPTIONS)

    specifier = token
    attached = ""
    assignment_found = False
    if config.equals and config.equals in token:
        specifier, attached = token.split(config.equals, 1)
        assignment_found = True
        if specifier in (config.short_prefix, config.long_prefix):
            bad = specifier + config.equals
            raise InvalidArgumentError(
                f"invalid option: '{bad}'",
                fn_name="argscan.core.tokenizer.classify_token",
                option=bad,
            )

    if is_long_option(specifier, config):
        return _classify_long(token, specifier, attached, assignment_found, registry, config)
    if is_short_cluster(specifier, config):
        return _classify_short_cluster(
            specifier[len(config.short_prefix):],
            attached,
            assignment_found,
            registry,
            config,
        )
    return Classification(TokenKind.NON_OPTION)


def _classify_long(
    token: str,
    specifier: str,
    attached: str,
    assignment_found: bool,
    registry: OptionRegistry,
    config: ParserConfig,
) -> Classification:
    fn_name = "argscan.core.tokenizer.classify_token"
    name = specifier[len(config.long_prefix):]
    option = registry.lookup_long(name)
    if option is None:
        raise InvalidOptionError(
            f"invalid option: '{specifier}'",
            fn_name=fn_name,
            option=specifier,
        )

    if not option.takes_argument and assignment_found:
        raise ArgumentNotAcceptedError(
            f"option '{specifier}' does not accept arguments",
            fn_name=fn_name,
            option=specifier,
        )

    entry = ParsedEntry(
        original_text=token,
        original_without_argument=specifier,
        is_option=True,
        long_name=name,
        short_name=option.short_name,
        argument=attached,
        option=option,
    )
    _record_occurrence(option)

    if not option.takes_argument:
        return Classification(TokenKind.NO_ARGUMENT, (entry,))
    if assignment_found:
        return Classification(TokenKind.NO_ARGUMENT, (bind_entry(entry),))
    return Classification(_pending_kind(option), (entry,))


def _classify_short_cluster(
    names: str,
    attached: str,
    assignment_found: bool,
    registry: OptionRegistry,
    config: ParserConfig,
) -> Classification:
    fn_name = "argscan.core.tokenizer.classify_short_cluster"
    prefix = config.short_prefix
    entries: list[ParsedEntry] = []

    for pos, char in enumerate(names):
        option_text = prefix + char
        option = registry.lookup_short(char)
        if option is None:
            raise InvalidOptionError(
                f"invalid option: '{option_text}'",
                fn_name=fn_name,
                option=option_text,
            )

        is_last = pos + 1 == len(names)
        _record_occurrence(option)

        if option.takes_argument:
            if not is_last:
                # The rest of the cluster is the argument, '=' included.
                argument = names[pos + 1:]
                if assignment_found:
                    argument += config.equals + attached
                entry = _short_entry(option_text, option, char, argument)
                entries.append(bind_entry(entry))
                return Classification(TokenKind.NO_ARGUMENT, tuple(entries))

            if assignment_found:
                entry = _short_entry(option_text, option, char, attached, config.equals)
                entries.append(bind_entry(entry))
                return Classification(TokenKind.NO_ARGUMENT, tuple(entries))

            entries.append(_short_entry(option_text, option, char, ""))
            return Classification(_pending_kind(option), tuple(entries))

        if is_last and assignment_found:
            raise ArgumentNotAcceptedError(
                f"option '{option_text}' does not accept arguments",
                fn_name=fn_name,
                option=option_text,
            )
        entries.append(_short_entry(option_text, option, char, ""))

    return Classification(TokenKind.NO_ARGUMENT, tuple(entries))


def _short_entry(
    option_text: str,
    option: Option,
    char: str,
    argument: str,
    separator: str = "",
) -> ParsedEntry:
    return ParsedEntry(
        original_text=option_text + separator + argument,
        original_without_argument=option_text,
        is_option=True,
        long_name=option.long_name,
        short_name=char,
        argument=argument,
        option=option,
    )
