"""Custom exception hierarchy for argscan.

Every error the library raises inherits from :class:`ArgscanError`.
Errors found while reading a command line are :class:`ParseError`
subclasses; each one carries an :class:`ErrorKind` tag so callers can
branch on ``exc.kind`` instead of matching exception classes.

Hierarchy
---------
ArgscanError
├── OptionSpecError
│   ├── InvalidOptionSpecError
│   └── DuplicateOptionError
└── ParseError
    ├── InvalidOptionError
    ├── ArgumentNotAcceptedError
    ├── MissingArgumentError
    ├── InvalidArgumentError
    └── ArgumentOutOfRangeError
"""

from __future__ import annotations

from enum import Enum


class ArgscanError(Exception):
    """Base exception for all argscan errors.

    Every user-visible error condition maps to a subclass of this
    exception so that a CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        """The human-readable message passed at construction."""
        return str(self)


# --- Option table ----------------------------------------------------------

class OptionSpecError(ArgscanError):
    """Raised when an option table is malformed."""


class InvalidOptionSpecError(OptionSpecError):
    """Raised when an option descriptor (or its text form) is invalid."""


class DuplicateOptionError(OptionSpecError):
    """Raised when a short or long name is registered twice."""


# --- Command-line parsing --------------------------------------------------

class ErrorKind(Enum):
    """Tag identifying what went wrong while reading a command line."""

    INVALID_OPTION = "invalid_option"
    ARGUMENT_NOT_ACCEPTED = "argument_not_accepted"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"
    ARGUMENT_OUT_OF_RANGE = "argument_out_of_range"


class ParseError(ArgscanError):
    """Base class for errors raised while parsing a command line.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    fn_name:
        Qualified name of the operation that detected the failure.
    option:
        The offending option specifier or token text, or ``""`` when
        no single token is to blame.
    hint:
        Optional guidance for the end user.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        fn_name: str = "",
        option: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.fn_name: str = fn_name
        self.option: str = option


class InvalidOptionError(ParseError):
    """Raised for an unrecognized option or malformed option syntax."""

    kind = ErrorKind.INVALID_OPTION


class ArgumentNotAcceptedError(ParseError):
    """Raised when an argument is attached to an option that takes none."""

    kind = ErrorKind.ARGUMENT_NOT_ACCEPTED


class MissingArgumentError(ParseError):
    """Raised when a required argument never arrives."""

    kind = ErrorKind.MISSING_ARGUMENT


class InvalidArgumentError(ParseError):
    """Raised when an argument fails type conversion or format checks."""

    kind = ErrorKind.INVALID_ARGUMENT


class ArgumentOutOfRangeError(ParseError):
    """Raised when a numeric argument does not fit its target type."""

    kind = ErrorKind.ARGUMENT_OUT_OF_RANGE
