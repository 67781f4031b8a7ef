"""Argument binder — converts raw option arguments to typed values.

Every conversion is locale-independent and must consume the *whole*
argument text: ``"12abc"`` is not a number, it is an error.  Integer
types are range-checked against the 32-bit widths of the option types:

* ``INT``  — ``-2**31 .. 2**31 - 1``
* ``UINT`` — ``0 .. 2**32 - 1`` (negative values get their own message)

Only ASCII digits count.  ``FLOAT`` text that overflows to infinity, or
that is non-zero but rounds to ``0.0``, is out of range.

A successful bind also writes the converted value to the option's
:class:`~argscan.core.models.ArgumentTarget`, if one is attached.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from typing import Any

from argscan.core.models import ArgumentType, Option, ParsedEntry
from argscan.exceptions import ArgumentOutOfRangeError, InvalidArgumentError

INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1
UINT_MAX: int = 2**32 - 1

_FN_NAME = "argscan.core.binder.convert_argument"

# Leading whitespace is tolerated, trailing characters are not.
_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)
_HEX_FLOAT_RE = re.compile(r"\s*[+-]?0[xX]", re.ASCII)
_MAX_INTEGER_DIGITS = 10


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def convert_argument(text: str, option: Option, option_text: str) -> Any:
    """Convert *text* according to ``option.argument_type``.

    Parameters
    ----------
    text:
        The raw argument.
    option:
        Descriptor declaring the argument type.
    option_text:
        The option as written on the command line (e.g. ``"--count"``),
        used in error messages.

    Raises
    ------
    InvalidArgumentError
        If *text* is not a valid number for a numeric type.
    ArgumentOutOfRangeError
        If the number does not fit the type (or is negative for
        ``UINT``).
    """
    kind = option.argument_type
    if kind is ArgumentType.INT:
        return _convert_int(text, option_text)
    if kind is ArgumentType.UINT:
        return _convert_uint(text, option_text)
    if kind is ArgumentType.FLOAT:
        return _convert_float(text, option_text)
    return text


def _parse_integer(text: str, option_text: str) -> int:
    if _INTEGER_RE.fullmatch(text) is None:
        raise InvalidArgumentError(
            f"argument for option '{option_text}' must be an integer",
            fn_name=_FN_NAME,
            option=option_text,
        )
    # int() refuses very long digit strings; no 32-bit value needs more than 10.
    unsigned = text.strip().lstrip("+-")
    digits = unsigned.lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        raise _out_of_range(option_text)
    value = int(digits)
    return -value if text.strip().startswith("-") else value


def _out_of_range(option_text: str) -> ArgumentOutOfRangeError:
    return ArgumentOutOfRangeError(
        f"argument for option '{option_text}' is out of range",
        fn_name=_FN_NAME,
        option=option_text,
    )


def _convert_int(text: str, option_text: str) -> int:
    value = _parse_integer(text, option_text)
    if not INT_MIN <= value <= INT_MAX:
        raise _out_of_range(option_text)
    return value


def _convert_uint(text: str, option_text: str) -> int:
    value = _parse_integer(text, option_text)
    if value < 0:
        raise ArgumentOutOfRangeError(
            f"argument for option '{option_text}' must not be negative",
            fn_name=_FN_NAME,
            option=option_text,
        )
    if value > UINT_MAX:
        raise _out_of_range(option_text)
    return value


def _convert_float(text: str, option_text: str) -> float:
    not_a_number = InvalidArgumentError(
        f"argument for option '{option_text}' must be a number",
        fn_name=_FN_NAME,
        option=option_text,
    )
    # float() would also accept non-ASCII digits, separators and trailing blanks.
    if not text.strip() or not text.isascii() or "_" in text or text[-1].isspace():
        raise not_a_number

    hex_form = _HEX_FLOAT_RE.match(text) is not None
    if hex_form:
        try:
            value = float.fromhex(text)
        except OverflowError:
            raise _out_of_range(option_text) from None
        except ValueError:
            raise not_a_number from None
    else:
        try:
            value = float(text)
        except ValueError:
            raise not_a_number from None
        if math.isinf(value) and "inf" not in text.lower():
            raise _out_of_range(option_text)

    if value == 0.0 and _has_nonzero_mantissa(text, hex_form):
        raise _out_of_range(option_text)
    return value


def _has_nonzero_mantissa(text: str, hex_form: bool) -> bool:
    """Whether the significand of *text* has a non-zero digit (underflow check)."""
    mantissa = text.strip().lstrip("+-")
    if hex_form:
        mantissa = mantissa[2:].split("p")[0].split("P")[0]
    else:
        mantissa = mantissa.split("e")[0].split("E")[0]
    return mantissa.strip("0.") != ""


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------

def bind_entry(entry: ParsedEntry) -> ParsedEntry:
    """Convert the argument of *entry* and return the completed entry.

    The converted value is stored on the returned entry and written to
    the option's target.  Entries without an option are returned as-is.
    """
    option = entry.option
    if option is None:
        return entry

    value = convert_argument(entry.argument, option, entry.original_without_argument)
    if option.target is not None:
        option.target.store(value)
    return replace(entry, value=value)
