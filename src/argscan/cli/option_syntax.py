"""Compact text form of an option declaration, used by ``argscan -o``.

Grammar::

    NAMES [ "=" ARG | "[=" ARG "]" ] [ ":" TYPE ] [ "@" GROUP ] [ " " DESCRIPTION ]

* ``NAMES`` — ``s,long``, ``long``, or a single character (short only)
* ``=ARG`` — required argument labelled ``ARG``
* ``[=ARG]`` — optional argument labelled ``ARG``
* ``TYPE`` — ``str`` (default), ``int``, ``uint`` or ``float``
* ``GROUP`` — help group name (no spaces)

Examples: ``v,verbose``, ``f,file=FILE``, ``tag[=TAG]``,
``c,count=N:uint@Limits stop after N matches``.
"""

from __future__ import annotations

import re

from argscan.core.models import ArgumentType, Option
from argscan.exceptions import InvalidOptionSpecError

_SPEC_RE = re.compile(
    r"""
    (?:(?P<short>[^\s,=\[:@]),)?             # short name and comma
    (?P<name>[^\s,=\[:@]+)                   # long name, or a lone short name
    (?:
        =(?P<required>[^\s:@\[\]]+)          # =ARG
      | \[=(?P<optional>[^\s:@\[\]]+)\]      # [=ARG]
    )?
    (?::(?P<type>\w+))?
    (?:@(?P<group>\S+))?
    (?:\s+(?P<description>.*))?
    """,
    re.VERBOSE | re.DOTALL,
)

_TYPE_NAMES: dict[str, ArgumentType] = {kind.value: kind for kind in ArgumentType}


def parse_option_spec(text: str) -> Option:
    """Build an :class:`Option` from its compact text form.

    Raises
    ------
    InvalidOptionSpecError
        If *text* does not follow the grammar or names an unknown type.
    """
    match = _SPEC_RE.fullmatch(text.strip())
    if match is None:
        raise InvalidOptionSpecError(
            f"invalid option declaration: '{text}'",
            hint="Use NAMES[=ARG|[=ARG]][:TYPE][@GROUP] [DESCRIPTION], e.g. 'f,file=FILE'.",
        )

    short_name = match.group("short")
    long_name = match.group("name")
    if short_name is None and len(long_name) == 1:
        short_name, long_name = long_name, ""

    option = Option(
        long_name=long_name,
        short_name=short_name,
        description=(match.group("description") or "").strip(),
        group=match.group("group") or "",
    )

    type_name = match.group("type")
    argument_type = ArgumentType.STRING
    if type_name is not None:
        if type_name not in _TYPE_NAMES:
            raise InvalidOptionSpecError(
                f"unknown argument type '{type_name}' in '{text}'",
                hint=f"Known types: {', '.join(_TYPE_NAMES)}.",
            )
        argument_type = _TYPE_NAMES[type_name]

    if match.group("required") is not None:
        option.set_argument(match.group("required"), argument_type, required=True)
    elif match.group("optional") is not None:
        option.set_argument(match.group("optional"), argument_type, required=False)
    elif type_name is not None:
        raise InvalidOptionSpecError(
            f"option '{text}' declares a type but takes no argument",
            hint="Add '=ARG' or '[=ARG]' before the type.",
        )
    return option
