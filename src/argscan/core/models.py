"""Domain models for argscan.

:class:`ParsedEntry` is a **frozen** dataclass: once the scanner has
built an entry it never changes.  :class:`Option` descriptors are
mutable only through their explicit ``set_*`` methods, and are treated
as read-only while a parse is running.  :class:`ArgumentTarget` is the
one place the library writes into caller-owned state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from argscan.exceptions import InvalidOptionSpecError


# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------

class ArgumentType(Enum):
    """Declared type of an option argument."""

    STRING = "str"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"


# ---------------------------------------------------------------------------
# Bound write-target
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ArgumentTarget:
    """Caller-owned destination that receives parsed values.

    Bind one to an option with :meth:`Option.bind`.  The caller keeps
    ownership; the library only writes to it during a parse.
    """

    value: Any = None
    """Last successfully converted argument, or ``None``."""

    is_set: bool = False
    """Whether the option appeared at least once."""

    count: int = 0
    """Number of times the option appeared."""

    def record_occurrence(self) -> None:
        self.is_set = True
        self.count += 1

    def store(self, value: Any) -> None:
        self.value = value

    def reset(self) -> None:
        """Forget everything written by previous parses."""
        self.value = None
        self.is_set = False
        self.count = 0


# ---------------------------------------------------------------------------
# Option descriptor
# ---------------------------------------------------------------------------

@dataclass(eq=False, slots=True)
class Option:
    """Registered metadata describing one recognized option.

    An empty :attr:`argument_name` means the option takes no argument,
    whatever the other argument fields say.
    """

    long_name: str = ""
    """Long name without prefix (e.g. ``"file"``), or ``""``."""

    short_name: str | None = None
    """Single-character short name, or ``None``."""

    description: str = ""
    """Help text shown next to the option."""

    argument_name: str = ""
    """Label of the argument in help output (e.g. ``"FILE"``)."""

    argument_required: bool = False
    """Whether the argument must be supplied when the option is used."""

    argument_type: ArgumentType = ArgumentType.STRING
    """Type the argument is converted to."""

    group: str = ""
    """Help group the option is listed under."""

    target: ArgumentTarget | None = None
    """Optional destination for parsed values."""

    def __post_init__(self) -> None:
        _check_short_name(self.short_name)

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def takes_argument(self) -> bool:
        return self.argument_name != ""

    @property
    def name(self) -> str:
        """Long name when set, otherwise the short name."""
        if self.long_name:
            return self.long_name
        return self.short_name or ""

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def set_names(self, long_name: str, short_name: str | None = None) -> Option:
        _check_short_name(short_name)
        self.long_name = long_name
        self.short_name = short_name
        return self

    def set_description(self, description: str) -> Option:
        self.description = description
        return self

    def set_argument(
        self,
        name: str,
        argument_type: ArgumentType = ArgumentType.STRING,
        required: bool = True,
    ) -> Option:
        """Declare the option's argument.

        Passing an empty *name* turns the argument off again.
        """
        self.argument_name = name
        self.argument_type = argument_type
        self.argument_required = required
        return self

    def set_group(self, group: str) -> Option:
        self.group = group
        return self

    def bind(self, target: ArgumentTarget | None = None) -> ArgumentTarget:
        """Attach *target* (or a fresh one) and return it."""
        if target is None:
            target = ArgumentTarget()
        self.target = target
        return target

    def unbind(self) -> Option:
        self.target = None
        return self


def _check_short_name(short_name: str | None) -> None:
    if short_name is None:
        return
    if len(short_name) != 1 or short_name.isspace():
        raise InvalidOptionSpecError(
            f"short option name must be a single non-space character, got {short_name!r}",
        )


# ---------------------------------------------------------------------------
# Parsed entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """One option occurrence read from the command line."""

    original_text: str
    """Text as it appeared, including any argument (``"-f out.txt"``)."""

    original_without_argument: str = ""
    """The option specifier alone (``"-f"``)."""

    is_option: bool = True

    long_name: str = ""

    short_name: str | None = None

    argument: str = ""
    """Raw argument text, ``""`` when none was given."""

    option: Option | None = None
    """Descriptor the occurrence resolved to."""

    value: Any = None
    """Argument converted to the option's type, or ``None``."""
