"""Option registry — the option table a parser reads from.

Options live in named groups (the group only matters for help output).
Lookups walk the groups in insertion order.  Names are unique across the
whole registry: the first registration of a short or long name wins and
any later clash raises :class:`~argscan.exceptions.DuplicateOptionError`.
"""

from __future__ import annotations

from collections.abc import Iterator

from argscan.core.models import ArgumentType, Option
from argscan.exceptions import DuplicateOptionError, InvalidOptionSpecError


class OptionGroup:
    """An ordered, named list of options."""

    def __init__(self, name: str = "") -> None:
        self.name: str = name
        self._options: list[Option] = []

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __bool__(self) -> bool:
        return len(self._options) > 0

    def __repr__(self) -> str:
        return f"OptionGroup({self.name!r}, options={len(self._options)})"

    def find_long(self, long_name: str) -> Option | None:
        for option in self._options:
            if option.long_name and option.long_name == long_name:
                return option
        return None

    def find_short(self, short_name: str) -> Option | None:
        for option in self._options:
            if option.short_name is not None and option.short_name == short_name:
                return option
        return None

    def sort(self) -> None:
        """Sort options by short name, falling back to the long name."""
        self._options.sort(key=_option_sort_key)

    def _append(self, option: Option) -> None:
        self._options.append(option)


def _option_sort_key(option: Option) -> tuple[str, str]:
    primary = option.short_name or option.long_name
    return (primary.lower(), primary)


class OptionRegistry:
    """Ordered collection of option groups.

    The registry is a plain value owned by the caller; pass it to
    :func:`~argscan.core.scanner.scan` (or wrap it in a
    :class:`~argscan.core.parser.Parser`) for each parse.
    """

    def __init__(self) -> None:
        self._groups: list[OptionGroup] = []

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Option]:
        for group in self._groups:
            yield from group

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        if self.lookup_long(name) is not None:
            return True
        return len(name) == 1 and self.lookup_short(name) is not None

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def groups(self) -> list[OptionGroup]:
        return list(self._groups)

    def find_group(self, name: str) -> OptionGroup | None:
        for group in self._groups:
            if group.name == name:
                return group
        return None

    def group(self, name: str = "") -> OptionGroup:
        """Return the group called *name*, creating it if needed."""
        found = self.find_group(name)
        if found is None:
            found = OptionGroup(name)
            self._groups.append(found)
        return found

    def sort_groups(self) -> None:
        self._groups.sort(key=lambda group: group.name)

    def sort_options(self) -> None:
        for group in self._groups:
            group.sort()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(self, option: Option) -> Option:
        """Register *option* in the group named by ``option.group``.

        Raises
        ------
        InvalidOptionSpecError
            If the option has neither a short nor a long name.
        DuplicateOptionError
            If either name is already registered.
        """
        if not option.long_name and option.short_name is None:
            raise InvalidOptionSpecError(
                "option must have a short name, a long name, or both",
            )
        if option.long_name and self.lookup_long(option.long_name) is not None:
            raise DuplicateOptionError(
                f"option '--{option.long_name}' is already registered",
                hint="Each long name may only be added once.",
            )
        if option.short_name is not None and self.lookup_short(option.short_name) is not None:
            raise DuplicateOptionError(
                f"option '-{option.short_name}' is already registered",
                hint="Each short name may only be added once.",
            )
        self.group(option.group)._append(option)
        return option

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
        """Build an :class:`Option` from the arguments and register it."""
        return self.add(
            Option(
                long_name=long_name,
                short_name=short_name,
                description=description,
                argument_name=argument_name,
                argument_required=argument_required,
                argument_type=argument_type,
                group=group,
            )
        )

    def get_or_add_long(self, long_name: str) -> Option:
        found = self.lookup_long(long_name)
        if found is not None:
            return found
        return self.add(Option(long_name=long_name))

    def get_or_add_short(self, short_name: str) -> Option:
        found = self.lookup_short(short_name)
        if found is not None:
            return found
        return self.add(Option(short_name=short_name))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup_long(self, long_name: str) -> Option | None:
        """Return the option registered under *long_name*, if any."""
        if not long_name:
            return None
        for group in self._groups:
            found = group.find_long(long_name)
            if found is not None:
                return found
        return None

    def lookup_short(self, short_name: str) -> Option | None:
        """Return the option registered under *short_name*, if any."""
        for group in self._groups:
            found = group.find_short(short_name)
            if found is not None:
                return found
        return None
