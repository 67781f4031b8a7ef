"""Result accumulator — the ordered output of one parse.

A :class:`ParserResult` holds the option entries in the order they were
read and, separately, the positional arguments.  Entries are only ever
appended or cleared in bulk; nothing is reordered or edited in place.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from argscan.core.models import ParsedEntry


class ParserResult:
    """Ordered, append-only sequence of :class:`ParsedEntry` values.

    Parameters
    ----------
    entries:
        Optional initial entries, appended in order.
    positional:
        Optional initial positional arguments.
    """

    def __init__(
        self,
        entries: Iterable[ParsedEntry] = (),
        positional: Iterable[str] = (),
    ) -> None:
        self._entries: list[ParsedEntry] = []
        self.positional: list[str] = list(positional)
        """Non-option tokens, and everything after the end-of-options
        marker."""
        self.program_name: str | None = None
        """The first token, when the parse was told to skip it."""
        for entry in entries:
            self.append(entry)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, entry: ParsedEntry) -> None:
        """Append *entry*.

        Raises
        ------
        ValueError
            If *entry* is marked as an option but has no descriptor.
        """
        if entry.is_option and entry.option is None:
            raise ValueError(
                f"option entry {entry.original_text!r} has no option descriptor",
            )
        self._entries.append(entry)

    def clear(self) -> None:
        """Drop every entry and positional argument."""
        self._entries.clear()
        self.positional.clear()
        self.program_name = None

    # ------------------------------------------------------------------
    # Sequence access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return len(self._entries) > 0

    @property
    def empty(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[ParsedEntry]:
        return iter(self._entries)

    def __reversed__(self) -> Iterator[ParsedEntry]:
        return reversed(self._entries)

    def __getitem__(self, index: int) -> ParsedEntry:
        return self._entries[index]

    def at(self, index: int) -> ParsedEntry:
        """Bounds-checked access; negative indices are out of range too.

        Raises
        ------
        IndexError
            Unless ``0 <= index < len(self)``.
        """
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"result index {index} out of range (size {len(self._entries)})",
            )
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParserResult):
            return NotImplemented
        return (
            self._entries == other._entries
            and self.positional == other.positional
            and self.program_name == other.program_name
        )

    def __repr__(self) -> str:
        return (
            f"ParserResult(entries={len(self._entries)}, "
            f"positional={self.positional!r})"
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_long(self, long_name: str) -> ParsedEntry | None:
        """Return the first entry for long option *long_name*, or ``None``."""
        for entry in self._entries:
            if entry.long_name and entry.long_name == long_name:
                return entry
        return None

    def find_short(self, short_name: str) -> ParsedEntry | None:
        """Return the first entry for short option *short_name*, or ``None``."""
        for entry in self._entries:
            if entry.short_name is not None and entry.short_name == short_name:
                return entry
        return None

    def find_all(self, name: str) -> list[ParsedEntry]:
        """Every entry whose long name, or short name, equals *name*."""
        return [
            entry
            for entry in self._entries
            if (entry.long_name and entry.long_name == name)
            or (entry.short_name is not None and entry.short_name == name)
        ]

    def count(self, name: str) -> int:
        return len(self.find_all(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.count(name) > 0
