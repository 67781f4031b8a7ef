"""Tests for domain models (core/models.py).

Covers option descriptor defaults and setters, the bound write-target,
and the immutability of parsed entries.
"""

from __future__ import annotations

import pytest

from argscan.core.models import ArgumentTarget, ArgumentType, Option, ParsedEntry
from argscan.exceptions import InvalidOptionSpecError


# ---------------------------------------------------------------------------
# Option
# ---------------------------------------------------------------------------

class TestOption:
    def test_empty_defaults(self) -> None:
        opt = Option()
        assert opt.name == ""
        assert opt.long_name == ""
        assert opt.short_name is None
        assert opt.description == ""
        assert opt.argument_name == ""
        assert not opt.argument_required
        assert opt.argument_type is ArgumentType.STRING
        assert opt.group == ""
        assert opt.target is None
        assert not opt.takes_argument

    def test_short_name_only(self) -> None:
        opt = Option(short_name="v")
        assert opt.name == "v"
        assert opt.long_name == ""

    def test_long_name_only(self) -> None:
        opt = Option(long_name="version")
        assert opt.name == "version"
        assert opt.short_name is None

    def test_long_and_short(self) -> None:
        opt = Option(long_name="version", short_name="v")
        assert opt.name == "version"
        assert opt.short_name == "v"

    def test_argument_setter(self) -> None:
        opt = Option(long_name="file", short_name="f").set_argument("FILE")
        assert opt.argument_name == "FILE"
        assert opt.argument_required
        assert opt.argument_type is ArgumentType.STRING
        assert opt.takes_argument

    def test_optional_argument(self) -> None:
        opt = Option(long_name="dir").set_argument("DIRECTORY", required=False)
        assert opt.argument_name == "DIRECTORY"
        assert not opt.argument_required

    def test_chained_setters(self) -> None:
        opt = Option()
        opt.set_names("all", "a").set_description("show all").set_group("Main")
        assert opt.name == "all"
        assert opt.short_name == "a"
        assert opt.description == "show all"
        assert opt.group == "Main"

        opt.set_names("block-size", "b").set_argument("SIZE", ArgumentType.UINT, True)
        assert opt.long_name == "block-size"
        assert opt.short_name == "b"
        assert opt.argument_name == "SIZE"
        assert opt.argument_required
        assert opt.argument_type is ArgumentType.UINT

    def test_empty_argument_name_means_no_argument(self) -> None:
        opt = Option(long_name="quiet", argument_required=True, argument_type=ArgumentType.INT)
        assert not opt.takes_argument

    @pytest.mark.parametrize("bad", ["", "ab", " "])
    def test_invalid_short_name(self, bad: str) -> None:
        with pytest.raises(InvalidOptionSpecError):
            Option(short_name=bad)

    def test_set_names_validates(self) -> None:
        with pytest.raises(InvalidOptionSpecError):
            Option(long_name="x").set_names("x", "xy")

    def test_identity_equality(self) -> None:
        assert Option(long_name="a") != Option(long_name="a")


# ---------------------------------------------------------------------------
# ArgumentTarget
# ---------------------------------------------------------------------------

class TestArgumentTarget:
    def test_bind_creates_target(self) -> None:
        opt = Option(long_name="file")
        target = opt.bind()
        assert opt.target is target
        assert target.value is None
        assert not target.is_set
        assert target.count == 0

    def test_bind_existing_target(self) -> None:
        target = ArgumentTarget()
        opt = Option(long_name="file")
        assert opt.bind(target) is target

    def test_unbind(self) -> None:
        opt = Option(long_name="file")
        opt.bind()
        opt.unbind()
        assert opt.target is None

    def test_record_and_reset(self) -> None:
        target = ArgumentTarget()
        target.record_occurrence()
        target.record_occurrence()
        target.store(5)
        assert target.is_set
        assert target.count == 2
        assert target.value == 5
        target.reset()
        assert target == ArgumentTarget()


# ---------------------------------------------------------------------------
# ParsedEntry
# ---------------------------------------------------------------------------

class TestParsedEntry:
    def test_frozen(self) -> None:
        entry = ParsedEntry(original_text="command", is_option=False)
        with pytest.raises(AttributeError):
            entry.argument = "x"  # type: ignore[misc]

    def test_equality(self) -> None:
        opt = Option(long_name="file", short_name="f")
        a = ParsedEntry("-f x", "-f", True, "file", "f", "x", opt)
        b = ParsedEntry("-f x", "-f", True, "file", "f", "x", opt)
        assert a == b

    def test_defaults(self) -> None:
        entry = ParsedEntry(original_text="--version")
        assert entry.is_option
        assert entry.argument == ""
        assert entry.option is None
        assert entry.value is None
