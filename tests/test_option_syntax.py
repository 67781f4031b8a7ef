"""Tests for the compact option declaration syntax (cli/option_syntax.py)."""

from __future__ import annotations

import pytest

from argscan.cli.option_syntax import parse_option_spec
from argscan.core.models import ArgumentType
from argscan.exceptions import InvalidOptionSpecError


class TestParseOptionSpec:
    def test_short_and_long(self) -> None:
        opt = parse_option_spec("v,verbose")
        assert opt.short_name == "v"
        assert opt.long_name == "verbose"
        assert not opt.takes_argument
        assert opt.description == ""
        assert opt.group == ""

    def test_long_only(self) -> None:
        opt = parse_option_spec("version")
        assert opt.long_name == "version"
        assert opt.short_name is None

    def test_single_character_is_short(self) -> None:
        opt = parse_option_spec("x")
        assert opt.short_name == "x"
        assert opt.long_name == ""

    def test_required_argument(self) -> None:
        opt = parse_option_spec("f,file=FILE")
        assert opt.argument_name == "FILE"
        assert opt.argument_required
        assert opt.argument_type is ArgumentType.STRING

    def test_optional_argument(self) -> None:
        opt = parse_option_spec("tag[=TAG]")
        assert opt.long_name == "tag"
        assert opt.argument_name == "TAG"
        assert not opt.argument_required

    def test_everything(self) -> None:
        opt = parse_option_spec("c,count=N:uint@Limits stop after N matches")
        assert opt.short_name == "c"
        assert opt.long_name == "count"
        assert opt.argument_name == "N"
        assert opt.argument_type is ArgumentType.UINT
        assert opt.group == "Limits"
        assert opt.description == "stop after N matches"

    def test_description_only(self) -> None:
        opt = parse_option_spec("  q,quiet   be quiet  ")
        assert opt.long_name == "quiet"
        assert opt.description == "be quiet"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("n=N:int", ArgumentType.INT),
            ("r,ratio[=X]:float", ArgumentType.FLOAT),
            ("s=S:str", ArgumentType.STRING),
        ],
    )
    def test_types(self, text: str, expected: ArgumentType) -> None:
        assert parse_option_spec(text).argument_type is expected

    def test_unknown_type(self) -> None:
        with pytest.raises(InvalidOptionSpecError) as exc_info:
            parse_option_spec("c=N:double")
        assert "double" in str(exc_info.value)
        assert exc_info.value.hint is not None
        assert "uint" in exc_info.value.hint

    def test_type_without_argument(self) -> None:
        with pytest.raises(InvalidOptionSpecError, match="takes no argument"):
            parse_option_spec("quiet:int")

    @pytest.mark.parametrize("text", ["", "=FILE", "a,b,c", "ab,long", "f,file=", "tag[=TAG"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(InvalidOptionSpecError) as exc_info:
            parse_option_spec(text)
        assert exc_info.value.hint is not None
