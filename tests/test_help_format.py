"""Tests for help rendering (core/help_format.py).

Expected lines are built with ``str.ljust`` so the description column
(30 by default) is explicit in every assertion.
"""

from __future__ import annotations

from argscan.core.config import HelpLayout, ParserConfig
from argscan.core.help_format import format_help, format_option, option_usage
from argscan.core.models import Option
from argscan.core.parser import Parser
from argscan.core.registry import OptionRegistry


def _line(usage: str, description: str) -> str:
    return usage.ljust(30) + description


# ---------------------------------------------------------------------------
# Usage column
# ---------------------------------------------------------------------------

class TestOptionUsage:
    def test_short_and_long(self) -> None:
        assert option_usage(Option(long_name="all", short_name="a"), ParserConfig()) == "-a, --all"

    def test_long_only_is_padded(self) -> None:
        assert option_usage(Option(long_name="version"), ParserConfig()) == "    --version"

    def test_short_only(self) -> None:
        assert option_usage(Option(short_name="S"), ParserConfig()) == "-S"

    def test_required_argument(self) -> None:
        opt = Option(long_name="file", short_name="f").set_argument("FILE")
        assert option_usage(opt, ParserConfig()) == "-f, --file=FILE"

    def test_optional_argument(self) -> None:
        opt = Option(short_name="P").set_argument("PROMPT", required=False)
        assert option_usage(opt, ParserConfig()) == "-P[=PROMPT]"

    def test_custom_syntax(self) -> None:
        config = ParserConfig(short_prefix="/", long_prefix="//", equals=":")
        opt = Option(long_name="file", short_name="f").set_argument("FILE")
        assert option_usage(opt, config) == "/f, //file:FILE"
        assert option_usage(Option(long_name="all"), config) == "    //all"


# ---------------------------------------------------------------------------
# One option
# ---------------------------------------------------------------------------

class TestFormatOption:
    def test_description_column(self) -> None:
        opt = Option(long_name="help", short_name="?", description="display help text")
        assert format_option(opt, ParserConfig(), HelpLayout()) == _line(
            "  -?, --help", "display help text",
        )

    def test_no_description(self) -> None:
        opt = Option(long_name="xray", short_name="x")
        assert format_option(opt, ParserConfig(), HelpLayout()) == "  -x, --xray"

    def test_long_description_wraps(self) -> None:
        opt = Option(
            long_name="window",
            short_name="z",
            description="change the default scrolling window size to N lines, "
            "counting from the top of the screen and ignoring the status line",
        ).set_argument("N")
        lines = format_option(opt, ParserConfig(), HelpLayout()).split("\n")
        assert len(lines) > 1
        assert lines[0].startswith(_line("  -z, --window=N", "change"))
        assert all(len(line) <= 78 for line in lines)
        for line in lines[1:]:
            assert line.startswith(" " * 32)
            assert line[32] != " "

    def test_wide_usage_moves_description(self) -> None:
        opt = Option(
            long_name="extremely-long-option-name",
            short_name="x",
            description="does things",
        ).set_argument("VALUE")
        lines = format_option(opt, ParserConfig(), HelpLayout()).split("\n")
        assert lines == [
            "  -x, --extremely-long-option-name=VALUE",
            " " * 30 + "does things",
        ]

    def test_two_spaces_short_of_column_stays_inline(self) -> None:
        opt = Option(long_name="abcdefghijklmnopqrst", short_name="a", description="d")
        text = format_option(opt, ParserConfig(), HelpLayout())
        assert text == _line("  -a, --abcdefghijklmnopqrst", "d")

    def test_one_space_short_of_column_moves_description(self) -> None:
        usage = "  -a, --abcdefghijklmnopqrstu"
        assert len(usage) == 29
        opt = Option(long_name="abcdefghijklmnopqrstu", short_name="a", description="d")
        lines = format_option(opt, ParserConfig(), HelpLayout()).split("\n")
        assert lines == [usage, " " * 30 + "d"]

    def test_custom_layout(self) -> None:
        layout = HelpLayout(option_indent=0, desc_first_line_indent=12, desc_multiline_indent=14)
        opt = Option(long_name="all", short_name="a", description="show all")
        assert format_option(opt, ParserConfig(), layout) == "-a, --all".ljust(12) + "show all"


# ---------------------------------------------------------------------------
# Whole listing
# ---------------------------------------------------------------------------

class TestFormatHelp:
    def test_empty_registry(self) -> None:
        assert format_help(OptionRegistry()) == ""

    def test_groups(self) -> None:
        registry = OptionRegistry()
        registry.add_option("all", "a", "show all")
        registry.add_option("file", "f", "read FILE", "FILE", True, group="Input")
        assert format_help(registry) == "\n".join([
            _line("  -a, --all", "show all"),
            "",
            "Input",
            _line("  -f, --file=FILE", "read FILE"),
        ])

    def test_empty_groups_skipped(self) -> None:
        registry = OptionRegistry()
        registry.group("Nothing here")
        registry.add_option("all", "a", "show all", group="Main")
        assert format_help(registry) == "Main\n" + _line("  -a, --all", "show all")

    def test_group_indent(self) -> None:
        registry = OptionRegistry()
        registry.add_option("all", "a", "show all", group="Main")
        text = format_help(registry, layout=HelpLayout(group_indent=1))
        assert text.split("\n")[0] == " Main"

    def test_less_listing(self, less_parser: Parser) -> None:
        lines = less_parser.format_help().split("\n")
        assert lines[0] == _line("  -?, --help", "display help text")
        assert _line("      --version", "display program version") in lines
        assert _line("      --block-size=SIZE", "scale sizes by SIZE") in lines
        assert _line("  -b, --buffer=N", "buffer size for each file") in lines
        assert _line("  -P[=PROMPT]", "use custom prompt") in lines
        assert _line("  -t, --tag[=TAG]", "edit file containing tag TAG") in lines
        assert _line("  -S", "chop long lines") in lines
        assert "Listing" in lines
        assert lines[lines.index("Listing") - 1] == ""

    def test_sorted_listing(self) -> None:
        parser = Parser()
        parser.add_option("zeta", "z", "last", group="B")
        parser.add_option("alpha", None, "first", group="B")
        parser.add_option("mid", "m", "middle", group="A")
        parser.sort_groups()
        parser.sort_options()
        assert parser.format_help().split("\n") == [
            "A",
            _line("  -m, --mid", "middle"),
            "",
            "B",
            _line("      --alpha", "first"),
            _line("  -z, --zeta", "last"),
        ]
