"""Help rendering — turns an option registry into a formatted listing.

Layout of one option line (default :class:`HelpLayout`)::

      -f, --file=FILE           read input from FILE
          --tag[=TAG]           jump to TAG; continuation lines are
                                  indented further

Groups are printed in registry order, each preceded by its name (when
it has one) and separated from the next by a blank line.  Empty groups
are skipped.
"""

from __future__ import annotations

from argscan.core.config import HelpLayout, ParserConfig
from argscan.core.models import Option
from argscan.core.registry import OptionRegistry
from argscan.utils.text import wrap_text


def option_usage(option: Option, config: ParserConfig) -> str:
    """Return the ``-s, --long[=ARG]`` column for *option* (no indent)."""
    usage = ""
    if option.short_name is not None:
        usage += config.short_prefix + option.short_name
        if option.long_name:
            usage += ", "
    else:
        usage += " " * (len(config.short_prefix) + 3)

    if option.long_name:
        usage += config.long_prefix + option.long_name

    if option.takes_argument:
        if option.argument_required:
            usage += config.equals + option.argument_name
        else:
            usage += "[" + config.equals + option.argument_name + "]"
    return usage


def format_option(option: Option, config: ParserConfig, layout: HelpLayout) -> str:
    usage = " " * layout.option_indent + option_usage(option, config)
    spacing = layout.desc_first_line_indent - len(usage)

    if spacing <= 1:
        # Usage too wide: description starts on its own line.
        text = wrap_text(usage, layout.max_line_length)
        if option.description:
            text += "\n" + wrap_text(
                option.description,
                layout.max_line_length,
                layout.desc_multiline_indent,
                layout.desc_first_line_indent,
            )
        return text

    if not option.description:
        return usage
    description = wrap_text(
        option.description,
        layout.max_line_length,
        layout.desc_multiline_indent,
        layout.desc_first_line_indent,
    )
    return usage + description[len(usage):]


def format_help(
    registry: OptionRegistry,
    config: ParserConfig | None = None,
    layout: HelpLayout | None = None,
) -> str:
    """Render help text for every option in *registry*."""
    if config is None:
        config = ParserConfig()
    if layout is None:
        layout = HelpLayout()

    blocks: list[str] = []
    for group in registry.groups():
        if not group:
            continue
        lines: list[str] = []
        if group.name:
            lines.append(wrap_text(group.name, layout.max_line_length, layout.group_indent))
        lines.extend(format_option(option, config, layout) for option in group)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
