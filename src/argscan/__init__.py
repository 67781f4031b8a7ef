"""argscan — command-line option parsing.

Declare options (short and long names, argument shape and type) on a
:class:`Parser`, parse ``sys.argv`` or a command-line string, and read
back an ordered :class:`ParserResult` plus the positional arguments.
"""

from argscan.core import (
    ArgumentTarget,
    ArgumentType,
    HelpLayout,
    Option,
    OptionRegistry,
    ParsedEntry,
    ParseOutcome,
    Parser,
    ParserConfig,
    ParserResult,
    parse_args,
)
from argscan.exceptions import (
    ArgscanError,
    ArgumentNotAcceptedError,
    ArgumentOutOfRangeError,
    DuplicateOptionError,
    ErrorKind,
    InvalidArgumentError,
    InvalidOptionError,
    InvalidOptionSpecError,
    MissingArgumentError,
    OptionSpecError,
    ParseError,
)
from argscan.version import __version__

__all__: list[str] = [
    "ArgscanError",
    "ArgumentNotAcceptedError",
    "ArgumentOutOfRangeError",
    "ArgumentTarget",
    "ArgumentType",
    "DuplicateOptionError",
    "ErrorKind",
    "HelpLayout",
    "InvalidArgumentError",
    "InvalidOptionError",
    "InvalidOptionSpecError",
    "MissingArgumentError",
    "Option",
    "OptionRegistry",
    "OptionSpecError",
    "ParseError",
    "ParseOutcome",
    "ParsedEntry",
    "Parser",
    "ParserConfig",
    "ParserResult",
    "__version__",
    "parse_args",
]
