"""Allow ``python -m argscan`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m argscan`` behaves identically to the ``argscan``
console script.
"""

from __future__ import annotations

from argscan.cli.app import cli

if __name__ == "__main__":
    cli()
