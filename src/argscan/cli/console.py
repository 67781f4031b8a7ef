"""CLI console helpers built on Rich.

Consoles are created per call rather than at import time so that
output always goes to the *current* ``sys.stdout`` / ``sys.stderr``
(which test harnesses swap out).
"""

from __future__ import annotations

from typing import Any

from rich.console import Console


def get_rich_console(*, stderr: bool = True) -> Console:
	"""Create a Rich console targeting stderr (or stdout)."""
	return Console(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy around a Rich console."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **kwargs: Any) -> None:
		"""Render *objects* with Rich; keyword arguments pass through."""
		get_rich_console(stderr=self._stderr).print(*objects, **kwargs)


console = _ConsoleProxy(stderr=True)
"""Diagnostics: errors, hints, notices."""

report_console = _ConsoleProxy(stderr=False)
"""Command output: help text and parse reports."""
