"""CLI console helpers with optional Rich support.

All diagnostic output goes to stderr.  Rich is imported lazily so that
``--version`` and usage errors still work when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from idlc.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render Rich markup when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def line(self, text: str) -> None:
		"""Write *text* verbatim as one line: no markup, no wrapping."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(text, file=sys.stderr)
			return
		rich_console.print(
			text,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render an ``Error:`` line and an optional ``Hint:`` line.

		*message* and *hint* are treated as plain text, never as markup.
		"""
		try:
			rich_console = get_rich_console()
			from rich.text import Text
		except (EnvironmentError, ModuleNotFoundError):
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return
		rich_console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)
		if hint:
			rich_console.print(Text.assemble(("Hint: ", "yellow"), hint), soft_wrap=True)


console = _ConsoleProxy()
