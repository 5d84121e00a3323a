"""Diagnostic console for the CLI layer.

Errors and hints go to stderr through Rich when it is installed, and
through plain ``print`` otherwise, so ``--help`` and uncolored output
keep working without it.  Tree rows never pass through here: they are
already rendered and are written to stdout verbatim.
"""

from __future__ import annotations

import sys
from typing import Any

from terminal_tree.exceptions import EnvironmentError


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
    return console_class(stderr=True, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain fallback."""

    def print(self, message: str = "", *, label: str = "", style: str = "") -> None:
        """Print *message* after an optional *label* rendered in *style*."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(f"{label} {message}" if label else message, file=sys.stderr)
            return

        from rich.markup import escape

        text = escape(message)
        if label:
            styled = f"[{style}]{label}[/{style}]" if style else label
            text = f"{styled} {text}"
        rich_console.print(text)


console = _ConsoleProxy()
