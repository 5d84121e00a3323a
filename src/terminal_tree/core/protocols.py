"""Protocols (interfaces) consumed by the core layer.

The core never emits escape codes itself.  It hands each guide-line
segment and its color to a :class:`Painter`, which infrastructure
adapters implement for a concrete terminal styling backend.
"""

from __future__ import annotations

from typing import Protocol

from terminal_tree.core.colors import Color


class Painter(Protocol):
    """Contract for color backends.

    Any object with a matching :meth:`paint` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def paint(self, text: str, color: Color) -> str:
        """Return *text* wrapped in whatever codes render it in *color*.

        Implementations must be pure: the same arguments always produce
        the same string.
        """
        ...  # pragma: no cover
