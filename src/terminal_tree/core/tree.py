"""Tree builder and branch render contexts.

Usage::

    builder = TreeBuilder().with_colors(["red"]).with_indentation(4)
    root = builder.branch("root")
    child = root.branch("child", last=True)
    print(root)
    print(child)

A :class:`TreeBuilder` holds render-wide settings.  A
:class:`TreeBranch` is a cheap, immutable handle for one row: it knows
its depth and item and can spawn a child one level deeper.  No tree is
materialised; the caller drives traversal and prints rows as it goes.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache

from terminal_tree.core.colors import Color, coerce_colors
from terminal_tree.core.config import DEFAULT_COLORS, DEFAULT_INDENTATION, validate_indentation
from terminal_tree.core.indent import color_for_depth, indent_segments
from terminal_tree.core.protocols import Painter


@lru_cache(maxsize=1)
def _default_painter() -> Painter:
    from terminal_tree.infra.ansi import RichAnsiPainter

    return RichAnsiPainter()


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TreeBuilder:
    """Render-wide settings shared by every branch it produces.

    Builders are values: each ``with_*`` method returns a new builder and
    leaves the receiver untouched.
    """

    colors: tuple[Color, ...] = DEFAULT_COLORS
    """Palette cycled across depths.  Empty disables coloring.

    The constructor also accepts any iterable of colors or color strings,
    or one comma-delimited string; it is stored as a tuple of colors.
    """

    indentation: int = DEFAULT_INDENTATION
    """Cells per nesting level, including the connector glyph."""

    color_output: bool = True
    """Explicit switch for emitting escape codes."""

    painter: Painter | None = field(default=None, compare=False)
    """Color backend.  ``None`` selects the rich ANSI painter."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", coerce_colors(self.colors))
        validate_indentation(self.indentation)

    # ------------------------------------------------------------------
    # Value transforms
    # ------------------------------------------------------------------

    def with_colors(self, colors: Iterable[Color | str] | str) -> TreeBuilder:
        """Return a builder using *colors* as its palette.

        A single string is read as a comma-delimited list (``"red,#179fff"``).
        """
        return dataclasses.replace(self, colors=coerce_colors(colors))

    def with_indentation(self, indentation: int) -> TreeBuilder:
        """Return a builder with a different indentation width.

        Raises
        ------
        InvalidIndentationError
            When *indentation* is outside ``[2, 255]``.
        """
        return dataclasses.replace(self, indentation=indentation)

    def with_color_output(self, enabled: bool) -> TreeBuilder:
        """Return a builder with escape codes switched on or off."""
        return dataclasses.replace(self, color_output=bool(enabled))

    def with_painter(self, painter: Painter | None) -> TreeBuilder:
        """Return a builder that colors segments through *painter*."""
        return dataclasses.replace(self, painter=painter)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def colored(self) -> bool:
        """Whether rendered prefixes carry escape codes."""
        return self.color_output and bool(self.colors)

    def branch(self, item: object) -> TreeBranch:
        """Return the root branch (level 0) wrapping *item*."""
        return TreeBranch(builder=self, item=item)

    def prefix(self, lineage: tuple[bool, ...], *, plain: bool = False) -> str:
        """Render the prefix for a branch with the given *lineage*."""
        segments = indent_segments(lineage, self.indentation)
        if plain or not self.colored or not segments:
            return "".join(segments)

        painter = self.painter if self.painter is not None else _default_painter()
        return "".join(
            painter.paint(segment, color_for_depth(self.colors, depth))  # type: ignore[arg-type]
            for depth, segment in enumerate(segments, start=1)
        )


# ---------------------------------------------------------------------------
# Branch
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TreeBranch:
    """One row of the tree: an item at a known depth."""

    builder: TreeBuilder
    item: object
    lineage: tuple[bool, ...] = ()
    """Per-depth "last sibling" flags from level 1 to this branch."""

    @property
    def level(self) -> int:
        """Depth from the root; the root is 0."""
        return len(self.lineage)

    @property
    def last(self) -> bool:
        """Whether this branch was marked as the last of its siblings."""
        return bool(self.lineage) and self.lineage[-1]

    def branch(self, item: object, *, last: bool = False) -> TreeBranch:
        """Return a child one level deeper.

        Pass ``last=True`` for the final sibling so it is drawn with
        ``└`` and its descendants stop drawing its guide line.
        """
        return TreeBranch(builder=self.builder, item=item, lineage=self.lineage + (bool(last),))

    def prefix(self, *, plain: bool = False) -> str:
        """Return the indentation in front of the item."""
        return self.builder.prefix(self.lineage, plain=plain)

    def render(self, *, plain: bool = False) -> str:
        """Return the full row, without a line terminator."""
        return f"{self.prefix(plain=plain)}{self.item}"

    def __str__(self) -> str:
        return self.render()
