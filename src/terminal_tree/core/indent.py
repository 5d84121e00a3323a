"""Prefix segments and per-depth color cycling.

A branch at level ``L`` is prefixed by ``L`` segments of equal width.
Segment ``i`` (1-based) belongs to depth ``i``:

* the final segment is the branch's own connector (``├`` or ``└``),
  padded with ``─`` and one trailing space;
* every earlier segment continues an ancestor's guide line (``│``), or
  is blank when that ancestor was the last of its siblings.

Every function here is pure; nothing tracks state between calls.
"""

from __future__ import annotations

from collections.abc import Sequence

from terminal_tree.core.colors import Color

BRANCH: str = "├"
BRANCH_LAST: str = "└"
HORIZONTAL: str = "─"
VERTICAL: str = "│"


def color_for_depth(palette: Sequence[Color], depth: int) -> Color | None:
    """Return the color of the segment at 1-based *depth*.

    Colors cycle, so a palette shorter than the tree is deep repeats
    from the start.  An empty palette yields ``None``.
    """
    if not palette:
        return None
    return palette[(depth - 1) % len(palette)]


def connector_segment(indentation: int, *, last: bool = False) -> str:
    """Return the segment directly in front of an item."""
    glyph = BRANCH_LAST if last else BRANCH
    return glyph + HORIZONTAL * (indentation - 2) + " "


def continuation_segment(indentation: int, *, ended: bool = False) -> str:
    """Return the segment carrying an ancestor's guide line past a row."""
    if ended:
        return " " * indentation
    return VERTICAL + " " * (indentation - 1)


def indent_segments(lineage: Sequence[bool], indentation: int) -> list[str]:
    """Build the uncolored prefix segments for a branch.

    Parameters
    ----------
    lineage:
        One flag per depth from 1 to the branch's level, telling whether
        the branch at that depth was the last of its siblings.  The
        final flag is the branch's own.
    indentation:
        Cells per segment, at least 2.
    """
    if not lineage:
        return []
    segments = [continuation_segment(indentation, ended=ended) for ended in lineage[:-1]]
    segments.append(connector_segment(indentation, last=lineage[-1]))
    return segments
