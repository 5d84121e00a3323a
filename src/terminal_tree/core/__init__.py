"""Core layer: builders, branches, colors and the prefix algorithm.

Rules
-----
* No ``print()`` calls.
* No filesystem or terminal I/O.
* No imports from ``cli``.
* Everything is immutable; rendering is a pure function of its inputs.
"""

from terminal_tree.core.colors import (
    Color,
    NamedColor,
    RgbColor,
    format_color,
    parse_color,
    parse_colors,
)
from terminal_tree.core.config import DEFAULT_COLORS, DEFAULT_INDENTATION
from terminal_tree.core.protocols import Painter
from terminal_tree.core.tree import TreeBranch, TreeBuilder

__all__: list[str] = [
    "DEFAULT_COLORS",
    "DEFAULT_INDENTATION",
    "Color",
    "NamedColor",
    "Painter",
    "RgbColor",
    "TreeBranch",
    "TreeBuilder",
    "format_color",
    "parse_color",
    "parse_colors",
]
