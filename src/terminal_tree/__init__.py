"""terminal-tree: colored box-drawing trees for the terminal.

Callers walk their own data and render one row per item through
:class:`TreeBuilder` and :class:`TreeBranch`.
"""

from terminal_tree.core import (
    Color,
    NamedColor,
    RgbColor,
    TreeBranch,
    TreeBuilder,
    format_color,
    parse_color,
    parse_colors,
)
from terminal_tree.version import __version__

__all__: list[str] = [
    "Color",
    "NamedColor",
    "RgbColor",
    "TreeBranch",
    "TreeBuilder",
    "__version__",
    "format_color",
    "parse_color",
    "parse_colors",
]
