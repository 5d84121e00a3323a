"""Infrastructure: ANSI escape codes via Rich.

Translates :data:`~terminal_tree.core.colors.Color` values into Rich
colors and renders styled segments as raw escape sequences.  Named
colors map onto the sixteen standard terminal colors; RGB colors are
emitted as 24-bit truecolor.

Rules
-----
* Rich is imported lazily so plain rendering never requires it.
* No terminal detection; callers decide whether to color at all.
* No ``print()``.
"""

from __future__ import annotations

from typing import Any

from terminal_tree.core.colors import Color, NamedColor
from terminal_tree.exceptions import EnvironmentError

# Dark variants are the standard colors and plain names the bright ones,
# except grey (standard white) and white (bright white).
ANSI_NUMBERS: dict[NamedColor, int] = {
    NamedColor.BLACK: 0,
    NamedColor.DARK_RED: 1,
    NamedColor.DARK_GREEN: 2,
    NamedColor.DARK_YELLOW: 3,
    NamedColor.DARK_BLUE: 4,
    NamedColor.DARK_MAGENTA: 5,
    NamedColor.DARK_CYAN: 6,
    NamedColor.GREY: 7,
    NamedColor.DARK_GREY: 8,
    NamedColor.RED: 9,
    NamedColor.GREEN: 10,
    NamedColor.YELLOW: 11,
    NamedColor.BLUE: 12,
    NamedColor.MAGENTA: 13,
    NamedColor.CYAN: 14,
    NamedColor.WHITE: 15,
}


def _import_rich_color() -> Any:
    """Import ``rich.color`` lazily for escape code generation."""
    try:
        import rich.color
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
            hint="Or render without color (--color never).",
        ) from exc
    return rich.color


def _import_rich_style_class() -> type[Any]:
    """Import ``rich.style.Style`` lazily."""
    try:
        from rich.style import Style
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
            hint="Or render without color (--color never).",
        ) from exc
    return Style


class RichAnsiPainter:
    """:class:`~terminal_tree.core.protocols.Painter` backed by Rich."""

    def __init__(self) -> None:
        self._rich_color = _import_rich_color()
        self._style_class = _import_rich_style_class()
        self._styles: dict[Color, Any] = {}

    def to_rich_color(self, color: Color) -> Any:
        """Return the ``rich.color.Color`` equivalent of *color*."""
        rich_color_class = self._rich_color.Color
        if isinstance(color, NamedColor):
            return rich_color_class.from_ansi(ANSI_NUMBERS[color])
        return rich_color_class.from_rgb(color.r, color.g, color.b)

    def _style(self, color: Color) -> Any:
        style = self._styles.get(color)
        if style is None:
            style = self._style_class(color=self.to_rich_color(color))
            self._styles[color] = style
        return style

    def paint(self, text: str, color: Color) -> str:
        """Wrap *text* in a foreground color and a reset sequence."""
        return self._style(color).render(
            text,
            color_system=self._rich_color.ColorSystem.TRUECOLOR,
        )
