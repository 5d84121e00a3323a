"""Color values for branch guide lines.

A color is either one of sixteen named terminal colors or a 24-bit RGB
triple.  Both are immutable value objects and neither knows anything about
escape codes.  Translating a color into terminal output is the job of a
:class:`~terminal_tree.core.protocols.Painter`.

Textual forms
-------------
* Named colors use their lowercase name (``dark_blue``).
* RGB colors use ``#rrggbb`` with lowercase hex digits (``#179fff``).
"""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Union

from terminal_tree.exceptions import InvalidColorError


class NamedColor(Enum):
    """The closed set of named terminal colors."""

    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


@dataclass(frozen=True, slots=True)
class RgbColor:
    """A 24-bit color with one byte per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorError(
                    f"RGB channel {channel!r} is out of range.",
                    hint="Each channel must be an integer from 0 to 255.",
                )


Color = Union[NamedColor, RgbColor]
"""Either a :class:`NamedColor` or an :class:`RgbColor`."""

COLOR_CHOICES: tuple[str, ...] = tuple(c.value for c in NamedColor) + ("#rrggbb",)
"""Every accepted textual form, in the order shown in help output."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _parse_hex(digits: str) -> RgbColor | None:
    """Return an :class:`RgbColor` for six hex digits, else ``None``."""
    if len(digits) != 6 or any(c not in string.hexdigits for c in digits):
        return None
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return RgbColor(r, g, b)


def parse_color(text: str) -> Color:
    """Parse a named color or an ``#rrggbb`` literal.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises
    ------
    InvalidColorError
        When *text* is neither a known name nor a six-digit hex literal.
    """
    value = text.strip().lower()

    if value.startswith("#"):
        rgb = _parse_hex(value[1:])
        if rgb is not None:
            return rgb
    else:
        try:
            return NamedColor(value)
        except ValueError:
            pass

    raise InvalidColorError(
        f"Invalid color value: {text!r}.",
        hint="Use one of: " + ", ".join(COLOR_CHOICES),
    )


def parse_colors(text: str) -> tuple[Color, ...]:
    """Parse a comma-delimited list of colors.

    A blank string yields an empty palette, which disables coloring.
    """
    if not text.strip():
        return ()
    return tuple(parse_color(part) for part in text.split(","))


def coerce_colors(colors: Iterable[Color | str] | str) -> tuple[Color, ...]:
    """Normalise a mix of :data:`Color` values and strings into a palette.

    A single string is read as a comma-delimited list, as :func:`parse_colors`.
    """
    if isinstance(colors, str):
        return parse_colors(colors)
    palette: list[Color] = []
    for color in colors:
        if isinstance(color, str):
            palette.append(parse_color(color))
        elif isinstance(color, (NamedColor, RgbColor)):
            palette.append(color)
        else:
            raise InvalidColorError(f"Invalid color value: {color!r}.")
    return tuple(palette)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_color(color: Color) -> str:
    """Return the textual form accepted back by :func:`parse_color`."""
    if isinstance(color, NamedColor):
        return color.value
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def format_colors(colors: Iterable[Color]) -> str:
    """Join a palette into the comma-delimited form of :func:`parse_colors`."""
    return ",".join(format_color(c) for c in colors)
