"""Default settings and indentation bounds for tree builders."""

from __future__ import annotations

from terminal_tree.core.colors import Color, RgbColor
from terminal_tree.exceptions import InvalidIndentationError

# Guide line colors used by Visual Studio Code's bracket pair colorization.
DEFAULT_COLORS: tuple[Color, ...] = (
    RgbColor(0xFF, 0xD7, 0x00),
    RgbColor(0xDA, 0x70, 0xD6),
    RgbColor(0x17, 0x9F, 0xFF),
)

DEFAULT_INDENTATION: int = 2

MIN_INDENTATION: int = 2
"""One cell for the connector glyph plus one separating it from the item."""

MAX_INDENTATION: int = 255


def validate_indentation(value: int) -> int:
    """Return *value* unchanged when it is a legal indentation width.

    Raises
    ------
    InvalidIndentationError
        When *value* is not an integer in
        ``[MIN_INDENTATION, MAX_INDENTATION]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIndentationError(f"Indentation must be an integer, got {value!r}.")
    if not MIN_INDENTATION <= value <= MAX_INDENTATION:
        raise InvalidIndentationError(
            f"Indentation {value} is out of range.",
            hint=f"Choose a width from {MIN_INDENTATION} to {MAX_INDENTATION}.",
        )
    return value


def parse_indentation(text: str) -> int:
    """Parse and validate an indentation width given as text."""
    try:
        value = int(text.strip())
    except ValueError as exc:
        raise InvalidIndentationError(
            f"Indentation must be an integer, got {text!r}.",
            hint=f"Choose a width from {MIN_INDENTATION} to {MAX_INDENTATION}.",
        ) from exc
    return validate_indentation(value)
