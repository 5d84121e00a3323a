"""Tests for defaults and indentation bounds (core/config.py)."""

from __future__ import annotations

import pytest

from terminal_tree.core.colors import RgbColor, format_colors
from terminal_tree.core.config import (
    DEFAULT_COLORS,
    DEFAULT_INDENTATION,
    MAX_INDENTATION,
    MIN_INDENTATION,
    parse_indentation,
    validate_indentation,
)
from terminal_tree.exceptions import InvalidIndentationError


class TestDefaults:
    def test_palette(self) -> None:
        assert DEFAULT_COLORS == (
            RgbColor(0xFF, 0xD7, 0x00),
            RgbColor(0xDA, 0x70, 0xD6),
            RgbColor(0x17, 0x9F, 0xFF),
        )
        assert format_colors(DEFAULT_COLORS) == "#ffd700,#da70d6,#179fff"

    def test_indentation(self) -> None:
        assert DEFAULT_INDENTATION == 2
        assert (MIN_INDENTATION, MAX_INDENTATION) == (2, 255)


class TestValidateIndentation:
    @pytest.mark.parametrize("value", [2, 3, 128, 255])
    def test_accepts_range(self, value: int) -> None:
        assert validate_indentation(value) == value

    @pytest.mark.parametrize("value", [-1, 0, 1, 256, 1000])
    def test_rejects_out_of_range(self, value: int) -> None:
        with pytest.raises(InvalidIndentationError, match=f"Indentation {value} is out of range"):
            validate_indentation(value)

    def test_hint_names_range(self) -> None:
        with pytest.raises(InvalidIndentationError) as exc_info:
            validate_indentation(1)
        assert exc_info.value.hint == "Choose a width from 2 to 255."

    @pytest.mark.parametrize("value", [True, 2.0, "2", None])
    def test_rejects_non_integers(self, value: object) -> None:
        with pytest.raises(InvalidIndentationError, match="must be an integer"):
            validate_indentation(value)  # type: ignore[arg-type]


class TestParseIndentation:
    def test_parses(self) -> None:
        assert parse_indentation(" 4 ") == 4

    @pytest.mark.parametrize("text", ["", "four", "2.5"])
    def test_rejects_non_numeric(self, text: str) -> None:
        with pytest.raises(InvalidIndentationError, match="must be an integer"):
            parse_indentation(text)

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(InvalidIndentationError, match="out of range"):
            parse_indentation("1")
