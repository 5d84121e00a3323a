"""Shared pytest fixtures for the terminal-tree test suite.

Guidelines
----------
* Core tests are pure: no filesystem, no terminal.
* Escape codes are checked through a recording painter or stripped with
  ``rich.text.Text.from_ansi``; tests never depend on the real terminal.
* Filesystem tests only touch ``tmp_path``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from terminal_tree.core.colors import Color, format_color
from terminal_tree.core.tree import TreeBuilder, _default_painter


class RecordingPainter:
    """Painter that marks each segment with its color name."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Color]] = []

    def paint(self, text: str, color: Color) -> str:
        self.calls.append((text, color))
        return f"<{format_color(color)}>{text}</>"


@pytest.fixture
def painter() -> RecordingPainter:
    return RecordingPainter()


@pytest.fixture
def plain_builder() -> TreeBuilder:
    return TreeBuilder(color_output=False)


@pytest.fixture
def fresh_default_painter() -> object:
    """Drop the cached Rich painter before and after the test."""
    _default_painter.cache_clear()
    yield
    _default_painter.cache_clear()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create::

        tmp/
        ├ a/
        │ ├ x/
        │ └ y/
        ├ b/
        └ f.txt
    """
    (tmp_path / "a" / "x").mkdir(parents=True)
    (tmp_path / "a" / "y").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "f.txt").write_text("leaf", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_package_logger() -> object:
    """Detach handlers added by ``setup_logging`` during a test."""
    logger = logging.getLogger("terminal_tree")
    before = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)
    logger.setLevel(level)
