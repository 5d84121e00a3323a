"""Custom exception hierarchy for terminal-tree.

Rendering itself never fails; every error raised by this package comes
from validating configuration or from the example CLI's collaborators.
All of them inherit from :class:`TerminalTreeError` so the CLI error
boundary can print a clean message and an optional hint.

Hierarchy
---------
TerminalTreeError
├── ConfigurationError
│   ├── InvalidColorError
│   └── InvalidIndentationError
├── PathNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class TerminalTreeError(Exception):
    """Base exception for all terminal-tree errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(TerminalTreeError):
    """Raised when a tree builder setting is rejected."""


class InvalidColorError(ConfigurationError):
    """Raised when a color value is neither a known name nor ``#rrggbb``."""


class InvalidIndentationError(ConfigurationError):
    """Raised when an indentation width falls outside the allowed range."""


# --- Collaborators ---------------------------------------------------------

class PathNotFoundError(TerminalTreeError):
    """Raised when the directory to enumerate does not exist."""


class EnvironmentError(TerminalTreeError):
    """Raised when a required runtime dependency is not available."""
