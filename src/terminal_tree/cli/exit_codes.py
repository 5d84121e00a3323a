"""Exit-code constants used by the CLI layer."""

from __future__ import annotations

SUCCESS: int = 0
"""The tree was printed."""

GENERAL_ERROR: int = 1
"""A known TerminalTreeError was caught and reported."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped the error boundary.  Argparse also uses 2."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
