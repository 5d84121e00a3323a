"""CLI application entry point for terminal-tree.

Prints a directory tree, one row per directory (and optionally per
file), using the core tree builder.  This module is the **sole error
boundary** for the application: it catches
:class:`~terminal_tree.exceptions.TerminalTreeError`,
``KeyboardInterrupt``, a closed output pipe and any unexpected
``Exception``, reports them on stderr and returns well-defined exit codes.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from terminal_tree.cli import exit_codes
from terminal_tree.cli.console import console
from terminal_tree.cli.logging_setup import setup_logging
from terminal_tree.cli.walk import iter_tree_lines
from terminal_tree.core.colors import COLOR_CHOICES, Color, format_colors, parse_colors
from terminal_tree.core.config import (
    DEFAULT_COLORS,
    DEFAULT_INDENTATION,
    MAX_INDENTATION,
    MIN_INDENTATION,
    parse_indentation,
)
from terminal_tree.core.tree import TreeBuilder
from terminal_tree.exceptions import ConfigurationError, TerminalTreeError
from terminal_tree.version import __version__

log = logging.getLogger(__name__)

COLOR_MODES: tuple[str, ...] = ("auto", "always", "never")


# ---------------------------------------------------------------------------
# Argument converters
# ---------------------------------------------------------------------------

def _argument_error(exc: ConfigurationError) -> argparse.ArgumentTypeError:
    message = str(exc)
    if exc.hint:
        message = f"{message} {exc.hint}"
    return argparse.ArgumentTypeError(message)


def _colors_arg(text: str) -> tuple[Color, ...]:
    try:
        return parse_colors(text)
    except ConfigurationError as exc:
        raise _argument_error(exc) from exc


def _indent_arg(text: str) -> int:
    try:
        return parse_indentation(text)
    except ConfigurationError as exc:
        raise _argument_error(exc) from exc


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="terminal-tree",
        description="Shows a simple tree of branches and leaves.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to enumerate (default: current directory).",
    )
    parser.add_argument(
        "--colors",
        type=_colors_arg,
        default=DEFAULT_COLORS,
        metavar="COLOR[,COLOR...]",
        help=(
            "Colors used repeatedly for branch lines, one per depth. "
            f"Accepts {', '.join(COLOR_CHOICES)}. "
            f"Pass an empty string to disable. Default: {format_colors(DEFAULT_COLORS)}."
        ),
    )
    parser.add_argument(
        "--indent",
        type=_indent_arg,
        default=DEFAULT_INDENTATION,
        metavar="N",
        help=(
            f"Cells per level of indentation, {MIN_INDENTATION} to {MAX_INDENTATION}. "
            f"Default: {DEFAULT_INDENTATION}."
        ),
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help=(
            "Emit color escape codes: auto (when stdout is a terminal and rich "
            "is installed), always or never."
        ),
    )
    parser.add_argument(
        "--files",
        action="store_true",
        help="List files as well as directories.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output).",
    )
    return parser


def _rich_available() -> bool:
    try:
        import rich  # noqa: F401
    except ModuleNotFoundError:
        return False
    return True


def _color_enabled(mode: str, stream: TextIO) -> bool:
    """Resolve a ``--color`` mode against the output stream.

    ``auto`` colors only a terminal, and only when Rich is installed.
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) and _rich_available()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the terminal-tree CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    builder = TreeBuilder(
        colors=args.colors,
        indentation=args.indent,
        color_output=_color_enabled(args.color, sys.stdout),
    )
    log.info(
        "Rendering %s (indent=%d, colors=%s, color_output=%s)",
        args.path,
        builder.indentation,
        format_colors(builder.colors) or "none",
        builder.color_output,
    )

    for line in iter_tree_lines(builder, Path(args.path), include_files=args.files):
        sys.stdout.write(line + "\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _discard_stdout() -> None:
    """Point the stdout file descriptor at the null device."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except TerminalTreeError as exc:
        console.print(str(exc), label="Error:", style="bold red")
        if exc.hint:
            console.print(exc.hint, label="Hint:", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except BrokenPipeError:
        # Reader closed early (e.g. piped into head).  Silence the final flush.
        _discard_stdout()
        sys.exit(exit_codes.SUCCESS)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
            label="Unexpected error.",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
