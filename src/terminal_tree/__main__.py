"""Allow ``python -m terminal_tree`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m terminal_tree`` behaves identically to the
``terminal-tree`` console script.
"""

from __future__ import annotations

from terminal_tree.cli.app import cli

if __name__ == "__main__":
    cli()
