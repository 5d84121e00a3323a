"""Directory traversal for the example CLI.

The core never touches the filesystem; this module walks a directory
and feeds each entry to a :class:`~terminal_tree.core.tree.TreeBranch`,
deciding which entry is the last of its siblings along the way.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from terminal_tree.core.tree import TreeBranch, TreeBuilder
from terminal_tree.exceptions import PathNotFoundError

log = logging.getLogger(__name__)


def list_children(directory: Path, *, include_files: bool = False) -> list[Path]:
    """Return the entries of *directory* sorted by name.

    Files are dropped unless *include_files* is set.

    Raises
    ------
    OSError
        When the directory cannot be read.
    """
    entries = sorted(directory.iterdir(), key=lambda p: p.name)
    if include_files:
        return entries
    return [entry for entry in entries if entry.is_dir()]


def iter_tree_lines(
    builder: TreeBuilder,
    root: Path,
    *,
    include_files: bool = False,
) -> Iterator[str]:
    """Yield one rendered row per entry beneath *root*, root first.

    The root row shows the resolved path; every other row shows the
    entry name.  Symlinked directories are listed but not descended.

    Raises
    ------
    PathNotFoundError
        When *root* does not exist.
    """
    if not root.exists():
        raise PathNotFoundError(
            f"Path not found: {root}",
            hint="Pass an existing directory, or omit PATH to use the current one.",
        )

    resolved = root.resolve()
    branch = builder.branch(resolved)
    yield branch.render()
    if resolved.is_dir():
        yield from _visit(branch, resolved, include_files=include_files)


def _visit(branch: TreeBranch, directory: Path, *, include_files: bool) -> Iterator[str]:
    try:
        children = list_children(directory, include_files=include_files)
    except OSError as exc:
        log.warning("Skipping %s: %s", directory, exc.strerror or exc)
        return

    log.debug("Descending into %s (%d entries)", directory, len(children))
    for index, path in enumerate(children):
        child = branch.branch(path.name, last=index == len(children) - 1)
        yield child.render()
        if path.is_dir() and not path.is_symlink():
            yield from _visit(child, path, include_files=include_files)
