"""Regression tests for running without Rich.

Plain output, ``--help`` and ``--version`` must keep working when Rich is
missing; colored output must fail with a clean ``EnvironmentError``.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from terminal_tree.cli import app as app_module
from terminal_tree.cli import exit_codes
from terminal_tree.cli.app import cli, main
from terminal_tree.core.tree import TreeBuilder
from terminal_tree.exceptions import EnvironmentError, PathNotFoundError

pytestmark = pytest.mark.usefixtures("fresh_default_painter")


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.color", "rich.style", "rich.console", "rich.markup"):
        monkeypatch.setitem(sys.modules, name, None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_plain_tree_works_without_rich(
    sample_tree: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--color", "never", str(sample_tree)]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.splitlines()[1] == "├ a"


def test_colored_tree_errors_cleanly_without_rich(
    sample_tree: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["--color", "always", str(sample_tree)])


def test_builder_renders_root_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert TreeBuilder().branch("root").render() == "root"


def test_error_boundary_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    def boom() -> int:
        raise PathNotFoundError("Path not found: x", hint="Try y")

    monkeypatch.setattr(app_module, "main", boom)
    with pytest.raises(SystemExit) as exc_info:
        cli()

    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err.splitlines() == ["Error: Path not found: x", "Hint: Try y"]


class _TtyBuffer(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_auto_color_stays_plain_without_rich(
    sample_tree: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)
    stdout = _TtyBuffer()
    monkeypatch.setattr(sys, "stdout", stdout)

    assert main([str(sample_tree)]) == exit_codes.SUCCESS
    out = stdout.getvalue()
    assert "\x1b[" not in out
    assert out.splitlines()[1] == "├ a"
