"""Shared fixtures for Ops Deck tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from result import Ok, Result

from opsdeck.config import Config

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def hours_ago(hours: float) -> float:
    """POSIX timestamp ``hours`` before NOW."""
    return (NOW - timedelta(hours=hours)).timestamp()


def set_tree_mtime(root: Path, timestamp: float) -> None:
    """Force every entry below ``root`` to the same modification time."""
    for path in root.rglob("*"):
        os.utime(path, (timestamp, timestamp))


class FakeRunner:
    """Command runner returning canned results keyed by argument substrings."""

    def __init__(
        self,
        responses: dict[str, Result[str, str]] | None = None,
        default: Result[str, str] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.default = default if default is not None else Ok("")
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []

    def __call__(self, args: Sequence[str], cwd: Path | None = None) -> Result[str, str]:
        self.calls.append((tuple(args), cwd))
        key = " ".join(args)
        for needle, response in self.responses.items():
            if needle in key:
                return response
        return self.default


@pytest.fixture
def now() -> datetime:
    """Fixed clock shared by the workspace fixture and scoring tests."""
    return NOW


@pytest.fixture(name="hours_ago")
def hours_ago_fixture() -> Callable[[float], float]:
    return hours_ago


@pytest.fixture(name="set_tree_mtime")
def set_tree_mtime_fixture() -> Callable[[Path, float], None]:
    return set_tree_mtime


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """Factory for command runners with canned responses."""
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A workspace with a git project, a checklist project and a featured project.

    Layout::

        workspace/dashboard/                 (root, not scanned)
        workspace/nightshift/                (.git marker, edited 2h ago)
        workspace/papertrades/TODO.md        (3/4 done, edited 30h ago)
        workspace-dev/projects/polymarket/docs/{STATUS,TODO}.md
    """
    ws = tmp_path / "workspace"
    (ws / "dashboard").mkdir(parents=True)

    nightshift = ws / "nightshift"
    (nightshift / ".git").mkdir(parents=True)
    (nightshift / "src").mkdir()
    (nightshift / "src" / "main.py").write_text("print('hi')\n", encoding="utf-8")
    (nightshift / "README.md").write_text("# nightshift\n", encoding="utf-8")
    set_tree_mtime(nightshift, hours_ago(2))

    papertrades = ws / "papertrades"
    papertrades.mkdir()
    (papertrades / "TODO.md").write_text(
        "- [x] a\n- [ ] b\n- [x] c\n- [x] d\n", encoding="utf-8"
    )
    set_tree_mtime(papertrades, hours_ago(30))

    docs = tmp_path / "workspace-dev" / "projects" / "polymarket" / "docs"
    docs.mkdir(parents=True)
    (docs / "TODO.md").write_text("- [x] scan markets\n- [ ] tune\n", encoding="utf-8")
    (docs / "STATUS.md").write_text("# Status\n", encoding="utf-8")
    os.utime(docs / "STATUS.md", (hours_ago(3), hours_ago(3)))
    return ws


@pytest.fixture
def test_config(workspace: Path) -> Config:
    """Config pointing at the temporary workspace."""
    return Config.from_root(
        workspace / "dashboard",
        project_names=("nightshift", "papertrades", "overnight"),
    )
