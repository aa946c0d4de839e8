"""Configuration for Ops Deck."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PROJECT_NAMES: tuple[str, ...] = (
    "mission-control-dashboard",
    "nightshift",
    "overnight",
    "overnight_ops",
    "papertrades",
)
DEFAULT_GATEWAY_COMMAND: tuple[str, ...] = ("openclaw", "gateway", "status")
DEFAULT_IGNORED_DIR_NAMES: frozenset[str] = frozenset({".git", "node_modules", ".next"})
DEFAULT_MAX_SCAN_FILES = 7000


@dataclass(frozen=True)
class Config:
    """Snapshot generator configuration.

    ``root_dir`` is the dashboard repository; the snapshot lands under its
    ``data/`` directory. Sibling projects are resolved against
    ``workspace_dir``.
    """

    root_dir: Path = field(default_factory=Path.cwd)
    workspace_dir: Path | None = None
    workspace_dev_dir: Path | None = None
    output_file: Path | None = None
    project_names: tuple[str, ...] = DEFAULT_PROJECT_NAMES
    max_scan_files: int = DEFAULT_MAX_SCAN_FILES
    gateway_command: tuple[str, ...] = DEFAULT_GATEWAY_COMMAND
    ignored_dir_names: frozenset[str] = DEFAULT_IGNORED_DIR_NAMES

    @classmethod
    def from_root(cls, root_dir: Path, **overrides: object) -> Config:
        """Build a config with workspace paths derived from ``root_dir``."""
        root = root_dir.resolve()
        values: dict[str, object] = {
            "root_dir": root,
            "workspace_dir": root.parent,
            "workspace_dev_dir": root.parent.parent / "workspace-dev",
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]

    @property
    def workspace(self) -> Path:
        return self.workspace_dir or self.root_dir.parent

    @property
    def workspace_dev(self) -> Path:
        return self.workspace_dev_dir or self.root_dir.parent.parent / "workspace-dev"

    @property
    def output_dir(self) -> Path:
        return self.output_path.parent

    @property
    def output_path(self) -> Path:
        return self.output_file or self.root_dir / "data" / "live-metrics.json"

    @property
    def featured_dir(self) -> Path:
        return self.workspace_dev / "projects" / "polymarket"

    @property
    def featured_status_path(self) -> Path:
        return self.featured_dir / "docs" / "STATUS.md"

    @property
    def featured_todo_path(self) -> Path:
        return self.featured_dir / "docs" / "TODO.md"

    @property
    def project_dirs(self) -> list[tuple[str, Path]]:
        """Configured project names paired with their workspace directories."""
        return [(name, self.workspace / name) for name in self.project_names]
