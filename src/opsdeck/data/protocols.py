"""Protocol definitions for data access."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from result import Result


class CommandRunner(Protocol):
    """Runs an external command and captures its text output."""

    def __call__(self, args: Sequence[str], cwd: Path | None = None) -> Result[str, str]: ...
