"""Seven-day commit activity from the local git history."""

from __future__ import annotations

import logging
from pathlib import Path

from result import Ok

from opsdeck.data.protocols import CommandRunner
from opsdeck.data.shell import run_command
from opsdeck.models.signals import TREND_DAYS, ActivitySample

logger = logging.getLogger(__name__)


def probe_git_activity(directory: Path, runner: CommandRunner = run_command) -> ActivitySample:
    """Build a per-day commit histogram and distinct author count.

    Directories without a ``.git`` marker get an empty, low-confidence sample.
    A failed ``git log`` call counts as zero for its own day only.
    """
    if not (directory / ".git").exists():
        return ActivitySample()

    trend: list[int] = []
    for days_back in range(TREND_DAYS - 1, -1, -1):
        output = runner(
            [
                "git",
                "log",
                f"--since={days_back + 1} days ago",
                f"--until={days_back} days ago",
                "--pretty=format:%H",
            ],
            cwd=directory,
        )
        trend.append(len(_non_empty_lines(output.ok_value)) if isinstance(output, Ok) else 0)

    authors = runner(
        ["git", "log", "--since=7 days ago", "--pretty=format:%an"],
        cwd=directory,
    )
    contributors = len(set(_non_empty_lines(authors.ok_value))) if isinstance(authors, Ok) else 0

    logger.debug("%s: %d commits over 7 days", directory.name, sum(trend))
    return ActivitySample(trend=trend, contributors_7d=contributors, confidence="high")


def _non_empty_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]
