"""Capped filesystem walk reporting the most recent modification time."""

from __future__ import annotations

import logging
import stat
from collections.abc import Collection
from datetime import UTC, datetime
from pathlib import Path

from opsdeck.config import DEFAULT_IGNORED_DIR_NAMES, DEFAULT_MAX_SCAN_FILES
from opsdeck.models.signals import ScanResult

logger = logging.getLogger(__name__)


def scan_latest_mtime(
    root: Path,
    max_files: int = DEFAULT_MAX_SCAN_FILES,
    ignored: Collection[str] = DEFAULT_IGNORED_DIR_NAMES,
) -> ScanResult:
    """Walk ``root`` with an explicit stack, tracking the newest mtime.

    The walk stops as soon as ``max_files`` entries have been counted, so the
    reported time is the newest among the entries visited before the cap.
    Unreadable directories and entries are skipped.
    """
    latest = 0.0
    count = 0
    pending = [root]

    while pending:
        current = pending.pop()
        try:
            entries = sorted(current.iterdir())
        except OSError:
            logger.debug("Skipping unreadable directory %s", current)
            continue

        for entry in entries:
            if entry.name in ignored:
                continue
            try:
                info = entry.lstat()
                latest = max(latest, entry.stat().st_mtime)
                count += 1
            except OSError:
                logger.debug("Could not stat %s", entry)
            else:
                # lstat: symlinked directories are not followed
                if stat.S_ISDIR(info.st_mode):
                    pending.append(entry)
            if count >= max_files:
                return ScanResult(latest=_to_datetime(latest), count=count, capped=True)

    return ScanResult(latest=_to_datetime(latest), count=count, capped=False)


def _to_datetime(mtime: float) -> datetime | None:
    if not mtime:
        return None
    return datetime.fromtimestamp(mtime, tz=UTC)


def file_mtime(path: Path) -> datetime | None:
    """Modification time of a single file, or None when it cannot be read."""
    try:
        return _to_datetime(path.stat().st_mtime)
    except OSError:
        return None
