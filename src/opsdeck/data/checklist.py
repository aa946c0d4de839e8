"""Markdown checkbox counting."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from opsdeck.models.signals import ChecklistCounts

logger = logging.getLogger(__name__)

_ITEM_RE = re.compile(r"^- \[[ xX]\]", re.MULTILINE)
_DONE_RE = re.compile(r"^- \[[xX]\]", re.MULTILINE)
_CHECKLIST_NAME_RE = re.compile(r"todo|tasks|checklist", re.IGNORECASE)


def count_checklist_items(markdown: str | None) -> ChecklistCounts:
    """Count ``- [ ]`` and ``- [x]`` items at the start of a line."""
    if not markdown:
        return ChecklistCounts()
    total = len(_ITEM_RE.findall(markdown))
    done = len(_DONE_RE.findall(markdown))
    return ChecklistCounts(total=total, done=done)


def count_project_checklists(project_dir: Path) -> ChecklistCounts:
    """Aggregate checklist items from every TODO/tasks/checklist markdown file."""
    try:
        paths = sorted(
            entry
            for entry in project_dir.iterdir()
            if _CHECKLIST_NAME_RE.search(entry.name) and entry.suffix.lower() == ".md"
        )
    except OSError:
        logger.debug("No checklist files readable in %s", project_dir)
        return ChecklistCounts()
    return count_checklist_items("\n".join(read_text(path) for path in paths))


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""
