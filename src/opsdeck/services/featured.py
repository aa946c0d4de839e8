"""The Polymarket Bot card, built from its checklist files instead of a scan."""

from __future__ import annotations

from datetime import datetime

from opsdeck.config import Config
from opsdeck.data.checklist import count_checklist_items, read_text
from opsdeck.data.scanner import file_mtime
from opsdeck.models.projects import Project, ProjectStat, TimelineStage
from opsdeck.services.scoring import completion_from_checklist, round_half_up, to_iso

FEATURED_ID = "polymarket"
FEATURED_NAME = "Polymarket Bot"
ACTIVE_ROI = 78
STABLE_ROI = 64
# Illustrative only; the featured project is not a git checkout.
FEATURED_TREND = [2, 3, 1, 4, 2, 2, 3]


def build_featured_project(config: Config, now: datetime) -> Project:
    counts = count_checklist_items(read_text(config.featured_todo_path))
    status_mtime = file_mtime(config.featured_status_path)
    roi = ACTIVE_ROI if counts.open > 0 else STABLE_ROI

    hours = None
    if status_mtime is not None:
        hours = round_half_up((now - status_mtime).total_seconds() / 3600 * 10) / 10

    return Project(
        id=FEATURED_ID,
        name=FEATURED_NAME,
        path=str(config.featured_dir),
        latest_update=to_iso(status_mtime),
        freshness_hours=hours,
        health="active" if counts.open > 0 else "stable",
        progress=completion_from_checklist(counts) or 0,
        roi_score=roi,
        confidence="high",
        confidence_reason="Derived from explicit TODO.md checklist state + STATUS.md timestamp.",
        trend_7d=list(FEATURED_TREND),
        timeline=[
            TimelineStage(label="Market scan", state="done", due="Complete"),
            TimelineStage(label="Strategy tune", state="active", due="This week"),
            TimelineStage(label="Risk guardrail hardening", state="queued", due="Next gate"),
            TimelineStage(label="Execution window", state="queued", due="After guardrails"),
        ],
        stats=[
            ProjectStat(label="TODO Open", value=str(counts.open)),
            ProjectStat(label="TODO Done", value=str(counts.done)),
            ProjectStat(label="Checklist Total", value=str(counts.total)),
            ProjectStat(label="ROI Priority", value=f"{roi}/100"),
        ],
        actions=[
            "Close highest-risk open TODO first",
            "Update STATUS.md with current risk envelope",
            "Re-run dry-run checks before activation",
        ],
    )
