"""Freshness, progress and ROI heuristics for project cards."""

from __future__ import annotations

import math
import re
from datetime import datetime
from pathlib import Path

from opsdeck.models.projects import (
    Confidence,
    FileSignals,
    Freshness,
    Project,
    ProjectStat,
    TimelineStage,
)
from opsdeck.models.signals import ActivitySample, ChecklistCounts, ScanResult

HOT_HOURS = 6
WARM_HOURS = 24
COMMIT_PROGRESS_WEIGHT = 8
COMMIT_PROGRESS_CAP = 85
ROI_PROGRESS_WEIGHT = 0.55
ROI_COMMIT_WEIGHT = 3
ROI_MIN = 10
ROI_MAX = 99

_FRESHNESS_FLOOR: dict[str, int] = {"hot": 70, "warm": 52}
_DEFAULT_FLOOR = 34
_FRESHNESS_BONUS: dict[str, int] = {"hot": 15, "warm": 7}
_DEFAULT_BONUS = 2

CONFIDENCE_REASONS: dict[str, str] = {
    "high": "Built from git activity + explicit checklist evidence.",
    "medium": "Built from git activity + filesystem recency proxies.",
    "low": "Filesystem recency heuristic only; validate manually.",
}

DEFAULT_ACTIONS = [
    "Close 1 highest ROI blocker first",
    "Ship a visible operator-facing quality improvement",
    "Attach freshness + confidence labels to new metrics",
]


def round_half_up(value: float) -> int:
    """Round halves upward (2.5 -> 3), unlike the builtin round()."""
    return math.floor(value + 0.5)


def to_iso(moment: datetime | None) -> str | None:
    """Format as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    if moment is None:
        return None
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def freshness_hours(latest: datetime | None, now: datetime) -> float | None:
    if latest is None:
        return None
    return (now - latest).total_seconds() / 3600


def classify_freshness(hours: float | None) -> Freshness:
    if hours is None:
        return "unknown"
    if hours < HOT_HOURS:
        return "hot"
    if hours < WARM_HOURS:
        return "warm"
    return "cold"


def completion_from_checklist(counts: ChecklistCounts) -> int | None:
    if not counts.total:
        return None
    return round_half_up(100 * counts.done / counts.total)


def freshness_floor(freshness: str) -> int:
    return _FRESHNESS_FLOOR.get(freshness, _DEFAULT_FLOOR)


def freshness_bonus(freshness: str) -> int:
    return _FRESHNESS_BONUS.get(freshness, _DEFAULT_BONUS)


def compute_progress(completion: int | None, freshness: str, commits_7d: int) -> int:
    """Optimistic maximum over the available progress signals.

    Any single strong signal (checklist completion, recent edits, commit
    volume) raises progress; none of them can pull it below the others.
    """
    return max(
        completion or 0,
        freshness_floor(freshness),
        min(COMMIT_PROGRESS_CAP, commits_7d * COMMIT_PROGRESS_WEIGHT),
    )


def compute_roi(progress: int, commits_7d: int, freshness: str) -> int:
    raw = round_half_up(
        progress * ROI_PROGRESS_WEIGHT + commits_7d * ROI_COMMIT_WEIGHT + freshness_bonus(freshness)
    )
    return max(ROI_MIN, min(ROI_MAX, raw))


def confidence_level(activity_confidence: str, checklist_total: int) -> Confidence:
    if activity_confidence != "high":
        return "low"
    return "high" if checklist_total else "medium"


def build_timeline(progress: int) -> list[TimelineStage]:
    return [
        TimelineStage(label="Scope lock", state="done", due="In progress week"),
        TimelineStage(
            label="Build sprint",
            state="active" if progress > 45 else "queued",
            due="Next 24-48h",
        ),
        TimelineStage(
            label="QA + operator review",
            state="active" if progress > 72 else "queued",
            due="Next 48h",
        ),
        TimelineStage(label="Deploy / handoff", state="queued", due="After QA gate"),
    ]


def display_name(project_id: str) -> str:
    """'overnight_ops' -> 'Overnight Ops'."""
    spaced = re.sub(r"[_-]", " ", project_id)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def score_project(
    project_id: str,
    path: Path,
    scan: ScanResult,
    checklist: ChecklistCounts,
    activity: ActivitySample,
    now: datetime,
) -> Project:
    """Combine scan, checklist, and git signals into a scored project card."""
    hours = freshness_hours(scan.latest, now)
    freshness = classify_freshness(hours)
    commits = activity.commits_7d

    progress = compute_progress(completion_from_checklist(checklist), freshness, commits)
    roi = compute_roi(progress, commits, freshness)
    confidence = confidence_level(activity.confidence, checklist.total)

    return Project(
        id=project_id,
        name=display_name(project_id),
        path=str(path),
        latest_update=to_iso(scan.latest),
        file_signals=FileSignals(files_scanned=scan.count, scan_capped=scan.capped),
        freshness_hours=None if hours is None else round_half_up(hours * 10) / 10,
        health=freshness,
        progress=progress,
        roi_score=roi,
        confidence=confidence,
        confidence_reason=CONFIDENCE_REASONS[confidence],
        trend_7d=list(activity.trend),
        timeline=build_timeline(progress),
        stats=[
            ProjectStat(label="ROI Priority", value=f"{roi}/100"),
            ProjectStat(label="7d Commits", value=str(commits)),
            ProjectStat(label="Contributors (7d)", value=str(activity.contributors_7d)),
            ProjectStat(label="TODO Open", value=str(checklist.open)),
        ],
        actions=list(DEFAULT_ACTIONS),
    )
