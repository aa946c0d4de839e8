"""Models for Ops Deck."""

from opsdeck.models.projects import (
    Confidence,
    FileSignals,
    Freshness,
    Health,
    Project,
    ProjectStat,
    TimelineStage,
)
from opsdeck.models.signals import ActivitySample, ChecklistCounts, GatewayStatus, ScanResult
from opsdeck.models.snapshot import (
    DATA_VERSION,
    ConfidenceModel,
    DigestEntry,
    PriorityModule,
    Snapshot,
    TeamMember,
    TeamScene,
)

__all__ = [
    "ActivitySample",
    "ChecklistCounts",
    "Confidence",
    "ConfidenceModel",
    "DigestEntry",
    "FileSignals",
    "Freshness",
    "GatewayStatus",
    "Health",
    "PriorityModule",
    "Project",
    "ProjectStat",
    "ScanResult",
    "Snapshot",
    "TeamMember",
    "TeamScene",
    "TimelineStage",
    "DATA_VERSION",
]
