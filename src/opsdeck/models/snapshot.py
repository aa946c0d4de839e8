"""Snapshot document models."""

from __future__ import annotations

from pydantic import Field

from opsdeck.models.base import CamelModel
from opsdeck.models.projects import Confidence, Project

DATA_VERSION = 2


class DigestEntry(CamelModel):
    """Headline metric shown at the top of the dashboard."""

    title: str
    value: str
    delta: str = ""
    confidence: Confidence = "low"
    freshness: str = "hourly"
    timestamp: str = ""


class PriorityModule(CamelModel):
    """One of the top-ranked projects by ROI."""

    rank: int
    id: str
    name: str
    roi_score: int
    progress: int
    confidence: Confidence
    latest_update: str | None = None
    note: str = "Review next gate"


class TeamMember(CamelModel):
    name: str
    role: str
    avatar: str
    zone: str
    status: str
    mood: str = "calm"


class TeamScene(CamelModel):
    """Illustrative team panel rendered below the priority modules."""

    title: str
    subtitle: str = ""
    members: list[TeamMember] = Field(default_factory=list)


class ConfidenceModel(CamelModel):
    """Legend explaining each confidence level."""

    high: str = "Direct command/file evidence (git logs, checklists, service status)."
    medium: str = "Reliable operational proxies (mtime + repo telemetry)."
    low: str = "Heuristic estimate requiring operator verification."


class Snapshot(CamelModel):
    """The full live-metrics document consumed by the dashboard."""

    generated_at: str
    data_version: int = DATA_VERSION
    confidence_model: ConfidenceModel = Field(default_factory=ConfidenceModel)
    digest: list[DigestEntry] = Field(default_factory=list)
    priority_modules: list[PriorityModule] = Field(default_factory=list)
    team_scene: TeamScene | None = None
    projects: list[Project] = Field(default_factory=list)
