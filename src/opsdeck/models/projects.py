"""Project-level models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from opsdeck.models.base import CamelModel

Confidence = Literal["high", "medium", "low"]
Freshness = Literal["hot", "warm", "cold", "unknown"]
Health = Literal["hot", "warm", "cold", "unknown", "active", "stable"]
StageState = Literal["done", "active", "queued"]


class TimelineStage(CamelModel):
    """One stage of a project's delivery timeline."""

    label: str
    state: StageState = "queued"
    due: str = ""


class ProjectStat(CamelModel):
    """A labelled headline number shown on a project card."""

    label: str
    value: str


class FileSignals(CamelModel):
    """Filesystem scan metadata backing a project's freshness."""

    files_scanned: int = 0
    scan_capped: bool = False


class Project(CamelModel):
    """Scored snapshot of a single project."""

    id: str
    name: str
    path: str
    latest_update: str | None = None
    file_signals: FileSignals | None = None
    freshness_hours: float | None = None
    health: Health = "unknown"
    progress: int = 0
    roi_score: int = 10
    confidence: Confidence = "low"
    confidence_reason: str = ""
    trend_7d: list[int] = Field(default_factory=lambda: [0] * 7, alias="trend7d")
    timeline: list[TimelineStage] = Field(default_factory=list)
    stats: list[ProjectStat] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_missing_file_signals(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        # Cards not backed by a directory scan carry no fileSignals key at all.
        if self.file_signals is None:
            data.pop("fileSignals", None)
            data.pop("file_signals", None)
        return data
