"""Snapshot service — collect, rank and write the live-metrics document."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from result import Err, Ok, Result

from opsdeck.config import Config
from opsdeck.data.checklist import count_project_checklists
from opsdeck.data.gateway import probe_gateway
from opsdeck.data.git_activity import probe_git_activity
from opsdeck.data.protocols import CommandRunner
from opsdeck.data.scanner import scan_latest_mtime
from opsdeck.data.shell import run_command
from opsdeck.models.projects import Project
from opsdeck.models.signals import GatewayStatus
from opsdeck.models.snapshot import (
    DigestEntry,
    PriorityModule,
    Snapshot,
    TeamMember,
    TeamScene,
)
from opsdeck.services.featured import build_featured_project
from opsdeck.services.scoring import score_project, to_iso

logger = logging.getLogger(__name__)

PRIORITY_COUNT = 3
_ENERGETIC_HEALTH = {"hot", "warm", "active", "stable"}


def rank_projects(projects: list[Project]) -> list[Project]:
    """Order by ROI, highest first; ties keep their input order."""
    return sorted(projects, key=lambda p: p.roi_score, reverse=True)


def build_priority_modules(top: list[Project]) -> list[PriorityModule]:
    return [
        PriorityModule(
            rank=idx,
            id=project.id,
            name=project.name,
            roi_score=project.roi_score,
            progress=project.progress,
            confidence=project.confidence,
            latest_update=project.latest_update,
            note=project.actions[0] if project.actions else "Review next gate",
        )
        for idx, project in enumerate(top, start=1)
    ]


def build_digest(
    projects: list[Project],
    top: list[Project],
    gateway: GatewayStatus,
    now_iso: str,
) -> list[DigestEntry]:
    """Four headline metrics, each with its own confidence tag."""
    leader = top[0] if top else None
    energetic = sum(1 for p in projects if p.health in _ENERGETIC_HEALTH)
    return [
        DigestEntry(
            title="Gateway Runtime",
            value="Running" if gateway.running else "Stopped",
            delta="RPC healthy" if gateway.rpc_ok else "RPC uncertain",
            confidence="high",
            freshness="live",
            timestamp=now_iso,
        ),
        DigestEntry(
            title="Top ROI Project",
            value=f"{leader.name} ({leader.roi_score}/100)" if leader else "N/A",
            delta="Prioritize this in first operator pass",
            confidence=leader.confidence if leader else "low",
            freshness="hourly",
            timestamp=(leader.latest_update if leader else None) or now_iso,
        ),
        DigestEntry(
            title="Projects Hot/Warm",
            value=f"{energetic}/{len(projects)}",
            delta="Cross-project execution energy",
            confidence="medium",
            freshness="hourly",
            timestamp=now_iso,
        ),
        DigestEntry(
            title="Gateway Last Task Run",
            value=gateway.last_run or "Unavailable",
            delta="Scheduled task telemetry",
            confidence="high" if gateway.last_run else "low",
            freshness="live",
            timestamp=now_iso,
        ),
    ]


def build_team_scene(top: list[Project]) -> TeamScene:
    lead = top[0].name if top else "primary sprint"
    return TeamScene(
        title="8-bit Ops Deck",
        subtitle="Avatars mapped to active project context below high-priority modules",
        members=[
            TeamMember(
                name="Boss",
                role="Director",
                avatar="🕹️",
                zone="Command Table",
                status=f"triaging ROI top 3: {', '.join(p.name for p in top)}",
                mood="focus",
            ),
            TeamMember(
                name="Maya",
                role="Ops Lead",
                avatar="🛠️",
                zone="Build Bay",
                status=f"driving {lead} quality gate",
                mood="focus",
            ),
            TeamMember(
                name="Ravi",
                role="Signal Analyst",
                avatar="📈",
                zone="Telemetry Wall",
                status="maintaining trend and confidence labels",
            ),
            TeamMember(
                name="Muse",
                role="Support",
                avatar="💬",
                zone="Support Desk",
                status="keeping team flow and context continuity",
            ),
        ],
    )


class SnapshotService:
    """Builds the dashboard snapshot from local project state."""

    def __init__(
        self,
        config: Config,
        runner: CommandRunner = run_command,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self._runner = runner
        self._clock = clock or (lambda: datetime.now(UTC))

    def collect_projects(self, now: datetime) -> list[Project]:
        """Score every configured project directory that exists."""
        projects: list[Project] = []
        for name, directory in self._config.project_dirs:
            if not directory.is_dir():
                logger.info("Project directory not found: %s", directory)
                continue
            scan = scan_latest_mtime(
                directory,
                max_files=self._config.max_scan_files,
                ignored=self._config.ignored_dir_names,
            )
            if scan.capped:
                logger.info("Scan of %s capped at %d entries", directory, scan.count)
            projects.append(
                score_project(
                    name,
                    directory,
                    scan,
                    count_project_checklists(directory),
                    probe_git_activity(directory, runner=self._runner),
                    now,
                )
            )
        return projects

    def build(self) -> Snapshot:
        now = self._clock()
        now_iso = to_iso(now) or ""

        projects = [build_featured_project(self._config, now), *self.collect_projects(now)]
        top = rank_projects(projects)[:PRIORITY_COUNT]
        gateway = probe_gateway(self._config.gateway_command, runner=self._runner)

        return Snapshot(
            generated_at=now_iso,
            digest=build_digest(projects, top, gateway, now_iso),
            priority_modules=build_priority_modules(top),
            team_scene=build_team_scene(top),
            projects=projects,
        )

    def write(self, snapshot: Snapshot) -> Result[Path, str]:
        """Overwrite the output file with ``snapshot``."""
        path = self._config.output_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(snapshot.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.exception("Failed to write snapshot to %s", path)
            return Err(f"Could not write {path}: {exc}")
        return Ok(path)

    def generate(self) -> Result[Path, str]:
        """Build and write a fresh snapshot."""
        return self.write(self.build())
