"""Tests for snapshot assembly and writing."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest
from result import Err, Ok

from opsdeck.config import Config
from opsdeck.models.projects import Project
from opsdeck.models.signals import GatewayStatus
from opsdeck.services.snapshot_service import (
    SnapshotService,
    build_digest,
    build_priority_modules,
    build_team_scene,
    rank_projects,
)

GATEWAY_OK = "Runtime: running\nRPC probe: ok\nlast run time 2026-03-01 11:00"


@pytest.fixture
def runner(make_runner):
    return make_runner(
        {
            "gateway status": Ok(GATEWAY_OK),
            "%an": Ok("alice\nbob\nalice"),
            "--since=1 days ago": Ok("c1\nc2"),
        }
    )


@pytest.fixture
def service(test_config: Config, runner, now: datetime) -> SnapshotService:
    return SnapshotService(test_config, runner=runner, clock=lambda: now)


def _project(project_id: str, roi: int) -> Project:
    return Project(id=project_id, name=project_id.title(), path=f"/{project_id}", roi_score=roi)


class TestRanking:
    def test_descending_and_stable(self) -> None:
        projects = [_project("a", 40), _project("b", 70), _project("c", 40), _project("d", 90)]
        assert [p.id for p in rank_projects(projects)] == ["d", "b", "a", "c"]

    def test_priority_modules_are_one_based(self) -> None:
        top = rank_projects([_project("a", 40), _project("b", 70)])
        modules = build_priority_modules(top)
        assert [(m.rank, m.id) for m in modules] == [(1, "b"), (2, "a")]
        assert modules[0].note == "Review next gate"


class TestDigest:
    def test_empty_projects(self) -> None:
        digest = build_digest([], [], GatewayStatus(), "2026-03-01T12:00:00.000Z")
        assert [d.title for d in digest] == [
            "Gateway Runtime",
            "Top ROI Project",
            "Projects Hot/Warm",
            "Gateway Last Task Run",
        ]
        assert digest[0].value == "Stopped"
        assert digest[0].delta == "RPC uncertain"
        assert digest[1].value == "N/A"
        assert digest[1].confidence == "low"
        assert digest[1].timestamp == "2026-03-01T12:00:00.000Z"
        assert digest[2].value == "0/0"
        assert digest[3].value == "Unavailable"
        assert digest[3].confidence == "low"

    def test_team_scene_without_projects(self) -> None:
        scene = build_team_scene([])
        assert scene.members[1].status == "driving primary sprint quality gate"


class TestBuild:
    def test_projects_and_ranking(self, service: SnapshotService) -> None:
        snapshot = service.build()

        assert snapshot.generated_at == "2026-03-01T12:00:00.000Z"
        assert snapshot.data_version == 2
        assert [p.id for p in snapshot.projects] == ["polymarket", "nightshift", "papertrades"]

        by_id = {p.id: p for p in snapshot.projects}
        nightshift = by_id["nightshift"]
        assert nightshift.health == "hot"
        assert nightshift.trend_7d == [0, 0, 0, 0, 0, 0, 2]
        assert nightshift.progress == 70
        assert nightshift.roi_score == 60
        assert nightshift.confidence == "medium"

        papertrades = by_id["papertrades"]
        assert papertrades.health == "cold"
        assert papertrades.progress == 75
        assert papertrades.roi_score == 43
        assert papertrades.confidence == "low"

        assert [(m.rank, m.id) for m in snapshot.priority_modules] == [
            (1, "polymarket"),
            (2, "nightshift"),
            (3, "papertrades"),
        ]

    def test_digest_and_team_scene(self, service: SnapshotService) -> None:
        snapshot = service.build()
        digest = {d.title: d for d in snapshot.digest}

        assert digest["Gateway Runtime"].value == "Running"
        assert digest["Gateway Runtime"].delta == "RPC healthy"
        assert digest["Top ROI Project"].value == "Polymarket Bot (78/100)"
        assert digest["Top ROI Project"].confidence == "high"
        assert digest["Top ROI Project"].timestamp == "2026-03-01T09:00:00.000Z"
        assert digest["Projects Hot/Warm"].value == "2/3"
        assert digest["Gateway Last Task Run"].value == "2026-03-01 11:00"
        assert digest["Gateway Last Task Run"].confidence == "high"

        assert snapshot.team_scene is not None
        assert snapshot.team_scene.members[0].status == (
            "triaging ROI top 3: Polymarket Bot, Nightshift, Papertrades"
        )

    def test_git_queries_only_for_repositories(
        self, service: SnapshotService, runner, workspace: Path
    ) -> None:
        service.build()
        git_dirs = {cwd for args, cwd in runner.calls if args[0] == "git"}
        assert git_dirs == {(workspace / "nightshift").resolve()}


class TestWrite:
    def test_writes_camel_case_document(self, service: SnapshotService, test_config: Config) -> None:
        result = service.generate()
        assert isinstance(result, Ok)
        assert result.ok_value == test_config.output_path

        data = json.loads(test_config.output_path.read_text(encoding="utf-8"))
        assert list(data) == [
            "generatedAt",
            "dataVersion",
            "confidenceModel",
            "digest",
            "priorityModules",
            "teamScene",
            "projects",
        ]
        assert set(data["confidenceModel"]) == {"high", "medium", "low"}
        assert data["priorityModules"][0]["roiScore"] == 78
        assert data["projects"][1]["trend7d"] == [0, 0, 0, 0, 0, 0, 2]
        assert data["projects"][1]["fileSignals"]["filesScanned"] == 3
        assert "fileSignals" not in data["projects"][0]

    def test_overwrites_previous_file(self, service: SnapshotService, test_config: Config) -> None:
        test_config.output_path.parent.mkdir(parents=True)
        test_config.output_path.write_text('{"stale": true, "padding": "' + "x" * 5000 + '"}')
        service.generate()
        data = json.loads(test_config.output_path.read_text(encoding="utf-8"))
        assert "stale" not in data

    def test_repeat_runs_produce_identical_projects(
        self, service: SnapshotService, test_config: Config
    ) -> None:
        service.generate()
        first = json.loads(test_config.output_path.read_text(encoding="utf-8"))["projects"]
        service.generate()
        second = json.loads(test_config.output_path.read_text(encoding="utf-8"))["projects"]
        assert json.dumps(first) == json.dumps(second)

    def test_unwritable_output_is_err(
        self, test_config: Config, runner, now: datetime
    ) -> None:
        blocker = test_config.root_dir / "data"
        blocker.write_text("not a directory", encoding="utf-8")
        service = SnapshotService(test_config, runner=runner, clock=lambda: now)
        result = service.generate()
        assert isinstance(result, Err)
        assert "live-metrics.json" in result.err_value
