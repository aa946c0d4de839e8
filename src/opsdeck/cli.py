"""Typer CLI for Ops Deck — generate and rank commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Err

from opsdeck.config import DEFAULT_MAX_SCAN_FILES, Config

app = typer.Typer(
    name="opsdeck",
    help="Ops Deck — live status snapshot for the mission control dashboard.",
    invoke_without_command=True,
)

RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Dashboard repository root (default: current directory)"),
]
WorkspaceOption = Annotated[
    Path | None,
    typer.Option("--workspace", help="Directory holding the sibling projects"),
]
WorkspaceDevOption = Annotated[
    Path | None,
    typer.Option("--workspace-dev", help="Directory holding projects/polymarket"),
]
MaxFilesOption = Annotated[
    int,
    typer.Option("--max-files", min=1, help="Stop scanning a project after this many entries"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_config(
    root: Path | None,
    workspace: Path | None,
    workspace_dev: Path | None,
    max_files: int,
    output: Path | None = None,
) -> Config:
    return Config.from_root(
        root or Path.cwd(),
        workspace_dir=workspace,
        workspace_dev_dir=workspace_dev,
        output_file=output,
        max_scan_files=max_files,
    )


@app.callback(invoke_without_command=True)
def generate(
    ctx: typer.Context,
    root: RootOption = None,
    workspace: WorkspaceOption = None,
    workspace_dev: WorkspaceDevOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Snapshot path (default: <root>/data/live-metrics.json)"),
    ] = None,
    max_files: MaxFilesOption = DEFAULT_MAX_SCAN_FILES,
    verbose: VerboseOption = False,
) -> None:
    """Generate the live-metrics snapshot."""
    if ctx.invoked_subcommand is not None:
        return
    _configure_logging(verbose)
    config = _build_config(root, workspace, workspace_dev, max_files, output)

    from opsdeck.services.snapshot_service import SnapshotService

    result = SnapshotService(config).generate()
    if isinstance(result, Err):
        typer.echo(result.err_value, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {result.ok_value}")


@app.command()
def rank(
    root: RootOption = None,
    workspace: WorkspaceOption = None,
    workspace_dev: WorkspaceDevOption = None,
    max_files: MaxFilesOption = DEFAULT_MAX_SCAN_FILES,
    verbose: VerboseOption = False,
) -> None:
    """Print projects ranked by ROI without writing the snapshot."""
    _configure_logging(verbose)
    config = _build_config(root, workspace, workspace_dev, max_files)

    from opsdeck.services.snapshot_service import SnapshotService, rank_projects

    snapshot = SnapshotService(config).build()
    for idx, project in enumerate(rank_projects(snapshot.projects), start=1):
        typer.echo(
            f"{idx:>2}. {project.name:<28} ROI {project.roi_score:>2}  "
            f"progress {project.progress:>3}%  {project.health:<7} {project.confidence}"
        )
