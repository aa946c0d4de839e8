"""Run external commands without letting failures escape."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from result import Err, Ok, Result

logger = logging.getLogger(__name__)


def run_command(args: Sequence[str], cwd: Path | None = None) -> Result[str, str]:
    """Run ``args`` and capture output.

    Returns:
        Ok with stripped stdout on exit status 0, otherwise Err with the
        combined stdout and stderr so callers can still inspect it.
    """
    try:
        proc = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        logger.debug("Could not run %s: %s", args[0] if args else "", exc)
        return Err(str(exc))

    if proc.returncode != 0:
        logger.debug("%s exited with status %d", " ".join(args), proc.returncode)
        return Err(((proc.stdout or "") + (proc.stderr or "")).strip())
    return Ok((proc.stdout or "").strip())
