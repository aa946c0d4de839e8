"""Parse the gateway status command for runtime health signals."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from result import Ok

from opsdeck.config import DEFAULT_GATEWAY_COMMAND
from opsdeck.data.protocols import CommandRunner
from opsdeck.data.shell import run_command
from opsdeck.models.signals import GatewayStatus

logger = logging.getLogger(__name__)

_RUNNING_RE = re.compile(r"Runtime:\s*running", re.IGNORECASE)
_RPC_OK_RE = re.compile(r"RPC probe:\s*ok", re.IGNORECASE)
_LAST_RUN_RE = re.compile(r"last run time\s+([^\r\n]+)", re.IGNORECASE)


def parse_gateway_output(text: str) -> GatewayStatus:
    """Extract runtime, RPC health, and last task run from status text."""
    last_run = _LAST_RUN_RE.search(text)
    return GatewayStatus(
        running=bool(_RUNNING_RE.search(text)),
        rpc_ok=bool(_RPC_OK_RE.search(text)),
        last_run=last_run.group(1) if last_run else None,
        raw_output=text,
    )


def probe_gateway(
    command: Sequence[str] = DEFAULT_GATEWAY_COMMAND,
    runner: CommandRunner = run_command,
) -> GatewayStatus:
    """Run the gateway status command; failed runs are parsed the same way."""
    output = runner(command)
    if isinstance(output, Ok):
        text = output.ok_value
    else:
        logger.info("Gateway status command failed; parsing captured output")
        text = output.err_value
    return parse_gateway_output(text)
