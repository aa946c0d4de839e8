"""Raw signal models produced by the data probes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

TREND_DAYS = 7


def _empty_trend() -> list[int]:
    return [0] * TREND_DAYS


@dataclass(slots=True)
class ScanResult:
    """Outcome of a capped filesystem walk."""

    latest: datetime | None = None
    count: int = 0
    capped: bool = False


@dataclass(slots=True)
class ChecklistCounts:
    """Checkbox item counts for a markdown document."""

    total: int = 0
    done: int = 0

    @property
    def open(self) -> int:
        return max(0, self.total - self.done)


@dataclass(slots=True)
class ActivitySample:
    """Seven-day commit histogram, oldest day first."""

    trend: list[int] = field(default_factory=_empty_trend)
    contributors_7d: int = 0
    confidence: str = "low"

    @property
    def commits_7d(self) -> int:
        return sum(self.trend)


@dataclass(slots=True)
class GatewayStatus:
    """Signals parsed from the gateway status command."""

    running: bool = False
    rpc_ok: bool = False
    last_run: str | None = None
    raw_output: str = ""
