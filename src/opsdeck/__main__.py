"""Allow running as ``python -m opsdeck``."""

from opsdeck.cli import app

app()
