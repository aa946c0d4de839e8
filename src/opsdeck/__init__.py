"""Ops Deck — live status snapshot generator."""

__version__ = "0.1.0"
