"""Shared base for serialized models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase keys for the dashboard."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
