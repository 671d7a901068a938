"""Shared pydantic base for wire models."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python; unknown fields are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Empty(WireModel):
    """Body of replies that carry no data, such as a file deletion."""


def coerce_enum(enum_cls, value):
    """Map a wire string onto ``enum_cls`` when it names a member, otherwise keep the string."""
    if isinstance(value, str) and not isinstance(value, enum_cls):
        try:
            return enum_cls(value)
        except ValueError:
            return value
    return value
