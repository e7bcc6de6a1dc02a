"""TypedEnvelope — the tagged wrapper a registered instance normalizes to."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

TYPE_KEY = "@type"
VALUE_KEY = "value"


class TypedEnvelope(BaseModel):
    """Immutable ``{"@type": <wire name>, "value": <payload>}`` pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    type: str = Field(..., alias=TYPE_KEY, min_length=1, description="Wire name")
    value: Any = None

    @classmethod
    def is_envelope(cls, data: Any) -> bool:
        """True if *data* looks like a normalized envelope."""
        return isinstance(data, dict) and TYPE_KEY in data

    def to_plain(self) -> dict[str, Any]:
        return {TYPE_KEY: self.type, VALUE_KEY: self.value}
