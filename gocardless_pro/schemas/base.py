"""
schemas/base.py
----------------

Building blocks shared by all resource models.

Resources are immutable containers: no behaviour, unknown fields
ignored so new API fields never break parsing, and every enum carries
an ``UNKNOWN`` member that absorbs values the client does not know yet.
Foreign keys live in a ``links`` sub-model as plain id strings.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class WireEnum(str, Enum):
    """String enum keyed by the API's wire value.

    Subclasses must define ``UNKNOWN = "unknown"``; any unrecognised value
    resolves to it instead of raising.
    """

    @classmethod
    def _missing_(cls, value):
        return cls.__members__.get("UNKNOWN")

    def __str__(self) -> str:
        return self.value


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Links(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
