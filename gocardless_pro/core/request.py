"""
core/request.py
----------------

Immutable description of one API call.

Services build a :class:`RequestDescriptor` per call and hand it to the
executor; nothing about the call is decided later.  The descriptor is
frozen so a half-configured request can never be shared between calls.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Literal, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class ResponseShape(str, Enum):
    SINGLE = "single"
    LIST = "list"


class RequestDescriptor(BaseModel):
    """Everything the executor needs to perform one logical call.

    ``path_params`` must name every ``:placeholder`` of ``path_template``
    and nothing else; the executor checks this before any network I/O.
    ``query_params`` entries set to ``None`` are dropped on the wire.
    ``body`` is sent wrapped in ``{envelope_key: body}``, or under
    ``request_envelope_key`` when set (action endpoints post ``{"data": ...}``).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: HttpMethod
    path_template: str
    envelope_key: str
    response_type: Type[BaseModel]
    response_shape: ResponseShape = ResponseShape.SINGLE
    path_params: Dict[str, str] = Field(default_factory=dict)
    query_params: Dict[str, Any] = Field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    idempotent: bool = False
    idempotency_key: Optional[str] = None
    request_envelope_key: Optional[str] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "RequestDescriptor":
        if not self.path_template.startswith("/"):
            raise ValueError("path_template must start with '/'")
        if self.response_shape is ResponseShape.LIST and self.method != "GET":
            raise ValueError("LIST responses are only produced by GET requests")
        if self.method == "GET" and self.body is not None:
            raise ValueError("GET requests cannot carry a body")
        if (self.idempotent or self.idempotency_key) and self.method != "POST":
            raise ValueError("idempotency keys only apply to POST requests")
        return self

    @property
    def is_safe_to_retry(self) -> bool:
        """Whether re-sending this call cannot duplicate a side effect.

        GET, PUT and DELETE are retry-safe by definition on this API.  A POST
        only becomes retry-safe when it carries an idempotency key.
        """
        if self.method != "POST":
            return True
        return self.idempotent or self.idempotency_key is not None

    @property
    def body_envelope_key(self) -> str:
        return self.request_envelope_key or self.envelope_key

    def with_query(self, **params: Any) -> "RequestDescriptor":
        """Return a copy with ``params`` merged into the query."""
        merged = dict(self.query_params)
        merged.update(params)
        return self.model_copy(update={"query_params": merged})


def build_query(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop unset entries from a keyword mapping of filters."""
    return {k: v for k, v in values.items() if v is not None}
