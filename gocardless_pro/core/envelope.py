"""
core/envelope.py
-----------------

Parsing of successful response envelopes.

Every successful response wraps its payload under a single resource key
(``{"mandates": {...}}``), with list responses adding a ``meta`` block
that carries the pagination cursors::

    {"customers": [...], "meta": {"cursors": {"before": null, "after": "CU123"}, "limit": 50}}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, List, Mapping, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from gocardless_pro.core.errors import MalformedEnvelope
from gocardless_pro.core.request import RequestDescriptor, ResponseShape

T = TypeVar("T")


class PageMeta(BaseModel):
    """Cursor metadata of one list page.  Cursors are opaque strings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Parsed response of one call, with status and headers kept for callers
    that read metadata outside the envelope (e.g. rate-limit counters)."""

    status_code: int
    headers: Mapping[str, str]
    resource: Union[T, List[T], None]
    meta: Optional[PageMeta] = None

    @property
    def items(self) -> List[T]:
        """The resource as a list, for either response shape."""
        if self.resource is None:
            return []
        if isinstance(self.resource, list):
            return self.resource
        return [self.resource]


def _load_root(content: bytes) -> dict:
    try:
        root = json.loads(content)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MalformedEnvelope(f"Response body is not valid JSON: {exc}") from exc
    if not isinstance(root, dict):
        raise MalformedEnvelope(f"Response root is a {type(root).__name__}, expected an object")
    return root


def _parse_meta(root: Mapping[str, Any]) -> Optional[PageMeta]:
    meta = root.get("meta")
    if not isinstance(meta, dict):
        return None
    cursors = meta.get("cursors") or {}
    if not isinstance(cursors, dict):
        raise MalformedEnvelope("meta.cursors is not an object")
    return PageMeta(before=cursors.get("before") or None, after=cursors.get("after") or None,
                    limit=meta.get("limit"))


def parse_envelope(content: bytes, descriptor: RequestDescriptor) -> Tuple[Any, Optional[PageMeta]]:
    """Extract the payload named by ``descriptor.envelope_key``.

    :param content: raw response body
    :param descriptor: the descriptor the response answers
    :raises MalformedEnvelope: root is not an object, the key is absent,
        the payload has the wrong kind or fails model validation
    :return: ``(resource, meta)``; ``resource`` is a model instance for
        SINGLE and a list of them for LIST, ``meta`` is set for LIST only
    """
    model = descriptor.response_type
    key = descriptor.envelope_key
    if not content.strip():
        if descriptor.response_shape is ResponseShape.SINGLE:
            return None, None
        raise MalformedEnvelope(f"Empty body for list of {key}")

    root = _load_root(content)
    if key not in root:
        raise MalformedEnvelope(f"Envelope key {key!r} missing from response",
                                {"keys": sorted(root)})
    payload = root[key]

    try:
        if descriptor.response_shape is ResponseShape.LIST:
            if not isinstance(payload, list):
                raise MalformedEnvelope(f"Expected a list under {key!r}, got {type(payload).__name__}")
            return [model.model_validate(item) for item in payload], _parse_meta(root)
        if not isinstance(payload, dict):
            raise MalformedEnvelope(f"Expected an object under {key!r}, got {type(payload).__name__}")
        return model.model_validate(payload), None
    except ValidationError as exc:
        raise MalformedEnvelope(f"Payload under {key!r} does not match {model.__name__}",
                                {"errors": exc.errors(include_url=False)}) from exc
