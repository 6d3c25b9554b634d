"""
core/error_mapping.py
----------------------

Turns non-2xx responses into :class:`~gocardless_pro.core.errors.ApiError`.

The API reports errors as::

    {"error": {"type": "validation_failed", "code": 422, "message": "...",
               "errors": [{"field": "email", "message": "is invalid"}],
               "documentation_url": "...", "request_id": "..."}}

The status code alone is ambiguous (a 422 can be ``validation_failed`` or
``invalid_state``), so classification looks at the declared ``type``
first and uses the status to split ``invalid_api_usage`` further.  Bodies
that do not have this shape become ``internal_error`` so that nothing is
swallowed.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from gocardless_pro.core.errors import ERROR_CLASSES, ApiError, ErrorType, FieldError

IDEMPOTENT_CONFLICT_REASON = "idempotent_creation_conflict"


def _classify_unknown_type(status: int) -> ErrorType:
    if status == 401:
        return ErrorType.AUTHENTICATION_FAILED
    if status == 429:
        return ErrorType.RATE_LIMIT_EXCEEDED
    if status == 409:
        return ErrorType.IDEMPOTENT_CREATION_CONFLICT
    if status == 422:
        return ErrorType.VALIDATION_FAILED
    if 400 <= status < 500:
        return ErrorType.INVALID_API_USAGE
    return ErrorType.INTERNAL_ERROR


def classify(status: int, declared_type: Optional[str], errors: List[FieldError]) -> ErrorType:
    """Pick the :class:`ErrorType` for a status and declared error type."""
    if declared_type == "validation_failed":
        return ErrorType.VALIDATION_FAILED
    if declared_type == "invalid_state":
        if status == 409 or any(e.reason == IDEMPOTENT_CONFLICT_REASON for e in errors):
            return ErrorType.IDEMPOTENT_CREATION_CONFLICT
        return ErrorType.INVALID_STATE
    if declared_type == "invalid_api_usage":
        if status == 401:
            return ErrorType.AUTHENTICATION_FAILED
        if status == 429:
            return ErrorType.RATE_LIMIT_EXCEEDED
        return ErrorType.INVALID_API_USAGE
    if declared_type in ("gocardless", "api_error", "internal_error"):
        return ErrorType.INTERNAL_ERROR
    return _classify_unknown_type(status)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _internal_error(status: int, text: str, request_id: Optional[str], reason: str) -> ApiError:
    return ERROR_CLASSES[ErrorType.INTERNAL_ERROR](
        f"Unexpected error response ({reason}), status {status}",
        code=status,
        request_id=request_id,
        raw_body=text,
    )


def map_error(status: int, content: bytes, headers: Optional[Mapping[str, str]] = None) -> ApiError:
    """Build the typed error for a non-2xx response.

    :param status: HTTP status code
    :param content: raw response body
    :param headers: response headers, used for the request id fallback
    :return: an :class:`ApiError` subclass instance (not raised)
    """
    headers = headers or {}
    text = content.decode("utf-8", errors="replace")
    header_request_id = _header(headers, "x-request-id")

    try:
        root = json.loads(text) if text.strip() else None
    except ValueError:
        return _internal_error(status, text, header_request_id, "body is not JSON")
    payload = root.get("error") if isinstance(root, dict) else None
    if not isinstance(payload, dict):
        return _internal_error(status, text, header_request_id, "no error object")

    raw_errors = payload.get("errors")
    if raw_errors is None:
        raw_errors = []
    if not isinstance(raw_errors, list):
        return _internal_error(status, text, header_request_id, "malformed errors array")
    try:
        errors = [FieldError.model_validate(e) for e in raw_errors if isinstance(e, dict)]
    except ValidationError:
        return _internal_error(status, text, header_request_id, "malformed errors array")

    declared_type = payload.get("type")
    error_type = classify(status, declared_type, errors)
    message = payload.get("message") or (errors[0].message if errors else f"HTTP {status}")
    details: Dict[str, Any] = {
        "code": status,
        "type": declared_type,
        "request_id": payload.get("request_id") or header_request_id,
        "documentation_url": payload.get("documentation_url"),
        "errors": errors,
        "raw_body": text,
    }
    return ERROR_CLASSES[error_type](message, **details)
