"""
core/errors.py
---------------

Exception hierarchy raised by the client.

Every failure that reaches a caller is one of these classes and carries
structured detail (status, type, field errors, request id) rather than a
bare string.  ``to_dict`` gives a JSON-ready view for structured logging.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field


class GoCardlessError(Exception):
    """Base error class for every failure raised by the client."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON output."""
        result: Dict[str, Any] = {"error": self.message, "kind": type(self).__name__}
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(GoCardlessError):
    """The client was built without something it needs (e.g. a token)."""


class RequestCancelled(GoCardlessError):
    """The caller cancelled the call while it was waiting to retry."""


class TransportFailure(GoCardlessError):
    """Network-level failure: refused connection, timeout or truncated read.

    The request may or may not have reached the server.
    """

    def __init__(self, message: str, kind: str = "network", cause: Optional[BaseException] = None):
        super().__init__(message, {"kind": kind})
        self.kind = kind
        self.cause = cause


class InvalidRequestDescriptor(GoCardlessError):
    """A request descriptor was rejected before any network I/O."""


class MissingPathParameter(InvalidRequestDescriptor):
    def __init__(self, template: str, names: Sequence[str]):
        super().__init__(
            f"Missing path parameter(s) {', '.join(sorted(names))} for {template}",
            {"template": template, "missing": sorted(names)},
        )
        self.names = sorted(names)


class UnusedPathParameter(InvalidRequestDescriptor):
    def __init__(self, template: str, names: Sequence[str]):
        super().__init__(
            f"Path parameter(s) {', '.join(sorted(names))} not used by {template}",
            {"template": template, "unused": sorted(names)},
        )
        self.names = sorted(names)


class MalformedEnvelope(GoCardlessError):
    """A successful response did not have the documented envelope shape.

    Not retried: sending the same request again reproduces it.
    """


class ErrorType(str, Enum):
    VALIDATION_FAILED = "validation_failed"
    INVALID_STATE = "invalid_state"
    INVALID_API_USAGE = "invalid_api_usage"
    AUTHENTICATION_FAILED = "authentication_failed"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    IDEMPOTENT_CREATION_CONFLICT = "idempotent_creation_conflict"
    INTERNAL_ERROR = "internal_error"


class FieldError(BaseModel):
    """One entry of the ``errors`` array of an error envelope."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    field: Optional[str] = None
    message: str = ""
    reason: Optional[str] = None
    request_pointer: Optional[str] = None
    links: Dict[str, str] = Field(default_factory=dict)


class ApiError(GoCardlessError):
    """Non-2xx response from the API, classified by :class:`ErrorType`.

    Use the subclasses to catch a single category; ``error_type`` carries
    the same information for callers that prefer to switch on a value.
    """

    error_type: ErrorType = ErrorType.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        *,
        code: int,
        type: Optional[str] = None,
        request_id: Optional[str] = None,
        documentation_url: Optional[str] = None,
        errors: Optional[List[FieldError]] = None,
        raw_body: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.type = type
        self.request_id = request_id
        self.documentation_url = documentation_url
        self.errors: List[FieldError] = list(errors or [])
        self.raw_body = raw_body

    @property
    def field_errors(self) -> List[FieldError]:
        """Errors that point at a specific request field."""
        return [e for e in self.errors if e.field]

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            "code": self.code,
            "type": self.type,
            "error_type": self.error_type.value,
            "request_id": self.request_id,
        })
        if self.errors:
            result["errors"] = [e.model_dump(exclude_none=True) for e in self.errors]
        return result

    def __str__(self) -> str:
        return f"{self.message} (status={self.code}, error_type={self.error_type.value}, request_id={self.request_id})"


class ValidationFailedError(ApiError):
    error_type = ErrorType.VALIDATION_FAILED


class InvalidStateError(ApiError):
    error_type = ErrorType.INVALID_STATE


class InvalidApiUsageError(ApiError):
    error_type = ErrorType.INVALID_API_USAGE


class AuthenticationError(ApiError):
    error_type = ErrorType.AUTHENTICATION_FAILED


class RateLimitError(ApiError):
    error_type = ErrorType.RATE_LIMIT_EXCEEDED


class IdempotentCreationConflictError(ApiError):
    error_type = ErrorType.IDEMPOTENT_CREATION_CONFLICT

    @property
    def conflicting_resource_id(self) -> Optional[str]:
        """Id of the resource created by the earlier call with the same key."""
        for error in self.errors:
            resource_id = error.links.get("conflicting_resource_id")
            if resource_id:
                return resource_id
        return None


class InternalError(ApiError):
    error_type = ErrorType.INTERNAL_ERROR


ERROR_CLASSES: Dict[ErrorType, type] = {
    cls.error_type: cls
    for cls in (
        ValidationFailedError,
        InvalidStateError,
        InvalidApiUsageError,
        AuthenticationError,
        RateLimitError,
        IdempotentCreationConflictError,
        InternalError,
    )
}
