"""
gocardless_pro
--------------

Typed client for the GoCardless Pro REST API.

Layers:
- core: request descriptors, path resolution, retries, idempotency,
  envelope and error parsing
- clients: HTTP transport and the executor that runs one call
- utils: cursor pagination
- schemas / services: resource models and per-endpoint descriptor builders
"""

__version__ = "0.1.0"

from gocardless_pro.client import Client  # noqa: E402
from gocardless_pro.core.envelope import ApiResponse, PageMeta  # noqa: E402
from gocardless_pro.core.errors import (  # noqa: E402
    ApiError,
    AuthenticationError,
    ErrorType,
    GoCardlessError,
    IdempotentCreationConflictError,
    InternalError,
    InvalidApiUsageError,
    InvalidStateError,
    MalformedEnvelope,
    MissingPathParameter,
    RateLimitError,
    RequestCancelled,
    TransportFailure,
    UnusedPathParameter,
    ValidationFailedError,
)
from gocardless_pro.core.request import RequestDescriptor, ResponseShape  # noqa: E402
from gocardless_pro.utils.pagination import Direction, PageIterator  # noqa: E402

__all__ = [
    "ApiError",
    "ApiResponse",
    "AuthenticationError",
    "Client",
    "Direction",
    "ErrorType",
    "GoCardlessError",
    "IdempotentCreationConflictError",
    "InternalError",
    "InvalidApiUsageError",
    "InvalidStateError",
    "MalformedEnvelope",
    "MissingPathParameter",
    "PageIterator",
    "PageMeta",
    "RateLimitError",
    "RequestCancelled",
    "RequestDescriptor",
    "ResponseShape",
    "TransportFailure",
    "UnusedPathParameter",
    "ValidationFailedError",
]
