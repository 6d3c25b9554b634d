"""
clients/http_client.py
----------------------

HTTP transport with connection pooling and timeouts.

A transport sends exactly one request and reports what happened: either
the raw status, headers and body, or a
:class:`~gocardless_pro.core.errors.TransportFailure` for network-level
problems.  It knows nothing about retries, envelopes or error payloads;
those live in the executor.  :class:`HTTPClient` is the ``httpx``
implementation; one instance is shared by every call of a client and is
safe for concurrent use.
"""

from __future__ import annotations

import time
from typing import Mapping, Optional, Protocol

import httpx

from gocardless_pro.core.errors import TransportFailure
from gocardless_pro.logging_config import log_http_request


class RawResponse:
    """Status, headers and body of one HTTP exchange."""

    __slots__ = ("status_code", "headers", "content")

    def __init__(self, status_code: int, headers: Mapping[str, str], content: bytes) -> None:
        self.status_code = status_code
        self.headers = headers
        self.content = content

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def __repr__(self) -> str:
        return f"RawResponse(status_code={self.status_code}, {len(self.content)} bytes)"


class Transport(Protocol):
    def send(self, method: str, url: str, headers: Mapping[str, str],
             body: Optional[bytes]) -> RawResponse: ...

    def close(self) -> None: ...


class HTTPClient:
    """Thread-safe ``httpx`` transport.

    :param timeout: per-request timeout in seconds
    :param transport: optional ``httpx`` transport, e.g. ``httpx.MockTransport``
        for tests
    """

    def __init__(self, timeout: float = 30.0, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self.timeout = timeout
        # HTTPX Client uses connection pooling
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send(self, method: str, url: str, headers: Mapping[str, str],
             body: Optional[bytes]) -> RawResponse:
        """Perform a single HTTP request without retries.

        :raises TransportFailure: on connection, timeout or read errors
        """
        start_time = time.monotonic()
        try:
            response = self._client.request(method, url, headers=dict(headers), content=body)
        except httpx.TimeoutException as exc:
            raise TransportFailure(f"Request timed out after {self.timeout} seconds", "timeout", exc) from exc
        except httpx.ConnectError as exc:
            raise TransportFailure(f"Connection error: {exc}", "connect", exc) from exc
        except (httpx.ReadError, httpx.RemoteProtocolError) as exc:
            raise TransportFailure(f"Truncated response: {exc}", "read", exc) from exc
        except httpx.TransportError as exc:
            raise TransportFailure(f"Network error: {exc}", "network", exc) from exc
        duration_ms = (time.monotonic() - start_time) * 1000
        log_http_request(method, url, headers=dict(headers), status=response.status_code, duration_ms=duration_ms)
        return RawResponse(response.status_code, response.headers, response.content)
