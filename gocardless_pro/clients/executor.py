"""
clients/executor.py
-------------------

Runs one logical API call described by a
:class:`~gocardless_pro.core.request.RequestDescriptor`.

The executor picks the idempotency key once per call, then rebuilds the
wire request (path, query, body and headers) for each attempt and sends
it through the transport until it gets a final answer.  Transport
failures, 429 and 5xx responses are retried as the
:class:`~gocardless_pro.core.retry.RetryPolicy` allows; any other
non-2xx response becomes an :class:`~gocardless_pro.core.errors.ApiError`
and 2xx bodies are parsed from their envelope.
"""

from __future__ import annotations

import json
import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import urlencode

from gocardless_pro.clients.http_client import RawResponse, Transport
from gocardless_pro.core.envelope import ApiResponse, parse_envelope
from gocardless_pro.core.error_mapping import map_error
from gocardless_pro.core.errors import RequestCancelled, TransportFailure
from gocardless_pro.core.idempotency import IDEMPOTENCY_HEADER, IdempotencyManager
from gocardless_pro.core.paths import resolve_path, serialize_query
from gocardless_pro.core.request import RequestDescriptor
from gocardless_pro.core.retry import RetryPolicy
from gocardless_pro.logging_config import log_event, log_http_request


class ResolvedRequest:
    """A descriptor turned into wire form for a single attempt."""

    __slots__ = ("method", "url", "headers", "body")

    def __init__(self, method: str, url: str, headers: Dict[str, str], body: Optional[bytes]) -> None:
        self.method = method
        self.url = url
        self.headers = headers
        self.body = body


class Executor:
    """Orchestrates path resolution, idempotency, retries and parsing.

    Configuration is fixed at construction, so one executor can serve
    concurrent calls from several threads; per-call state (attempt count,
    idempotency key) lives inside :meth:`execute`.

    :param transport: sends single HTTP requests
    :param base_url: API root without trailing slash
    :param auth: callable returning the ``Authorization`` header value
    :param retry_policy: decides whether and when to re-send
    :param idempotency: issues idempotency keys for create requests
    :param default_headers: headers sent on every request
    :param sleep: blocking wait used between attempts
    """

    def __init__(
        self,
        transport: Transport,
        base_url: str,
        auth: Callable[[], str],
        *,
        retry_policy: Optional[RetryPolicy] = None,
        idempotency: Optional[IdempotencyManager] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.transport = transport
        self.base_url = base_url.rstrip("/")
        self.retry_policy = retry_policy or RetryPolicy()
        self.idempotency = idempotency or IdempotencyManager()
        self._auth = auth
        self._default_headers = dict(default_headers or {})
        self._sleep = sleep

    def resolve(self, descriptor: RequestDescriptor, idempotency_token: Optional[str] = None) -> ResolvedRequest:
        """Build the wire request for one attempt; raises before any I/O on a bad descriptor.

        The ``Authorization`` value is read from the auth callable on every
        call.  ``idempotency_token`` is fixed by the caller for the whole
        logical call so each attempt carries the same key.
        """
        path = resolve_path(descriptor.path_template, descriptor.path_params)
        url = f"{self.base_url}{path}"
        query = serialize_query(descriptor.query_params)
        if query:
            url = f"{url}?{urlencode(query)}"

        headers = dict(self._default_headers)
        headers["Authorization"] = self._auth()
        body: Optional[bytes] = None
        if descriptor.body is not None:
            body = json.dumps({descriptor.body_envelope_key: _jsonable(descriptor.body)}).encode("utf-8")
            headers["Content-Type"] = "application/json"

        if idempotency_token is not None:
            headers[IDEMPOTENCY_HEADER] = idempotency_token
        return ResolvedRequest(descriptor.method, url, headers, body)

    def execute(self, descriptor: RequestDescriptor, *,
                cancel_event: Optional[threading.Event] = None) -> ApiResponse[Any]:
        """Perform the call and return the parsed response.

        :param descriptor: the call to make
        :param cancel_event: optional event; setting it aborts a pending
            backoff wait and skips the remaining retries
        :raises InvalidRequestDescriptor: path parameters do not match the template
        :raises TransportFailure: the network failed and retries were exhausted
            or not allowed
        :raises ApiError: the API answered with a non-2xx status
        :raises MalformedEnvelope: a 2xx body did not have the expected shape
        :raises RequestCancelled: ``cancel_event`` was set
        """
        token = self.idempotency.token_for(descriptor)
        safe = descriptor.is_safe_to_retry
        attempt = 0

        while True:
            attempt += 1
            request = self.resolve(descriptor, token)
            self._check_cancelled(cancel_event, request, attempt)
            log_http_request(request.method, request.url, headers=request.headers, attempt=attempt)
            try:
                response = self.transport.send(request.method, request.url, request.headers, request.body)
            except TransportFailure as failure:
                if not self.retry_policy.should_retry(attempt, safe=safe, failure=failure):
                    log_event(logging.ERROR, "http_error", method=request.method, url=request.url,
                              attempt=attempt, detail=failure.message, retry_safe=safe)
                    raise
                self._wait_before_retry(request, attempt, failure.kind, cancel_event)
                continue

            if response.is_success:
                return self._build_response(response, descriptor)

            if self.retry_policy.should_retry(attempt, safe=safe, status=response.status_code):
                self._wait_before_retry(request, attempt, response.status_code, cancel_event)
                continue
            raise map_error(response.status_code, response.content, response.headers)

    def _build_response(self, response: RawResponse, descriptor: RequestDescriptor) -> ApiResponse[Any]:
        resource, meta = parse_envelope(response.content, descriptor)
        return ApiResponse(status_code=response.status_code, headers=response.headers,
                           resource=resource, meta=meta)

    def _wait_before_retry(self, request: ResolvedRequest, attempt: int, reason: Any,
                           cancel_event: Optional[threading.Event]) -> None:
        delay = self.retry_policy.backoff(attempt)
        log_event(logging.WARNING, "http_retry", method=request.method, url=request.url,
                  attempt=attempt, reason=reason, delay_s=round(delay, 3))
        if cancel_event is None:
            self._sleep(delay)
        elif cancel_event.wait(delay):
            raise RequestCancelled("Call cancelled while waiting to retry",
                                   {"url": request.url, "attempts": attempt})

    @staticmethod
    def _check_cancelled(cancel_event: Optional[threading.Event], request: ResolvedRequest,
                         attempt: int) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelled("Call cancelled", {"url": request.url, "attempts": attempt - 1})


def _jsonable(value: Any) -> Any:
    """Convert enums and models inside a request body to plain JSON values."""
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value
