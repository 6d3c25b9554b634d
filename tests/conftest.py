"""Shared fixtures: a scripted fake API behind ``httpx.MockTransport``."""

import json
import random
from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

from gocardless_pro import Client
from gocardless_pro.core.config import Settings
from gocardless_pro.core.retry import RetryPolicy

BASE_URL = "https://api.example.test"
ACCESS_TOKEN = "sandbox_secret_token"

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


def envelope(key: str, payload: Any, *, after: Optional[str] = None, before: Optional[str] = None,
             limit: Optional[int] = None, with_meta: bool = False) -> dict:
    body = {key: payload}
    if with_meta or after is not None or before is not None:
        body["meta"] = {"cursors": {"before": before, "after": after}, "limit": limit}
    return body


def error_body(type_: str, code: int, message: str = "Something went wrong", errors: Optional[list] = None,
               request_id: str = "req_123") -> dict:
    return {"error": {
        "type": type_,
        "code": code,
        "message": message,
        "errors": errors or [],
        "documentation_url": f"https://developer.gocardless.com/api-reference#{type_}",
        "request_id": request_id,
    }}


class FakeServer:
    """Records incoming requests and replays queued replies in order."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._replies: List[Reply] = []

    def reply(self, status: int, body: Any = None, *, headers: Optional[dict] = None) -> "FakeServer":
        if isinstance(body, (dict, list)):
            self._replies.append(httpx.Response(status, json=body, headers=headers))
        else:
            self._replies.append(httpx.Response(status, content=body or b"", headers=headers))
        return self

    def fail(self, exc: Exception) -> "FakeServer":
        self._replies.append(exc)
        return self

    def handle(self, fn: Callable[[httpx.Request], httpx.Response]) -> "FakeServer":
        self._replies.append(fn)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._replies:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply) and not isinstance(reply, httpx.Response):
            return reply(request)
        return reply

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def retry_policy() -> RetryPolicy:
    return RetryPolicy(max_attempts=3, base_delay=0.1, max_delay=0.5, rng=random.Random(7))


@pytest.fixture
def settings() -> Settings:
    return Settings(access_token=None, environment="sandbox", api_version="2015-07-06")


@pytest.fixture
def client(server, sleeps, retry_policy, settings):
    with Client(
        ACCESS_TOKEN,
        base_url=BASE_URL,
        settings=settings,
        http_transport=httpx.MockTransport(server),
        retry_policy=retry_policy,
        sleep=sleeps.append,
    ) as c:
        yield c
