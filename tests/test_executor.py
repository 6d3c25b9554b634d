import threading

import httpx
import pytest

from conftest import ACCESS_TOKEN, BASE_URL, envelope, error_body
from gocardless_pro.clients.executor import Executor
from gocardless_pro.clients.http_client import HTTPClient
from gocardless_pro.core.errors import (
    InternalError,
    InvalidApiUsageError,
    MalformedEnvelope,
    MissingPathParameter,
    RateLimitError,
    RequestCancelled,
    TransportFailure,
    ValidationFailedError,
)
from gocardless_pro.core.request import RequestDescriptor
from gocardless_pro.schemas.customers import Customer
from gocardless_pro.schemas.mandates import Mandate


def get_mandate(identity="MD123"):
    return RequestDescriptor(method="GET", path_template="/mandates/:identity", envelope_key="mandates",
                             response_type=Mandate, path_params={"identity": identity})


def create_customer(**kwargs):
    return RequestDescriptor(method="POST", path_template="/customers", envelope_key="customers",
                             response_type=Customer, body={"email": "jo@example.com"}, **kwargs)


class TestSingleCall:
    def test_get_mandate_scenario(self, client, server):
        server.reply(200, {"mandates": {"id": "MD123", "status": "active"}})

        response = client.execute(get_mandate())

        assert response.status_code == 200
        assert response.resource.id == "MD123"
        request = server.requests[0]
        assert str(request.url) == f"{BASE_URL}/mandates/MD123"
        assert request.method == "GET"

    def test_standard_headers(self, client, server):
        server.reply(200, {"mandates": {"id": "MD123"}})
        client.execute(get_mandate())
        headers = server.requests[0].headers
        assert headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"
        assert headers["GoCardless-Version"] == "2015-07-06"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"].startswith("gocardless-pro-python/")
        assert "Idempotency-Key" not in headers
        assert "Content-Type" not in headers

    def test_response_headers_exposed(self, client, server):
        server.reply(200, {"mandates": {"id": "MD123"}}, headers={"RateLimit-Remaining": "999"})
        response = client.execute(get_mandate())
        assert response.headers["ratelimit-remaining"] == "999"

    def test_body_is_wrapped_in_envelope(self, client, server):
        server.reply(201, {"customers": {"id": "CU1", "email": "jo@example.com"}})
        response = client.execute(create_customer(idempotent=True))
        assert server.body() == {"customers": {"email": "jo@example.com"}}
        assert server.requests[0].headers["Content-Type"] == "application/json"
        assert response.resource.email == "jo@example.com"

    def test_query_omits_unset_values(self, client, server):
        server.reply(200, envelope("customers", [], with_meta=True))
        descriptor = RequestDescriptor(method="GET", path_template="/customers", envelope_key="customers",
                                       response_type=Customer, response_shape="list",
                                       query_params={"limit": 2, "after": None})
        client.execute(descriptor)
        assert dict(server.requests[0].url.params) == {"limit": "2"}

    def test_invalid_descriptor_rejected_before_network(self, client, server):
        descriptor = RequestDescriptor(method="GET", path_template="/mandates/:identity",
                                       envelope_key="mandates", response_type=Mandate)
        with pytest.raises(MissingPathParameter):
            client.execute(descriptor)
        assert server.requests == []


class TestRetries:
    def test_post_retries_reuse_idempotency_key(self, client, server, sleeps):
        server.reply(500, error_body("gocardless", 500)).reply(503, b"").reply(
            201, {"customers": {"id": "CU1"}})

        response = client.execute(create_customer(idempotent=True))

        assert response.resource.id == "CU1"
        assert len(server.requests) == 3
        keys = {r.headers["Idempotency-Key"] for r in server.requests}
        assert len(keys) == 1
        assert len(sleeps) == 2

    def test_each_attempt_reads_current_credentials(self, server, sleeps, retry_policy):
        tokens = iter(["Bearer first", "Bearer rotated"])
        executor = Executor(HTTPClient(transport=httpx.MockTransport(server)), BASE_URL, lambda: next(tokens),
                            retry_policy=retry_policy, sleep=sleeps.append)
        server.reply(503, b"").reply(201, {"customers": {"id": "CU1"}})

        executor.execute(create_customer(idempotent=True))

        assert [r.headers["Authorization"] for r in server.requests] == ["Bearer first", "Bearer rotated"]
        assert len({r.headers["Idempotency-Key"] for r in server.requests}) == 1

    def test_caller_key_sent_on_every_attempt(self, client, server):
        server.reply(502, b"").reply(201, {"customers": {"id": "CU1"}})
        client.execute(create_customer(idempotency_key="order-42"))
        assert [r.headers["Idempotency-Key"] for r in server.requests] == ["order-42", "order-42"]

    def test_distinct_calls_get_distinct_keys(self, client, server):
        server.reply(201, {"customers": {"id": "CU1"}}).reply(201, {"customers": {"id": "CU2"}})
        client.execute(create_customer(idempotent=True))
        client.execute(create_customer(idempotent=True))
        first, second = (r.headers["Idempotency-Key"] for r in server.requests)
        assert first != second

    def test_post_without_key_attempted_once_on_network_error(self, client, server, sleeps):
        server.fail(httpx.ConnectError("connection refused"))
        with pytest.raises(TransportFailure) as exc_info:
            client.execute(create_customer())
        assert exc_info.value.kind == "connect"
        assert len(server.requests) == 1
        assert sleeps == []

    def test_post_without_key_not_retried_on_5xx(self, client, server):
        server.reply(503, error_body("gocardless", 503))
        with pytest.raises(InternalError):
            client.execute(create_customer())
        assert len(server.requests) == 1

    def test_get_retried_on_timeout(self, client, server):
        server.fail(httpx.ReadTimeout("slow")).reply(200, {"mandates": {"id": "MD123"}})
        assert client.execute(get_mandate()).resource.id == "MD123"
        assert len(server.requests) == 2

    def test_rate_limit_then_success(self, client, server, sleeps, retry_policy):
        server.reply(429, error_body("invalid_api_usage", 429)).reply(200, {"mandates": {"id": "MD123"}})

        response = client.execute(get_mandate())

        assert response.status_code == 200
        assert len(server.requests) == 2
        assert 0 < sum(sleeps) <= retry_policy.max_total_delay

    @pytest.mark.parametrize("status, error_cls, type_", [
        (400, InvalidApiUsageError, "invalid_api_usage"),
        (404, InvalidApiUsageError, "invalid_api_usage"),
        (422, ValidationFailedError, "validation_failed"),
    ])
    def test_client_errors_not_retried(self, client, server, sleeps, status, error_cls, type_):
        server.reply(status, error_body(type_, status))
        with pytest.raises(error_cls):
            client.execute(get_mandate())
        assert len(server.requests) == 1
        assert sleeps == []

    def test_exhausted_retries_surface_last_response(self, client, server, sleeps):
        server.reply(429, error_body("invalid_api_usage", 429)).reply(
            429, error_body("invalid_api_usage", 429)).reply(429, error_body("invalid_api_usage", 429, request_id="last"))
        with pytest.raises(RateLimitError) as exc_info:
            client.execute(get_mandate())
        assert exc_info.value.request_id == "last"
        assert len(server.requests) == 3
        assert len(sleeps) == 2

    def test_exhausted_retries_surface_transport_failure(self, client, server):
        for _ in range(3):
            server.fail(httpx.ConnectError("refused"))
        with pytest.raises(TransportFailure):
            client.execute(get_mandate())
        assert len(server.requests) == 3

    def test_malformed_envelope_not_retried(self, client, server):
        server.reply(200, {"customers": {"id": "CU1"}})
        with pytest.raises(MalformedEnvelope):
            client.execute(get_mandate())
        assert len(server.requests) == 1


class TestCancellation:
    def test_cancelled_before_first_attempt(self, client, server):
        event = threading.Event()
        event.set()
        with pytest.raises(RequestCancelled):
            client.execute(get_mandate(), cancel_event=event)
        assert server.requests == []

    def test_cancel_aborts_backoff_wait(self, client, server):
        event = threading.Event()

        def unavailable(request):
            event.set()
            return httpx.Response(503, content=b"")

        server.handle(unavailable)
        with pytest.raises(RequestCancelled):
            client.execute(get_mandate(), cancel_event=event)
        assert len(server.requests) == 1
