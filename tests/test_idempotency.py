import pytest
from pydantic import ValidationError

from gocardless_pro.core.idempotency import IdempotencyManager
from gocardless_pro.core.request import RequestDescriptor, ResponseShape
from gocardless_pro.schemas.customers import Customer


def descriptor(method="POST", **kwargs):
    return RequestDescriptor(method=method, path_template="/customers", envelope_key="customers",
                             response_type=Customer, **kwargs)


class TestTokenFor:
    def test_idempotent_post_gets_token(self):
        assert IdempotencyManager().token_for(descriptor(idempotent=True, body={})) is not None

    def test_each_logical_call_gets_a_fresh_token(self):
        manager = IdempotencyManager()
        create = descriptor(idempotent=True, body={})
        assert manager.token_for(create) != manager.token_for(create)

    def test_caller_supplied_key_is_used(self):
        manager = IdempotencyManager()
        assert manager.token_for(descriptor(idempotency_key="my-key", body={})) == "my-key"

    def test_non_idempotent_post_has_no_token(self):
        assert IdempotencyManager().token_for(descriptor(body={})) is None

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_other_methods_have_no_token(self, method):
        assert IdempotencyManager().token_for(descriptor(method=method)) is None

    def test_custom_key_factory(self):
        manager = IdempotencyManager(key_factory=lambda: "fixed")
        assert manager.token_for(descriptor(idempotent=True, body={})) == "fixed"


class TestRetrySafety:
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_non_post_is_safe(self, method):
        assert descriptor(method=method).is_safe_to_retry

    def test_post_with_key_is_safe(self):
        assert descriptor(idempotent=True, body={}).is_safe_to_retry
        assert descriptor(idempotency_key="k", body={}).is_safe_to_retry

    def test_post_without_key_is_unsafe(self):
        assert not descriptor(body={}).is_safe_to_retry


class TestDescriptorValidation:
    def test_idempotency_only_on_post(self):
        with pytest.raises(ValidationError):
            descriptor(method="PUT", idempotent=True)

    def test_list_only_on_get(self):
        with pytest.raises(ValidationError):
            descriptor(method="POST", response_shape=ResponseShape.LIST)

    def test_get_has_no_body(self):
        with pytest.raises(ValidationError):
            descriptor(method="GET", body={"a": 1})

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            descriptor(method="PATCH")

    def test_descriptor_is_frozen(self):
        d = descriptor(method="GET")
        with pytest.raises(ValidationError):
            d.method = "POST"

    def test_with_query_returns_copy(self):
        d = descriptor(method="GET", query_params={"limit": 5})
        updated = d.with_query(after="CU9")
        assert updated.query_params == {"limit": 5, "after": "CU9"}
        assert d.query_params == {"limit": 5}
