from enum import Enum

import pytest

from gocardless_pro.core.errors import MissingPathParameter, UnusedPathParameter
from gocardless_pro.core.paths import placeholders, resolve_path, serialize_query
from gocardless_pro.schemas.mandates import MandateStatus


class TestResolvePath:
    def test_substitutes_identity(self):
        assert resolve_path("/mandates/:identity", {"identity": "MD123"}) == "/mandates/MD123"

    def test_template_without_placeholders(self):
        assert resolve_path("/customers", {}) == "/customers"

    def test_values_are_path_escaped(self):
        assert resolve_path("/customers/:identity", {"identity": "a/b c?"}) == "/customers/a%2Fb%20c%3F"

    def test_action_path(self):
        path = resolve_path("/mandates/:identity/actions/cancel", {"identity": "MD1"})
        assert path == "/mandates/MD1/actions/cancel"

    def test_multiple_placeholders(self):
        path = resolve_path("/creditors/:creditor/bank_accounts/:identity", {"creditor": "CR1", "identity": "BA2"})
        assert path == "/creditors/CR1/bank_accounts/BA2"

    def test_missing_parameter(self):
        with pytest.raises(MissingPathParameter) as exc_info:
            resolve_path("/mandates/:identity", {})
        assert exc_info.value.names == ["identity"]

    def test_unused_parameter(self):
        with pytest.raises(UnusedPathParameter) as exc_info:
            resolve_path("/mandates/:identity", {"identity": "MD1", "customer": "CU1"})
        assert exc_info.value.names == ["customer"]

    @pytest.mark.parametrize(
        "params, error",
        [
            ({"a": "1", "b": "2"}, None),
            ({"a": "1"}, MissingPathParameter),
            ({"b": "2"}, MissingPathParameter),
            ({"a": "1", "b": "2", "c": "3"}, UnusedPathParameter),
            ({}, MissingPathParameter),
        ],
    )
    def test_succeeds_only_when_key_sets_match(self, params, error):
        template = "/x/:a/y/:b"
        if error is None:
            resolved = resolve_path(template, params)
            assert ":" not in resolved
        else:
            with pytest.raises(error):
                resolve_path(template, params)

    def test_placeholders(self):
        assert placeholders("/x/:a/y/:b_c") == {"a", "b_c"}


class Colour(Enum):
    RED = "red_wire"


class TestSerializeQuery:
    def test_omits_none(self):
        assert serialize_query({"limit": 10, "after": None, "customer": "CU1"}) == [
            ("limit", "10"),
            ("customer", "CU1"),
        ]

    def test_enum_uses_wire_value(self):
        assert serialize_query({"status": MandateStatus.PENDING_SUBMISSION}) == [("status", "pending_submission")]
        assert serialize_query({"colour": Colour.RED}) == [("colour", "red_wire")]

    def test_booleans_lowercase(self):
        assert serialize_query({"enabled": True, "archived": False}) == [("enabled", "true"), ("archived", "false")]

    def test_lists_are_comma_joined(self):
        assert serialize_query({"ids": ["MD1", "MD2"]}) == [("ids", "MD1,MD2")]
