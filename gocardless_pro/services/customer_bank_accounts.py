"""
services/customer_bank_accounts.py
-----------------------------------

Endpoints of the customer bank accounts resource.  ``disable`` is a POST
action: it is sent once and never retried.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from gocardless_pro.core.request import RequestDescriptor, ResponseShape, build_query
from gocardless_pro.schemas.customer_bank_accounts import CustomerBankAccount
from gocardless_pro.services.base import BaseService, body_of
from gocardless_pro.utils.pagination import Direction, PageIterator

ENVELOPE = "customer_bank_accounts"


class CustomerBankAccountService(BaseService):

    def create_request(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template="/customer_bank_accounts", envelope_key=ENVELOPE,
                                 response_type=CustomerBankAccount, body=body_of(params), idempotent=True,
                                 idempotency_key=idempotency_key)

    def create(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> CustomerBankAccount:
        return self._execute(self.create_request(params, idempotency_key=idempotency_key))

    def list_request(self, *, customer: Optional[str] = None, enabled: Optional[bool] = None,
                     limit: Optional[int] = None, before: Optional[str] = None,
                     after: Optional[str] = None) -> RequestDescriptor:
        query = build_query({"after": after, "before": before, "customer": customer,
                             "enabled": enabled, "limit": limit})
        return RequestDescriptor(method="GET", path_template="/customer_bank_accounts", envelope_key=ENVELOPE,
                                 response_type=CustomerBankAccount, response_shape=ResponseShape.LIST,
                                 query_params=query)

    def list(self, *, direction: Direction = Direction.FORWARD, **filters: Any) -> PageIterator[CustomerBankAccount]:
        return self._paginate(self.list_request(**filters), direction)

    def get_request(self, identity: str) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path_template="/customer_bank_accounts/:identity",
                                 envelope_key=ENVELOPE, response_type=CustomerBankAccount,
                                 path_params={"identity": identity})

    def get(self, identity: str) -> CustomerBankAccount:
        return self._execute(self.get_request(identity))

    def update_request(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> RequestDescriptor:
        return RequestDescriptor(method="PUT", path_template="/customer_bank_accounts/:identity",
                                 envelope_key=ENVELOPE, response_type=CustomerBankAccount,
                                 path_params={"identity": identity}, body=body_of(metadata=metadata))

    def update(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> CustomerBankAccount:
        return self._execute(self.update_request(identity, metadata=metadata))

    def disable_request(self, identity: str) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template="/customer_bank_accounts/:identity/actions/disable",
                                 envelope_key=ENVELOPE, request_envelope_key="data",
                                 response_type=CustomerBankAccount, path_params={"identity": identity}, body={})

    def disable(self, identity: str) -> CustomerBankAccount:
        return self._execute(self.disable_request(identity))
