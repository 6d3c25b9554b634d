"""
services/customers.py
----------------------

Endpoints of the customers resource.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from gocardless_pro.core.request import RequestDescriptor, ResponseShape, build_query
from gocardless_pro.schemas.customers import Customer
from gocardless_pro.services.base import BaseService, body_of
from gocardless_pro.utils.pagination import Direction, PageIterator

ENVELOPE = "customers"


class CustomerService(BaseService):

    def create_request(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template="/customers", envelope_key=ENVELOPE,
                                 response_type=Customer, body=body_of(params), idempotent=True,
                                 idempotency_key=idempotency_key)

    def create(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> Customer:
        return self._execute(self.create_request(params, idempotency_key=idempotency_key))

    def list_request(self, *, created_at_gt: Optional[str] = None, created_at_lt: Optional[str] = None,
                     limit: Optional[int] = None, before: Optional[str] = None,
                     after: Optional[str] = None) -> RequestDescriptor:
        query = build_query({"created_at[gt]": created_at_gt, "created_at[lt]": created_at_lt,
                             "limit": limit, "before": before, "after": after})
        return RequestDescriptor(method="GET", path_template="/customers", envelope_key=ENVELOPE,
                                 response_type=Customer, response_shape=ResponseShape.LIST, query_params=query)

    def list(self, *, direction: Direction = Direction.FORWARD, **filters: Any) -> PageIterator[Customer]:
        return self._paginate(self.list_request(**filters), direction)

    def get_request(self, identity: str) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path_template="/customers/:identity", envelope_key=ENVELOPE,
                                 response_type=Customer, path_params={"identity": identity})

    def get(self, identity: str) -> Customer:
        return self._execute(self.get_request(identity))

    def update_request(self, identity: str, params: Dict[str, Any]) -> RequestDescriptor:
        return RequestDescriptor(method="PUT", path_template="/customers/:identity", envelope_key=ENVELOPE,
                                 response_type=Customer, path_params={"identity": identity}, body=body_of(params))

    def update(self, identity: str, params: Dict[str, Any]) -> Customer:
        return self._execute(self.update_request(identity, params))
