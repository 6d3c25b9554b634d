"""
services/creditors.py
----------------------

Endpoints of the creditors resource.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from gocardless_pro.core.request import RequestDescriptor, ResponseShape, build_query
from gocardless_pro.schemas.creditors import Creditor
from gocardless_pro.services.base import BaseService, body_of
from gocardless_pro.utils.pagination import Direction, PageIterator

ENVELOPE = "creditors"


class CreditorService(BaseService):

    def create_request(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template="/creditors", envelope_key=ENVELOPE,
                                 response_type=Creditor, body=body_of(params), idempotent=True,
                                 idempotency_key=idempotency_key)

    def create(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> Creditor:
        return self._execute(self.create_request(params, idempotency_key=idempotency_key))

    def list_request(self, *, limit: Optional[int] = None, before: Optional[str] = None,
                     after: Optional[str] = None) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path_template="/creditors", envelope_key=ENVELOPE,
                                 response_type=Creditor, response_shape=ResponseShape.LIST,
                                 query_params=build_query({"limit": limit, "before": before, "after": after}))

    def list(self, *, direction: Direction = Direction.FORWARD, **filters: Any) -> PageIterator[Creditor]:
        return self._paginate(self.list_request(**filters), direction)

    def get_request(self, identity: str) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path_template="/creditors/:identity", envelope_key=ENVELOPE,
                                 response_type=Creditor, path_params={"identity": identity})

    def get(self, identity: str) -> Creditor:
        return self._execute(self.get_request(identity))

    def update_request(self, identity: str, params: Dict[str, Any]) -> RequestDescriptor:
        return RequestDescriptor(method="PUT", path_template="/creditors/:identity", envelope_key=ENVELOPE,
                                 response_type=Creditor, path_params={"identity": identity}, body=body_of(params))

    def update(self, identity: str, params: Dict[str, Any]) -> Creditor:
        return self._execute(self.update_request(identity, params))
