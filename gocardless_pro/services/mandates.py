"""
services/mandates.py
---------------------

Endpoints of the mandates resource.  ``cancel`` and ``reinstate`` are
POST actions without an idempotency key, so they are never retried.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from gocardless_pro.core.request import RequestDescriptor, ResponseShape, build_query
from gocardless_pro.schemas.mandates import Mandate, MandateStatus
from gocardless_pro.services.base import BaseService, body_of
from gocardless_pro.utils.pagination import Direction, PageIterator

ENVELOPE = "mandates"


class MandateService(BaseService):

    def create_request(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template="/mandates", envelope_key=ENVELOPE,
                                 response_type=Mandate, body=body_of(params), idempotent=True,
                                 idempotency_key=idempotency_key)

    def create(self, params: Dict[str, Any], *, idempotency_key: Optional[str] = None) -> Mandate:
        return self._execute(self.create_request(params, idempotency_key=idempotency_key))

    def list_request(self, *, customer: Optional[str] = None, customer_bank_account: Optional[str] = None,
                     status: Optional[MandateStatus] = None, limit: Optional[int] = None,
                     before: Optional[str] = None, after: Optional[str] = None) -> RequestDescriptor:
        query = build_query({"customer": customer, "customer_bank_account": customer_bank_account,
                             "status": status, "limit": limit, "before": before, "after": after})
        return RequestDescriptor(method="GET", path_template="/mandates", envelope_key=ENVELOPE,
                                 response_type=Mandate, response_shape=ResponseShape.LIST, query_params=query)

    def list(self, *, direction: Direction = Direction.FORWARD, **filters: Any) -> PageIterator[Mandate]:
        return self._paginate(self.list_request(**filters), direction)

    def get_request(self, identity: str) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path_template="/mandates/:identity", envelope_key=ENVELOPE,
                                 response_type=Mandate, path_params={"identity": identity})

    def get(self, identity: str) -> Mandate:
        return self._execute(self.get_request(identity))

    def update_request(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> RequestDescriptor:
        return RequestDescriptor(method="PUT", path_template="/mandates/:identity", envelope_key=ENVELOPE,
                                 response_type=Mandate, path_params={"identity": identity},
                                 body=body_of(metadata=metadata))

    def update(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> Mandate:
        return self._execute(self.update_request(identity, metadata=metadata))

    def action_request(self, identity: str, action: str, *,
                       metadata: Optional[Dict[str, str]] = None) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template=f"/mandates/:identity/actions/{action}",
                                 envelope_key=ENVELOPE, request_envelope_key="data", response_type=Mandate,
                                 path_params={"identity": identity}, body=body_of(metadata=metadata))

    def cancel(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> Mandate:
        return self._execute(self.action_request(identity, "cancel", metadata=metadata))

    def reinstate(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> Mandate:
        return self._execute(self.action_request(identity, "reinstate", metadata=metadata))
