"""
services/subscriptions.py
--------------------------

Endpoints of the subscriptions resource.

``create`` takes the schedule fields directly so enum members can be
passed instead of raw strings::

    client.subscriptions.create(
        {"amount": 2500, "currency": "GBP", "links": {"mandate": "MD123"}},
        interval_unit=IntervalUnit.MONTHLY,
        day_of_month=-1,
    )
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from gocardless_pro.core.request import RequestDescriptor, ResponseShape, build_query
from gocardless_pro.schemas.subscriptions import IntervalUnit, Month, Subscription
from gocardless_pro.services.base import BaseService, body_of
from gocardless_pro.utils.pagination import Direction, PageIterator

ENVELOPE = "subscriptions"


class SubscriptionService(BaseService):

    def create_request(
        self,
        params: Dict[str, Any],
        *,
        interval_unit: Optional[IntervalUnit] = None,
        month: Optional[Month] = None,
        day_of_month: Optional[int] = None,
        idempotency_key: Optional[str] = None,
    ) -> RequestDescriptor:
        body = body_of(params, interval_unit=interval_unit, month=month, day_of_month=day_of_month)
        return RequestDescriptor(method="POST", path_template="/subscriptions", envelope_key=ENVELOPE,
                                 response_type=Subscription, body=body, idempotent=True,
                                 idempotency_key=idempotency_key)

    def create(self, params: Dict[str, Any], **options: Any) -> Subscription:
        return self._execute(self.create_request(params, **options))

    def list_request(self, *, customer: Optional[str] = None, mandate: Optional[str] = None,
                     limit: Optional[int] = None, before: Optional[str] = None,
                     after: Optional[str] = None) -> RequestDescriptor:
        query = build_query({"customer": customer, "mandate": mandate, "limit": limit,
                             "before": before, "after": after})
        return RequestDescriptor(method="GET", path_template="/subscriptions", envelope_key=ENVELOPE,
                                 response_type=Subscription, response_shape=ResponseShape.LIST,
                                 query_params=query)

    def list(self, *, direction: Direction = Direction.FORWARD, **filters: Any) -> PageIterator[Subscription]:
        return self._paginate(self.list_request(**filters), direction)

    def get_request(self, identity: str) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path_template="/subscriptions/:identity", envelope_key=ENVELOPE,
                                 response_type=Subscription, path_params={"identity": identity})

    def get(self, identity: str) -> Subscription:
        return self._execute(self.get_request(identity))

    def update_request(self, identity: str, params: Dict[str, Any]) -> RequestDescriptor:
        return RequestDescriptor(method="PUT", path_template="/subscriptions/:identity", envelope_key=ENVELOPE,
                                 response_type=Subscription, path_params={"identity": identity},
                                 body=body_of(params))

    def update(self, identity: str, params: Dict[str, Any]) -> Subscription:
        return self._execute(self.update_request(identity, params))

    def cancel_request(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path_template="/subscriptions/:identity/actions/cancel",
                                 envelope_key=ENVELOPE, request_envelope_key="data", response_type=Subscription,
                                 path_params={"identity": identity}, body=body_of(metadata=metadata))

    def cancel(self, identity: str, *, metadata: Optional[Dict[str, str]] = None) -> Subscription:
        return self._execute(self.cancel_request(identity, metadata=metadata))
