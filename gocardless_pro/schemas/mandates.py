"""
schemas/mandates.py
--------------------

Mandate resource: the customer's authorisation to be debited.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from gocardless_pro.schemas.base import Links, Resource, WireEnum


class MandateStatus(WireEnum):
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    ACTIVE = "active"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    UNKNOWN = "unknown"


class MandateLinks(Links):
    creditor: Optional[str] = None
    customer_bank_account: Optional[str] = None


class Mandate(Resource):
    id: str
    status: Optional[MandateStatus] = None
    reference: Optional[str] = None
    scheme: Optional[str] = None
    created_at: Optional[str] = None
    next_possible_charge_date: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    links: MandateLinks = Field(default_factory=MandateLinks)
