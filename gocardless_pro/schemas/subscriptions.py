"""
schemas/subscriptions.py
-------------------------

Subscriptions create payments on a schedule.

``interval_unit`` sets the recurrence; ``month`` and ``day_of_month``
pin it for yearly and monthly schedules.  A ``day_of_month`` of ``-1``
means the last day of the month, and charge dates falling on
non-business days roll backwards in that case and forwards otherwise.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from gocardless_pro.schemas.base import Links, Resource, WireEnum


class IntervalUnit(WireEnum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    UNKNOWN = "unknown"


class Month(WireEnum):
    JANUARY = "january"
    FEBRUARY = "february"
    MARCH = "march"
    APRIL = "april"
    MAY = "may"
    JUNE = "june"
    JULY = "july"
    AUGUST = "august"
    SEPTEMBER = "september"
    OCTOBER = "october"
    NOVEMBER = "november"
    DECEMBER = "december"
    UNKNOWN = "unknown"


class SubscriptionStatus(WireEnum):
    ACTIVE = "active"
    FINISHED = "finished"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class SubscriptionLinks(Links):
    mandate: Optional[str] = None


class UpcomingPayment(Resource):
    amount: Optional[int] = None
    charge_date: Optional[str] = None


class Subscription(Resource):
    id: str
    amount: Optional[int] = Field(None, description="Amount in pence or cents.")
    currency: Optional[str] = None
    count: Optional[int] = None
    name: Optional[str] = None
    payment_reference: Optional[str] = None
    status: Optional[SubscriptionStatus] = None
    interval: Optional[int] = None
    interval_unit: Optional[IntervalUnit] = None
    day_of_month: Optional[int] = None
    month: Optional[Month] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    created_at: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    upcoming_payments: List[UpcomingPayment] = Field(default_factory=list)
    links: SubscriptionLinks = Field(default_factory=SubscriptionLinks)
