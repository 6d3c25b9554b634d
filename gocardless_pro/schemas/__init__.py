"""
schemas package
---------------

Immutable resource models returned by the API.  Each module mirrors one
resource; enums fall back to ``UNKNOWN`` and foreign keys are plain ids
under ``links``.
"""

from gocardless_pro.schemas.bank_details_lookups import AvailableDebitScheme, BankDetailsLookup
from gocardless_pro.schemas.creditors import Creditor
from gocardless_pro.schemas.customer_bank_accounts import CustomerBankAccount
from gocardless_pro.schemas.customers import Customer
from gocardless_pro.schemas.mandates import Mandate, MandateStatus
from gocardless_pro.schemas.subscriptions import IntervalUnit, Month, Subscription, SubscriptionStatus

__all__ = [
    "AvailableDebitScheme",
    "BankDetailsLookup",
    "Creditor",
    "Customer",
    "CustomerBankAccount",
    "IntervalUnit",
    "Mandate",
    "MandateStatus",
    "Month",
    "Subscription",
    "SubscriptionStatus",
]
