"""
Per-resource services.  Each one turns method calls into request
descriptors and hands them to the shared executor.
"""

from gocardless_pro.services.bank_details_lookups import BankDetailsLookupService
from gocardless_pro.services.creditors import CreditorService
from gocardless_pro.services.customer_bank_accounts import CustomerBankAccountService
from gocardless_pro.services.customers import CustomerService
from gocardless_pro.services.mandates import MandateService
from gocardless_pro.services.subscriptions import SubscriptionService

__all__ = [
    "BankDetailsLookupService",
    "CreditorService",
    "CustomerBankAccountService",
    "CustomerService",
    "MandateService",
    "SubscriptionService",
]
