"""
schemas/customer_bank_accounts.py
----------------------------------

Bank accounts belonging to a customer.  Account numbers never come back
from the API; only the last two digits are exposed.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from gocardless_pro.schemas.base import Links, Resource


class CustomerBankAccountLinks(Links):
    customer: Optional[str] = None


class CustomerBankAccount(Resource):
    id: str
    account_holder_name: Optional[str] = None
    account_number_ending: Optional[str] = None
    bank_name: Optional[str] = None
    country_code: Optional[str] = None
    currency: Optional[str] = None
    enabled: Optional[bool] = None
    created_at: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    links: CustomerBankAccountLinks = Field(default_factory=CustomerBankAccountLinks)
