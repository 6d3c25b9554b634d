"""
services/bank_details_lookups.py
---------------------------------

Bank details lookup.  The lookup is a POST that creates nothing, so it
carries no idempotency key and is not retried.
"""

from __future__ import annotations

from typing import Optional

from gocardless_pro.core.request import RequestDescriptor
from gocardless_pro.schemas.bank_details_lookups import BankDetailsLookup
from gocardless_pro.services.base import BaseService, body_of

ENVELOPE = "bank_details_lookups"


class BankDetailsLookupService(BaseService):

    def create_request(self, *, country_code: Optional[str] = None, account_number: Optional[str] = None,
                       branch_code: Optional[str] = None, bank_code: Optional[str] = None,
                       iban: Optional[str] = None) -> RequestDescriptor:
        body = body_of(country_code=country_code, account_number=account_number, branch_code=branch_code,
                       bank_code=bank_code, iban=iban)
        return RequestDescriptor(method="POST", path_template="/bank_details_lookups", envelope_key=ENVELOPE,
                                 response_type=BankDetailsLookup, body=body)

    def create(self, **details: Optional[str]) -> BankDetailsLookup:
        return self._execute(self.create_request(**details))
