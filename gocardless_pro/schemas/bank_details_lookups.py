"""
schemas/bank_details_lookups.py
--------------------------------

Result of looking up the name and reachability of a bank.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from gocardless_pro.schemas.base import Resource, WireEnum


class AvailableDebitScheme(WireEnum):
    AUTOGIRO = "autogiro"
    BACS = "bacs"
    SEPA_CORE = "sepa_core"
    UNKNOWN = "unknown"


class BankDetailsLookup(Resource):
    available_debit_schemes: List[AvailableDebitScheme] = Field(
        default_factory=list,
        description="Schemes the account is reachable by; empty when it is not reachable.",
    )
    bank_name: Optional[str] = None
    bic: Optional[str] = None
