"""
schemas/customers.py
---------------------

Customer resource.  A customer holds contact details and owns bank
accounts, which in turn own mandates.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from gocardless_pro.schemas.base import Resource


class Customer(Resource):
    id: str
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    company_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    language: Optional[str] = Field(None, description="ISO 639-1 code used for notification emails.")
    created_at: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
