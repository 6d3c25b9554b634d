"""
schemas/creditors.py
---------------------

Creditor resource: the party payments are paid out to.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from gocardless_pro.schemas.base import Links, Resource


class CreditorLinks(Links):
    default_eur_payout_account: Optional[str] = None
    default_gbp_payout_account: Optional[str] = None
    logo: Optional[str] = None


class Creditor(Resource):
    id: str
    name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    created_at: Optional[str] = None
    links: CreditorLinks = Field(default_factory=CreditorLinks)
