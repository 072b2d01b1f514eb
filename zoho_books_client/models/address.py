"""Address schemas."""

from __future__ import annotations

from typing import Optional

from .base import ZohoModel


class AddressWithoutAddressId(ZohoModel):
    """Address snapshot as embedded in transactions (sales orders, invoices)."""

    attention: Optional[str] = None
    address: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    state_code: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None


class Address(AddressWithoutAddressId):
    """Address stored on a contact, identified by ``address_id``."""

    address_id: Optional[str] = None
