"""Contact schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from .address import Address, AddressWithoutAddressId
from .base import ZohoModel, ZohoRequest
from .custom_field import CustomField

ContactType = Literal["customer", "vendor"]
CustomerSubType = Literal["business", "individual"]


class ContactPerson(ZohoModel):
    contact_person_id: Optional[str] = None
    salutation: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    designation: Optional[str] = None
    department: Optional[str] = None
    is_primary_contact: Optional[bool] = None
    enable_portal: Optional[bool] = None


class Contact(ZohoModel):
    """A customer or vendor of the organization."""

    contact_id: str
    contact_name: str
    company_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    website: Optional[str] = None
    # customer or vendor
    contact_type: Optional[str] = None
    # business or individual; empty for some vendors
    customer_sub_type: Optional[str] = None
    status: Optional[str] = None
    currency_id: Optional[str] = None
    currency_code: Optional[str] = None
    payment_terms: Optional[int] = None
    payment_terms_label: Optional[str] = None
    language_code: Optional[str] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    contact_persons: List[ContactPerson] = []
    custom_fields: List[CustomField] = []
    notes: Optional[str] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class CreateContact(ZohoRequest):
    """Payload for POST /contacts. Only ``contact_name`` is required."""

    contact_name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    website: Optional[str] = None
    contact_type: Optional[ContactType] = None
    customer_sub_type: Optional[CustomerSubType] = None
    currency_id: Optional[str] = None
    payment_terms: Optional[int] = None
    payment_terms_label: Optional[str] = None
    language_code: Optional[str] = None
    billing_address: Optional[AddressWithoutAddressId] = None
    shipping_address: Optional[AddressWithoutAddressId] = None
    contact_persons: Optional[List[ContactPerson]] = None
    custom_fields: Optional[List[CustomField]] = None
    notes: Optional[str] = None


class UpdateContact(CreateContact):
    """Payload for PUT /contacts/{contact_id}."""

    contact_id: str
