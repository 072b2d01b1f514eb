"""Invoice schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from .address import AddressWithoutAddressId
from .base import ZohoModel, ZohoRequest
from .custom_field import CustomField
from .line_item import CreateLineItem, Discount, LineItem


class SalesOrderInvoice(ZohoModel):
    """The invoice projection embedded in a sales order."""

    invoice_id: str
    invoice_number: Optional[str] = None
    reference_number: Optional[str] = None
    status: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    total: Optional[float] = None
    balance: Optional[float] = None


class Invoice(SalesOrderInvoice):
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    currency_id: Optional[str] = None
    currency_code: Optional[str] = None
    exchange_rate: Optional[float] = None
    discount: Optional[Discount] = None
    discount_type: Optional[Literal["entity_level", "item_level"]] = None
    is_discount_before_tax: Optional[bool] = None
    line_items: List[LineItem] = []
    sub_total: Optional[float] = None
    tax_total: Optional[float] = None
    payment_made: Optional[float] = None
    salesorder_id: Optional[str] = None
    salesorder_number: Optional[str] = None
    billing_address: Optional[AddressWithoutAddressId] = None
    shipping_address: Optional[AddressWithoutAddressId] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    custom_fields: List[CustomField] = []
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class ListInvoice(ZohoModel):
    """Row returned by GET /invoices."""

    invoice_id: str
    invoice_number: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    reference_number: Optional[str] = None
    status: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    currency_code: Optional[str] = None
    total: Optional[float] = None
    balance: Optional[float] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class CreateInvoice(ZohoRequest):
    customer_id: str
    line_items: List[CreateLineItem]
    invoice_number: Optional[str] = None
    reference_number: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    payment_terms: Optional[int] = None
    currency_id: Optional[str] = None
    exchange_rate: Optional[float] = None
    discount: Optional[Discount] = None
    discount_type: Optional[Literal["entity_level", "item_level"]] = None
    is_discount_before_tax: Optional[bool] = None
    is_inclusive_tax: Optional[bool] = None
    salesperson_name: Optional[str] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    shipping_charge: Optional[float] = None
    adjustment: Optional[float] = None
    adjustment_description: Optional[str] = None
    template_id: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None
