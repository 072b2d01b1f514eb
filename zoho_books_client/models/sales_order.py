"""Sales order schemas.

A sales order is a financial document that confirms an impending sale. It
details the exact quantity, price and delivery details of the products or
services being sold.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union

from .address import AddressWithoutAddressId
from .base import ZohoModel, ZohoRequest
from .custom_field import CustomField
from .document import Document
from .invoice import SalesOrderInvoice
from .line_item import CreateLineItem, Discount, LineItem
from .package import SalesOrderPackage
from .payment import PaymentOverview

DiscountType = Literal["entity_level", "item_level"]
GstTreatment = Literal[
    "business_gst",
    "business_none",
    "business_sez",
    "deemed_export",
    "tax_deductor",
    "sez_developer",
    "overseas",
    "consumer",
]


class Tax(ZohoModel):
    tax_name: str
    tax_amount: float


class ShippingCharges(ZohoModel):
    """Shipping charges of a sales order grouped in one object."""

    description: Optional[str] = None
    bcy_rate: Optional[float] = None
    # gross rate
    rate: Optional[float] = None
    tax_id: Optional[str] = None
    tax_name: Optional[str] = None
    tax_type: Optional[str] = None
    tax_percentage: Optional[float] = None
    tax_total_fcy: Optional[float] = None
    # net total
    item_total: Optional[float] = None


class SalesOrder(ZohoModel):
    """Full sales order as returned by GET/POST/PUT /salesorders.

    ``billing_address_id``/``shipping_address_id`` are not always returned by
    Zoho even when the address snapshots are present.
    """

    salesorder_id: str
    salesorder_number: str
    customer_id: str
    customer_name: Optional[str] = None
    company_name: Optional[str] = None
    ignore_auto_number_generation: Optional[bool] = None
    date: Optional[str] = None
    status: Optional[str] = None
    shipment_date: Optional[str] = None
    reference_number: Optional[str] = None
    contact_persons: List[str] = []

    currency_id: Optional[str] = None
    currency_code: Optional[str] = None
    currency_symbol: Optional[str] = None
    exchange_rate: Optional[float] = None

    discount_amount: Optional[float] = None
    discount: Optional[Discount] = None
    is_discount_before_tax: Optional[bool] = None
    discount_type: Optional[DiscountType] = None

    estimate_id: Optional[str] = None
    delivery_method: Optional[str] = None
    delivery_method_id: Optional[str] = None

    line_items: List[LineItem] = []
    shipping_charge: Optional[float] = None
    shipping_charges: Optional[ShippingCharges] = None
    adjustment: Optional[float] = None
    adjustment_description: Optional[str] = None
    sub_total: Optional[float] = None
    tax_total: Optional[float] = None
    total: Optional[float] = None
    taxes: List[Tax] = []
    price_precision: Optional[int] = None
    pricebook_id: Optional[Union[str, int]] = None
    is_emailed: Optional[bool] = None

    packages: List[SalesOrderPackage] = []
    invoices: List[SalesOrderInvoice] = []
    payments: List[PaymentOverview] = []

    billing_address: Optional[AddressWithoutAddressId] = None
    shipping_address: Optional[AddressWithoutAddressId] = None
    billing_address_id: Optional[str] = None
    shipping_address_id: Optional[str] = None

    notes: Optional[str] = None
    terms: Optional[str] = None
    template_id: Optional[str] = None
    template_name: Optional[str] = None
    template_type: Optional[str] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None
    attachment_name: Optional[str] = None
    can_send_in_mail: Optional[bool] = None
    salesperson_id: Optional[str] = None
    salesperson_name: Optional[str] = None
    documents: List[Document] = []

    # India edition only
    is_pre_gst: Optional[bool] = None
    gst_no: Optional[str] = None
    # business_gst, business_none, overseas, consumer, business_sez, deemed_export,
    # tax_deductor, sez_developer; newer editions add more
    gst_treatment: Optional[str] = None
    place_of_supply: Optional[str] = None

    # Undocumented. The percentage is "" when no shipping tax is set.
    shipping_charge_tax_id: Optional[str] = None
    shipping_charge_tax_percentage: Optional[Union[float, Literal[""]]] = None

    custom_fields: List[CustomField] = []

    @property
    def order_discount(self) -> Optional[Discount]:
        """The order-level discount, or None when discounts live on the lines."""
        if self.discount_type == "item_level":
            return None
        return self.discount

    def line_item_discounts(self) -> List[Tuple[Optional[str], Optional[Discount]]]:
        """(line_item_id, discount) pairs, empty unless discounts are per item."""
        if self.discount_type != "item_level":
            return []
        return [(li.line_item_id, li.discount) for li in self.line_items]


class ListSalesOrder(ZohoModel):
    """Row returned by GET /salesorders. Custom fields arrive as ``cf_`` keys."""

    salesorder_id: str
    customer_name: Optional[str] = None
    customer_id: Optional[str] = None
    delivery_date: Optional[str] = None
    company_name: Optional[str] = None
    salesorder_number: Optional[str] = None
    reference_number: Optional[str] = None
    date: Optional[str] = None
    shipment_date: Optional[str] = None
    due_by_days: Optional[Union[int, str]] = None
    due_in_days: Optional[Union[int, str]] = None
    currency_code: Optional[str] = None
    total: Optional[float] = None
    total_invoiced_amount: Optional[float] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None
    is_emailed: Optional[bool] = None
    quantity: Optional[float] = None
    order_status: Optional[str] = None
    invoiced_status: Optional[str] = None
    paid_status: Optional[str] = None
    shipped_status: Optional[str] = None
    status: Optional[str] = None
    is_drop_shipment: Optional[bool] = None
    salesperson_name: Optional[str] = None
    has_attachment: Optional[bool] = None
    # email of the main contact person
    email: Optional[str] = None


class CreateSalesOrder(ZohoRequest):
    """Payload for POST /salesorders.

    ``billing_address_id``/``shipping_address_id`` select an address stored on
    the contact; the contact's defaults are used when they are omitted.
    """

    salesorder_number: str
    customer_id: str
    line_items: List[CreateLineItem]

    adjustment_description: Optional[str] = None
    adjustment: Optional[float] = None
    contact_persons: Optional[List[str]] = None
    date: Optional[str] = None
    delivery_method: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    discount: Optional[Discount] = None
    documents: Optional[List[Document]] = None
    exchange_rate: Optional[float] = None
    gst_no: Optional[str] = None
    gst_treatment: Optional[GstTreatment] = None
    is_discount_before_tax: Optional[bool] = None
    notes: Optional[str] = None
    place_of_supply: Optional[str] = None
    pricebook_id: Optional[Union[str, int]] = None
    reference_number: Optional[str] = None
    salesorder_id: Optional[str] = None
    salesperson_name: Optional[str] = None
    shipment_date: Optional[str] = None
    shipping_charge_tax_id: Optional[str] = None
    shipping_charge: Optional[float] = None
    template_id: Optional[str] = None
    terms: Optional[str] = None

    custom_fields: Optional[List[CustomField]] = None
    is_inclusive_tax: Optional[bool] = None
    billing_address_id: Optional[str] = None
    shipping_address_id: Optional[str] = None


class UpdateSalesOrder(ZohoRequest):
    """Payload for PUT /salesorders/{salesorder_id}.

    Same as the create payload without ``documents`` and ``template_id``, and
    with a mandatory ``salesorder_id``.
    """

    salesorder_id: str
    salesorder_number: str
    customer_id: str
    line_items: List[CreateLineItem]

    adjustment_description: Optional[str] = None
    adjustment: Optional[float] = None
    contact_persons: Optional[List[str]] = None
    date: Optional[str] = None
    delivery_method: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    discount: Optional[Discount] = None
    exchange_rate: Optional[float] = None
    gst_no: Optional[str] = None
    gst_treatment: Optional[GstTreatment] = None
    is_discount_before_tax: Optional[bool] = None
    notes: Optional[str] = None
    place_of_supply: Optional[str] = None
    pricebook_id: Optional[Union[str, int]] = None
    reference_number: Optional[str] = None
    salesperson_name: Optional[str] = None
    shipment_date: Optional[str] = None
    shipping_charge_tax_id: Optional[str] = None
    shipping_charge: Optional[float] = None
    terms: Optional[str] = None

    custom_fields: Optional[List[CustomField]] = None
    is_inclusive_tax: Optional[bool] = None
    billing_address_id: Optional[str] = None
    shipping_address_id: Optional[str] = None
