"""Line item schemas."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import ConfigDict, model_validator

from .base import CUSTOM_FIELD_PREFIX, ZohoModel, ZohoRequest
from .custom_field import CustomField

# A number is an absolute amount, a string such as "15%" is a percentage.
Discount = Union[float, str]


class LineItem(ZohoModel):
    """One line of a transaction.

    ``discount`` is only meaningful when the parent transaction uses
    ``discount_type="item_level"``.
    """

    line_item_id: Optional[str] = None
    item_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    sku: Optional[str] = None
    item_order: Optional[int] = None
    rate: Optional[float] = None
    bcy_rate: Optional[float] = None
    quantity: float
    unit: Optional[str] = None
    discount: Optional[Discount] = None
    discount_amount: Optional[float] = None
    tax_id: Optional[str] = None
    tax_name: Optional[str] = None
    tax_type: Optional[str] = None
    tax_percentage: Optional[float] = None
    item_total: Optional[float] = None
    product_type: Optional[str] = None
    hsn_or_sac: Optional[str] = None
    warehouse_id: Optional[str] = None
    warehouse_name: Optional[str] = None
    quantity_invoiced: Optional[float] = None
    quantity_packed: Optional[float] = None
    quantity_shipped: Optional[float] = None
    quantity_cancelled: Optional[float] = None
    is_invoiced: Optional[bool] = None
    item_custom_fields: Optional[List[CustomField]] = None
    tags: Optional[List[dict]] = None


class CreateLineItem(ZohoRequest):
    """Line item as sent on create/update. Only item and quantity are required.

    Every field of ``LineItem`` is accepted, so a fetched line item can be sent
    back unchanged, including its ``cf_`` keys.
    """

    model_config = ConfigDict(extra="allow")

    item_id: str
    quantity: float
    line_item_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    sku: Optional[str] = None
    item_order: Optional[int] = None
    rate: Optional[float] = None
    bcy_rate: Optional[float] = None
    unit: Optional[str] = None
    discount: Optional[Discount] = None
    discount_amount: Optional[float] = None
    tax_id: Optional[str] = None
    tax_name: Optional[str] = None
    tax_type: Optional[str] = None
    tax_percentage: Optional[float] = None
    tax_exemption_id: Optional[str] = None
    item_total: Optional[float] = None
    product_type: Optional[str] = None
    hsn_or_sac: Optional[str] = None
    warehouse_id: Optional[str] = None
    warehouse_name: Optional[str] = None
    quantity_invoiced: Optional[float] = None
    quantity_packed: Optional[float] = None
    quantity_shipped: Optional[float] = None
    quantity_cancelled: Optional[float] = None
    is_invoiced: Optional[bool] = None
    item_custom_fields: Optional[List[CustomField]] = None
    tags: Optional[List[dict]] = None

    @model_validator(mode="after")
    def only_custom_field_extras(self) -> "CreateLineItem":
        unknown = sorted(k for k in self.model_extra or {} if not k.startswith(CUSTOM_FIELD_PREFIX))
        if unknown:
            raise ValueError(f"Unknown line item fields: {', '.join(unknown)}")
        return self
