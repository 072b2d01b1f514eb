"""Package schemas."""

from __future__ import annotations

from typing import Optional, Union

from .base import ZohoModel


class PackageShortList(ZohoModel):
    """Package summary as returned inside other entities."""

    package_id: str
    package_number: Optional[str] = None
    date: Optional[str] = None
    status: Optional[str] = None
    detailed_status: Optional[str] = None
    status_message: Optional[str] = None
    shipment_id: Optional[str] = None
    shipment_number: Optional[str] = None
    shipment_status: Optional[str] = None
    carrier: Optional[str] = None
    service: Optional[str] = None
    tracking_number: Optional[str] = None
    shipment_date: Optional[str] = None
    delivery_days: Optional[Union[int, str]] = None
    delivery_guarantee: Optional[bool] = None


class SalesOrderPackage(PackageShortList):
    """A package of a sales order; ``quantity`` is the total items packed."""

    quantity: Optional[float] = None
