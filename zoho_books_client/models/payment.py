"""Payment overview schema."""

from __future__ import annotations

from typing import Optional

from .base import ZohoModel


class PaymentOverview(ZohoModel):
    payment_id: str
    payment_mode: Optional[str] = None
    payment_mode_id: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    offline_created_date_with_time: Optional[str] = None
    description: Optional[str] = None
    reference_number: Optional[str] = None
    account_id: Optional[str] = None
    account_name: Optional[str] = None
    payment_type: Optional[str] = None
