"""Custom field schema."""

from __future__ import annotations

from typing import Any, Optional

from .base import ZohoModel


class CustomField(ZohoModel):
    """An organization-configured field attached to an entity.

    When sending, either ``customfield_id`` or ``api_name`` (``cf_<name>``)
    identifies the field; ``value`` carries the data.
    """

    customfield_id: Optional[str] = None
    api_name: Optional[str] = None
    label: Optional[str] = None
    value: Any = None
    data_type: Optional[str] = None
    index: Optional[int] = None
    placeholder: Optional[str] = None
    show_on_pdf: Optional[bool] = None
    is_active: Optional[bool] = None
