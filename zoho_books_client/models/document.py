"""Attached document schema."""

from __future__ import annotations

from typing import Optional, Union

from .base import ZohoModel


class Document(ZohoModel):
    """File metadata for a document attached to a transaction."""

    document_id: Optional[str] = None
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[Union[int, str]] = None
    file_size_formatted: Optional[str] = None
    attachment_order: Optional[int] = None
    can_send_in_email: Optional[bool] = None
    can_show_in_portal: Optional[bool] = None
    source: Optional[str] = None
    source_formatted: Optional[str] = None
    uploaded_by: Optional[str] = None
    uploaded_on: Optional[str] = None
