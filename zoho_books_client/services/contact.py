"""Contact service."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..models.contact import Contact, CreateContact, UpdateContact
from ..utils.logging import truncate
from ..zoho_client import ZohoApiClient
from .common import as_request, unwrap, unwrap_list

logger = logging.getLogger("zoho_books_client.services.contact")


class ContactService:
    """Customers and vendors.

    Docs: https://www.zoho.com/books/api/v3/contacts/
    """

    def __init__(self, client: ZohoApiClient) -> None:
        self.client = client

    async def create(self, payload: Union[CreateContact, Dict[str, Any]]) -> Contact:
        """Create a contact via POST /contacts and return the stored contact."""
        body = as_request(payload, CreateContact).to_payload()
        logger.debug("Service call: contact.create(payload=%s)", truncate(str(body)))
        data = await self.client.request("post", "contacts", json=body)
        return unwrap(data, "contact", Contact)

    async def list(self, filter: Optional[Dict[str, Any]] = None) -> List[Contact]:
        """List contacts. ``filter`` is forwarded as query parameters.

        Examples: ``{"contact_type": "customer"}``, ``{"email": "a@b.c"}``,
        ``{"search_text": "Acme"}``.
        """
        logger.debug("Service call: contact.list(filter=%s)", filter)
        data = await self.client.request("get", "contacts", params=filter)
        return unwrap_list(data, "contacts", Contact)

    async def get(self, contact_id: str) -> Contact:
        logger.debug("Service call: contact.get(contact_id=%s)", contact_id)
        data = await self.client.request("get", f"contacts/{contact_id}")
        return unwrap(data, "contact", Contact)

    async def update(self, payload: Union[UpdateContact, Dict[str, Any]]) -> Contact:
        """Update via PUT /contacts/{contact_id}; returns a fresh snapshot."""
        request = as_request(payload, UpdateContact)
        body = request.to_payload()
        logger.debug("Service call: contact.update(payload=%s)", truncate(str(body)))
        data = await self.client.request("put", f"contacts/{request.contact_id}", json=body)
        return unwrap(data, "contact", Contact)

    async def delete(self, contact_id: str) -> None:
        logger.debug("Service call: contact.delete(contact_id=%s)", contact_id)
        await self.client.request("delete", f"contacts/{contact_id}")
