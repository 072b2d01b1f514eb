"""Invoice service."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..models.invoice import CreateInvoice, Invoice, ListInvoice
from ..utils.logging import truncate
from ..zoho_client import ZohoApiClient
from .common import as_request, unwrap, unwrap_list

logger = logging.getLogger("zoho_books_client.services.invoice")


class InvoiceService:
    """Invoices.

    Docs: https://www.zoho.com/books/api/v3/invoices/
    """

    def __init__(self, client: ZohoApiClient) -> None:
        self.client = client

    async def create(self, payload: Union[CreateInvoice, Dict[str, Any]]) -> Invoice:
        body = as_request(payload, CreateInvoice).to_payload()
        logger.debug("Service call: invoice.create(payload=%s)", truncate(str(body)))
        data = await self.client.request("post", "invoices", json=body)
        return unwrap(data, "invoice", Invoice)

    async def list(self, filter: Optional[Dict[str, Any]] = None) -> List[ListInvoice]:
        logger.debug("Service call: invoice.list(filter=%s)", filter)
        data = await self.client.request("get", "invoices", params=filter)
        return unwrap_list(data, "invoices", ListInvoice)

    async def get(self, invoice_id: str) -> Invoice:
        logger.debug("Service call: invoice.get(invoice_id=%s)", invoice_id)
        data = await self.client.request("get", f"invoices/{invoice_id}")
        return unwrap(data, "invoice", Invoice)

    async def create_from_sales_order(self, salesorder_id: str) -> Invoice:
        """Create a draft invoice for everything not yet invoiced on a sales order."""
        logger.debug(
            "Service call: invoice.create_from_sales_order(salesorder_id=%s)", salesorder_id
        )
        data = await self.client.request(
            "post", "invoices/fromsalesorder", params={"salesorder_id": salesorder_id}
        )
        return unwrap(data, "invoice", Invoice)
