"""Sales order service."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..models.sales_order import (
    CreateSalesOrder,
    ListSalesOrder,
    SalesOrder,
    UpdateSalesOrder,
)
from ..utils.logging import truncate
from ..zoho_client import ZohoApiClient
from .common import as_request, unwrap, unwrap_list

logger = logging.getLogger("zoho_books_client.services.sales_order")


class SalesOrderService:
    """Sales orders.

    Docs: https://www.zoho.com/books/api/v3/sales-order/
    """

    def __init__(self, client: ZohoApiClient) -> None:
        self.client = client

    async def create(
        self,
        payload: Union[CreateSalesOrder, Dict[str, Any]],
        *,
        ignore_auto_number_generation: bool = True,
    ) -> SalesOrder:
        """Create a sales order via POST /salesorders.

        ``salesorder_number`` is mandatory in the payload, so auto number
        generation is skipped by default.
        """
        body = as_request(payload, CreateSalesOrder).to_payload()
        params = {"ignore_auto_number_generation": str(ignore_auto_number_generation).lower()}
        logger.debug("Service call: sales_order.create(payload=%s)", truncate(str(body)))
        data = await self.client.request("post", "salesorders", json=body, params=params)
        return unwrap(data, "salesorder", SalesOrder)

    async def list(self, filter: Optional[Dict[str, Any]] = None) -> List[ListSalesOrder]:
        """List sales orders. ``filter`` is forwarded as query parameters.

        Examples: ``{"customer_id": "..."}``, ``{"status": "open"}``,
        ``{"salesorder_number": "SO-00001"}``.
        """
        logger.debug("Service call: sales_order.list(filter=%s)", filter)
        data = await self.client.request("get", "salesorders", params=filter)
        return unwrap_list(data, "salesorders", ListSalesOrder)

    async def get(self, salesorder_id: str) -> SalesOrder:
        logger.debug("Service call: sales_order.get(salesorder_id=%s)", salesorder_id)
        data = await self.client.request("get", f"salesorders/{salesorder_id}")
        return unwrap(data, "salesorder", SalesOrder)

    async def update(self, payload: Union[UpdateSalesOrder, Dict[str, Any]]) -> SalesOrder:
        """Update via PUT /salesorders/{salesorder_id}; returns a fresh snapshot."""
        request = as_request(payload, UpdateSalesOrder)
        body = request.to_payload()
        logger.debug("Service call: sales_order.update(payload=%s)", truncate(str(body)))
        data = await self.client.request(
            "put", f"salesorders/{request.salesorder_id}", json=body
        )
        return unwrap(data, "salesorder", SalesOrder)

    async def delete(self, salesorder_id: str) -> None:
        logger.debug("Service call: sales_order.delete(salesorder_id=%s)", salesorder_id)
        await self.client.request("delete", f"salesorders/{salesorder_id}")

    async def confirm(self, salesorder_id: str) -> None:
        """Mark a draft sales order as confirmed."""
        logger.debug("Service call: sales_order.confirm(salesorder_id=%s)", salesorder_id)
        await self.client.request("post", f"salesorders/{salesorder_id}/status/confirmed")

    async def void(self, salesorder_id: str) -> None:
        logger.debug("Service call: sales_order.void(salesorder_id=%s)", salesorder_id)
        await self.client.request("post", f"salesorders/{salesorder_id}/status/void")
