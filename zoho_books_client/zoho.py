"""Entry point grouping the Zoho Books services by entity."""

from __future__ import annotations

from .services.contact import ContactService
from .services.invoice import InvoiceService
from .services.sales_order import SalesOrderService
from .zoho_client import ZohoApiClient


class Zoho:
    """Usage:

        setup_logging()  # optional; ZOHO_LOG_LEVEL=DEBUG logs every request
        client = await ZohoApiClient.from_env()
        zoho = Zoho(client)
        contact = await zoho.contact.create({"contact_name": "Acme"})

    ``setup_logging`` lives in ``zoho_books_client.utils.logging``. The
    library only emits records; it never configures handlers on import.
    """

    def __init__(self, client: ZohoApiClient) -> None:
        self.client = client
        self.contact = ContactService(client)
        self.sales_order = SalesOrderService(client)
        self.invoice = InvoiceService(client)
