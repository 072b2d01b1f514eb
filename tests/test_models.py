"""Tests for the entity schemas and their create/update views."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from zoho_books_client.models.base import ZohoModel, ZohoRequest
from zoho_books_client.models.contact import Contact, CreateContact, UpdateContact
from zoho_books_client.models.invoice import CreateInvoice, Invoice, ListInvoice
from zoho_books_client.models.line_item import CreateLineItem, LineItem
from zoho_books_client.models.sales_order import (
    CreateSalesOrder,
    ListSalesOrder,
    SalesOrder,
    UpdateSalesOrder,
)

from tests.fixtures.contacts import CONTACT_SINGLE
from tests.fixtures.invoices import INVOICE_LIST_RESPONSE, INVOICE_SINGLE
from tests.fixtures.sales_orders import (
    SALES_ORDER_ITEM_LEVEL,
    SALES_ORDER_LIST_RESPONSE,
    SALES_ORDER_SINGLE,
)


def _required(model) -> set[str]:
    return {name for name, field in model.model_fields.items() if field.is_required()}


# ---------------------------------------------------------------------------
# Create/update views
# ---------------------------------------------------------------------------


class TestRequestViews:
    """Required, optional and excluded fields of the request views."""

    @pytest.mark.parametrize(
        "create_view, entity",
        [
            (CreateSalesOrder, SalesOrder),
            (UpdateSalesOrder, SalesOrder),
            (CreateContact, Contact),
            (UpdateContact, Contact),
            (CreateInvoice, Invoice),
            (CreateLineItem, LineItem),
        ],
    )
    def test_required_fields_exist_on_entity(self, create_view, entity):
        assert _required(create_view) <= set(entity.model_fields)

    def test_create_sales_order_required_fields(self):
        assert _required(CreateSalesOrder) == {"salesorder_number", "customer_id", "line_items"}

    def test_update_sales_order_required_fields(self):
        assert _required(UpdateSalesOrder) == {
            "salesorder_id", "salesorder_number", "customer_id", "line_items",
        }

    def test_update_sales_order_excludes_documents_and_template(self):
        fields = set(UpdateSalesOrder.model_fields)
        assert "documents" not in fields
        assert "template_id" not in fields
        assert set(CreateSalesOrder.model_fields) - {"documents", "template_id"} <= fields | {"salesorder_id"}

    def test_create_sales_order_accepts_address_id_aliases(self):
        order = CreateSalesOrder(
            salesorder_number="SO-1",
            customer_id="c1",
            line_items=[{"item_id": "i1", "quantity": 1}],
            billing_address_id="a1",
            shipping_address_id="a2",
        )
        payload = order.to_payload()
        assert payload["billing_address_id"] == "a1"
        assert payload["shipping_address_id"] == "a2"

    def test_create_line_item_requires_item_and_quantity(self):
        assert _required(CreateLineItem) == {"item_id", "quantity"}
        with pytest.raises(ValidationError):
            CreateLineItem.model_validate({"item_id": "i1"})

    def test_create_contact_requires_contact_name(self):
        assert _required(CreateContact) == {"contact_name"}

    def test_update_contact_requires_contact_id(self):
        assert _required(UpdateContact) == {"contact_name", "contact_id"}

    def test_payload_omits_unset_fields(self):
        payload = CreateContact(contact_name="Acme").to_payload()
        assert payload == {"contact_name": "Acme"}

    def test_request_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            CreateContact.model_validate({"contact_name": "Acme", "contactname": "typo"})

    def test_models_declare_no_aliases(self):
        for model in (ZohoModel, ZohoRequest):
            assert "populate_by_name" not in model.model_config

    def test_minimal_create_sales_order_payload(self):
        payload = CreateSalesOrder.model_validate({
            "salesorder_number": "SO-1",
            "customer_id": "c1",
            "line_items": [{"item_id": "i1", "quantity": 2}],
        }).to_payload()
        assert payload == {
            "salesorder_number": "SO-1",
            "customer_id": "c1",
            "line_items": [{"item_id": "i1", "quantity": 2.0}],
        }


# ---------------------------------------------------------------------------
# Custom fields and unknown keys
# ---------------------------------------------------------------------------


class TestExtensions:
    """Unknown vendor keys are kept in a side-map and never fail parsing."""

    def test_sales_order_unknown_keys_parse(self):
        order = SalesOrder.model_validate({**SALES_ORDER_SINGLE, "cf_new_field": 42, "some_new_key": "x"})
        assert order.custom_field_values == {"cf_channel": "webshop", "cf_new_field": 42}
        assert order.extensions["some_new_key"] == "x"

    def test_typed_fields_not_in_extensions(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert "salesorder_id" not in order.extensions
        assert order.salesorder_id == "460000000039129"

    def test_typed_custom_fields_list(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.custom_fields[0].api_name == "cf_channel"
        assert order.custom_fields[0].value == "webshop"

    def test_line_item_custom_keys(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.line_items[0].custom_field_values == {"cf_colour": "blue"}

    def test_list_sales_order_custom_keys(self):
        row = ListSalesOrder.model_validate(SALES_ORDER_LIST_RESPONSE["salesorders"][0])
        assert row.email == "test@example.com"
        assert row.custom_field_values == {
            "cf_channel": "webshop",
            "cf_channel_unformatted": "webshop",
        }

    def test_contact_custom_keys(self):
        contact = Contact.model_validate(CONTACT_SINGLE)
        assert contact.custom_field_values == {"cf_customer_tier": "gold"}

    def test_list_invoice_custom_keys(self):
        row = ListInvoice.model_validate(INVOICE_LIST_RESPONSE["invoices"][0])
        assert row.custom_field_values == {"cf_channel": "webshop"}


# ---------------------------------------------------------------------------
# Sales order shape
# ---------------------------------------------------------------------------


class TestSalesOrderShape:
    def test_nested_structures(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.taxes[0].tax_amount == 17.1
        assert order.packages[0].quantity == 2
        assert order.invoices[0].invoice_number == "INV-00001"
        assert order.shipping_charges.item_total == 5.0
        assert order.billing_address.city == "Berlin"

    def test_shipping_charge_tax_percentage_empty_string(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.shipping_charge_tax_percentage == ""

    def test_shipping_charge_tax_percentage_number(self):
        order = SalesOrder.model_validate({**SALES_ORDER_SINGLE, "shipping_charge_tax_percentage": 19})
        assert order.shipping_charge_tax_percentage == 19

    def test_address_ids_independent_of_snapshots(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.billing_address is not None
        assert order.billing_address_id is None

        only_id = {k: v for k, v in SALES_ORDER_SINGLE.items() if k != "shipping_address"}
        order = SalesOrder.model_validate({**only_id, "shipping_address_id": "addr-1"})
        assert order.shipping_address is None
        assert order.shipping_address_id == "addr-1"

    def test_discount_keeps_percentage_string(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.discount == "10.00%"

    def test_discount_numeric(self):
        order = SalesOrder.model_validate({**SALES_ORDER_SINGLE, "discount": 12.5})
        assert order.discount == 12.5

    def test_invalid_discount_type_rejected(self):
        with pytest.raises(ValidationError):
            SalesOrder.model_validate({**SALES_ORDER_SINGLE, "discount_type": "order_level"})

    def test_invoice_parses(self):
        invoice = Invoice.model_validate(INVOICE_SINGLE)
        assert invoice.salesorder_id == "460000000039129"
        assert invoice.line_items[0].item_total == 100.0


# ---------------------------------------------------------------------------
# Discount modes
# ---------------------------------------------------------------------------


class TestDiscountModes:
    """entity_level and item_level discounts are mutually exclusive readings."""

    def test_entity_level_uses_order_discount_only(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        assert order.discount_type == "entity_level"
        assert order.order_discount == "10.00%"
        assert order.line_item_discounts() == []

    def test_item_level_uses_line_discounts_only(self):
        order = SalesOrder.model_validate(SALES_ORDER_ITEM_LEVEL)
        assert order.discount_type == "item_level"
        assert order.order_discount is None
        assert order.line_item_discounts() == [
            ("460000000039201", "15%"),
            ("460000000039202", 5.0),
        ]

    @pytest.mark.parametrize("fixture", [SALES_ORDER_SINGLE, SALES_ORDER_ITEM_LEVEL])
    def test_never_both(self, fixture):
        order = SalesOrder.model_validate(fixture)
        assert not (order.order_discount is not None and order.line_item_discounts())

    def test_missing_discount_type_reads_order_level(self):
        data = {k: v for k, v in SALES_ORDER_SINGLE.items() if k != "discount_type"}
        order = SalesOrder.model_validate(data)
        assert order.order_discount == "10.00%"
        assert order.line_item_discounts() == []


# ---------------------------------------------------------------------------
# Vendor values on declared keys
# ---------------------------------------------------------------------------


class TestVendorValues:
    """Declared keys with values outside the documented set still parse."""

    @pytest.mark.parametrize(
        "gst_treatment",
        ["business_sez", "deemed_export", "tax_deductor", "sez_developer", ""],
    )
    def test_sales_order_gst_treatment(self, gst_treatment):
        order = SalesOrder.model_validate({**SALES_ORDER_SINGLE, "gst_treatment": gst_treatment})
        assert order.gst_treatment == gst_treatment

    @pytest.mark.parametrize("sub_type", ["", "business_sez"])
    def test_contact_customer_sub_type(self, sub_type):
        contact = Contact.model_validate({
            **CONTACT_SINGLE,
            "contact_type": "vendor",
            "customer_sub_type": sub_type,
        })
        assert contact.customer_sub_type == sub_type

    def test_contact_unlisted_contact_type(self):
        contact = Contact.model_validate({**CONTACT_SINGLE, "contact_type": "customer_and_vendor"})
        assert contact.contact_type == "customer_and_vendor"

    def test_sales_order_blank_numbers_and_flags(self):
        order = SalesOrder.model_validate({
            **SALES_ORDER_SINGLE,
            "exchange_rate": "",
            "price_precision": "",
            "is_emailed": "",
            "discount_type": "",
            "pricebook_id": "",
        })
        assert order.exchange_rate is None
        assert order.price_precision is None
        assert order.is_emailed is None
        assert order.discount_type is None
        assert order.pricebook_id == ""

    def test_blank_discount_type_reads_order_level(self):
        order = SalesOrder.model_validate({**SALES_ORDER_SINGLE, "discount_type": ""})
        assert order.order_discount == "10.00%"
        assert order.line_item_discounts() == []

    def test_contact_blank_payment_terms(self):
        contact = Contact.model_validate({**CONTACT_SINGLE, "payment_terms": ""})
        assert contact.payment_terms is None

    def test_list_sales_order_blank_fields(self):
        row = ListSalesOrder.model_validate({
            **SALES_ORDER_LIST_RESPONSE["salesorders"][0],
            "total_invoiced_amount": "",
            "quantity": "",
            "is_emailed": "",
            "delivery_date": "",
        })
        assert row.total_invoiced_amount is None
        assert row.quantity is None
        assert row.is_emailed is None
        assert row.delivery_date == ""

    def test_non_blank_garbage_still_rejected(self):
        with pytest.raises(ValidationError):
            SalesOrder.model_validate({**SALES_ORDER_SINGLE, "exchange_rate": "abc"})


# ---------------------------------------------------------------------------
# Line items sent back to Zoho
# ---------------------------------------------------------------------------


class TestLineItemRoundTrip:
    """A fetched order's line items are accepted by the update view."""

    def test_create_line_item_covers_every_line_item_field(self):
        assert set(LineItem.model_fields) <= set(CreateLineItem.model_fields)

    def test_fetched_line_items_validate_into_update(self):
        order = SalesOrder.model_validate(SALES_ORDER_SINGLE)
        update = UpdateSalesOrder.model_validate({
            "salesorder_id": order.salesorder_id,
            "salesorder_number": order.salesorder_number,
            "customer_id": order.customer_id,
            "line_items": [li.model_dump(exclude_none=True) for li in order.line_items],
        })

        line = update.to_payload()["line_items"][0]
        assert line["sku"] == "WIDGET-001"
        assert line["tax_name"] == "VAT"
        assert line["item_total"] == 100.0
        assert line["cf_colour"] == "blue"

    def test_unknown_non_custom_line_item_key_rejected(self):
        with pytest.raises(ValidationError, match="itemid"):
            CreateLineItem.model_validate({"item_id": "i1", "quantity": 1, "itemid": "typo"})
