"""Tests for order finalization."""

import re
from decimal import Decimal
from typing import NamedTuple

import pytest
from catalogue.product.snapshot import CatalogSnapshot, ProductSnapshot
from ordering.checkout.finalizer import (
    ContactInfo,
    DeliveryAddress,
    OrderConfirmation,
    finalize,
    missing_fields,
    new_reference,
)
from ordering.errors import EmptyOrder, InsufficientStock, MissingFields
from ordering.pricing.engine import price
from ordering.pricing.shipping import ShippingMethod
from protean.exceptions import ValidationError


class Line(NamedTuple):
    id: str
    product_id: str
    quantity: int


CONTACT = ContactInfo(email="asha@example.com", first_name="Asha", last_name="Rao")
ADDRESS = DeliveryAddress(address_line="12 MG Road", city="Pune", country="India", phone="9800000000")


def _priced(quantity=2, stock=5, shipping="cod", lines=None):
    catalog = CatalogSnapshot(
        {
            "p1": ProductSnapshot(
                product_id="p1",
                name="Cotton Kurta",
                unit_price=Decimal("100"),
                discount_percent=Decimal("10"),
                available_quantity=stock,
            )
        }
    )
    if lines is None:
        lines = [Line("l1", "p1", quantity)]
    return price(lines, catalog, promotion="SAVE10", shipping=shipping)


class TestMissingFields:
    def test_complete_details_have_nothing_missing(self):
        assert missing_fields(CONTACT, ADDRESS) == []

    def test_all_blank_fields_are_listed_in_form_order(self):
        missing = missing_fields(ContactInfo(), DeliveryAddress())
        assert missing == ["email", "first_name", "last_name", "address_line", "phone", "city", "country"]

    def test_whitespace_counts_as_blank(self):
        contact = CONTACT._replace(first_name="   ")
        address = ADDRESS._replace(city="\t")
        assert missing_fields(contact, address) == ["first_name", "city"]

    def test_postal_code_is_optional(self):
        assert missing_fields(CONTACT, ADDRESS._replace(postal_code=None)) == []


class TestFinalize:
    def test_confirms_a_complete_order(self):
        priced = _priced()

        confirmation = finalize(CONTACT, ADDRESS, "cod", priced, user_id="user-001")

        assert isinstance(confirmation, OrderConfirmation)
        assert confirmation.user_id == "user-001"
        assert confirmation.email == "asha@example.com"
        assert confirmation.shipping_method is ShippingMethod.CASH_ON_DELIVERY
        assert confirmation.priced_order == priced
        assert confirmation.total == Decimal("462.00")
        assert confirmation.placed_at is not None

    def test_reports_every_missing_field_at_once(self):
        contact = ContactInfo(email="", first_name="Asha", last_name=None)
        address = ADDRESS._replace(phone=" ", country=None)

        with pytest.raises(MissingFields) as exc:
            finalize(contact, address, "cod", _priced())

        assert exc.value.fields == ["email", "last_name", "phone", "country"]
        assert set(exc.value.messages) == {"email", "last_name", "phone", "country"}

    def test_missing_fields_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            finalize(ContactInfo(), ADDRESS, "cod", _priced())

    def test_empty_order_is_rejected(self):
        with pytest.raises(EmptyOrder):
            finalize(CONTACT, ADDRESS, "cod", _priced(lines=[]))

    def test_order_of_only_excluded_lines_is_empty(self):
        with pytest.raises(EmptyOrder):
            finalize(CONTACT, ADDRESS, "cod", _priced(lines=[Line("l9", "gone", 1)]))

    def test_quantity_above_stock_is_rejected(self):
        with pytest.raises(InsufficientStock) as exc:
            finalize(CONTACT, ADDRESS, "cod", _priced(quantity=6, stock=5))

        assert exc.value.line_ids == ["l1"]

    def test_quantity_equal_to_stock_is_accepted(self):
        confirmation = finalize(CONTACT, ADDRESS, "cod", _priced(quantity=5, stock=5))
        assert confirmation.priced_order.lines[0].quantity == 5

    def test_shipping_must_match_the_quote(self):
        with pytest.raises(ValidationError) as exc:
            finalize(CONTACT, ADDRESS, "free", _priced(shipping="cod"))

        assert "shipping" in exc.value.messages

    def test_optional_flags_do_not_affect_confirmation(self):
        contact = CONTACT._replace(email_offers=True)
        address = ADDRESS._replace(billing_same_as_shipping=False, postal_code="411001")

        confirmation = finalize(contact, address, ShippingMethod.CASH_ON_DELIVERY, _priced())

        assert confirmation.total == Decimal("462.00")


class TestReference:
    def test_reference_format(self):
        assert re.fullmatch(r"ORD-[0-9A-F]{10}", new_reference())

    def test_references_are_unique(self):
        assert len({new_reference() for _ in range(50)}) == 50
