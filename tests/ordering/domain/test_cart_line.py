"""Tests for the CartLine aggregate."""

import pytest
from ordering.cart.events import CartLineAdded, CartLineQuantityChanged
from ordering.cart.line import CartLine, line_key_for
from ordering.errors import InvalidQuantity
from protean.exceptions import ValidationError


def _make_line(quantity=2):
    return CartLine.open(user_id="user-001", product_id="prod-001", quantity=quantity)


class TestOpenLine:
    def test_open_sets_fields(self):
        line = _make_line()
        assert line.user_id == "user-001"
        assert line.product_id == "prod-001"
        assert line.quantity == 2
        assert line.added_at is not None

    def test_line_key_combines_user_and_product(self):
        line = _make_line()
        assert line.line_key == line_key_for("user-001", "prod-001") == "user-001:prod-001"

    def test_open_raises_added_event(self):
        line = _make_line(quantity=3)
        event = next(e for e in line._events if isinstance(e, CartLineAdded))
        assert event.line_id == str(line.id)
        assert event.quantity_added == 3
        assert event.quantity == 3

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_open_with_quantity_below_one_is_rejected(self, quantity):
        with pytest.raises(InvalidQuantity):
            _make_line(quantity=quantity)

    def test_invalid_quantity_is_a_validation_error(self):
        with pytest.raises(ValidationError) as exc:
            _make_line(quantity=0)
        assert "quantity" in exc.value.messages

    def test_line_has_no_price(self):
        line = _make_line()
        assert not hasattr(line, "price")
        assert not hasattr(line, "unit_price")


class TestMerge:
    def test_merge_adds_to_quantity(self):
        line = _make_line(quantity=2)
        line.merge(3)
        assert line.quantity == 5

    def test_merge_raises_added_event_with_running_total(self):
        line = _make_line(quantity=2)
        line._events.clear()
        line.merge(3)
        event = next(e for e in line._events if isinstance(e, CartLineAdded))
        assert event.quantity_added == 3
        assert event.quantity == 5

    def test_merge_rejects_zero(self):
        line = _make_line(quantity=2)
        with pytest.raises(InvalidQuantity):
            line.merge(0)
        assert line.quantity == 2


class TestChangeQuantity:
    def test_change_replaces_quantity(self):
        line = _make_line(quantity=2)
        line.change_quantity(7)
        assert line.quantity == 7

    def test_change_raises_event(self):
        line = _make_line(quantity=2)
        line.change_quantity(4)
        event = next(e for e in line._events if isinstance(e, CartLineQuantityChanged))
        assert event.previous_quantity == 2
        assert event.new_quantity == 4

    def test_change_to_zero_is_rejected_and_quantity_kept(self):
        line = _make_line(quantity=2)
        with pytest.raises(InvalidQuantity):
            line.change_quantity(0)
        assert line.quantity == 2
        assert not any(isinstance(e, CartLineQuantityChanged) for e in line._events)
