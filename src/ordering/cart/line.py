"""CartLine aggregate: one product a user has put in their bag.

A user holds at most one line per product. ``line_key`` carries that pair and
is unique at the storage layer, so two concurrent first adds cannot both
create a line. Lines never store a price; carts are priced from a fresh
catalogue snapshot.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, String

from ordering.cart.events import CartLineAdded, CartLineQuantityChanged
from ordering.domain import ordering
from ordering.errors import InvalidQuantity


def line_key_for(user_id, product_id):
    return f"{user_id}:{product_id}"


def _check_quantity(quantity):
    if quantity is None or quantity < 1:
        raise InvalidQuantity(quantity)


@ordering.aggregate
class CartLine:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    line_key = String(required=True, max_length=255, unique=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, user_id, product_id, quantity):
        """Start a new line for a product the user has not added before."""
        _check_quantity(quantity)

        now = datetime.now(UTC)
        line = cls(
            user_id=user_id,
            product_id=product_id,
            line_key=line_key_for(user_id, product_id),
            quantity=quantity,
            added_at=now,
            updated_at=now,
        )
        line.raise_(
            CartLineAdded(
                line_id=str(line.id),
                user_id=str(user_id),
                product_id=str(product_id),
                quantity_added=quantity,
                quantity=quantity,
            )
        )
        return line

    # -------------------------------------------------------------------
    # Quantity management
    # -------------------------------------------------------------------
    def merge(self, quantity):
        """Add ``quantity`` more units to this line."""
        _check_quantity(quantity)

        self.quantity += quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineAdded(
                line_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(self.product_id),
                quantity_added=quantity,
                quantity=self.quantity,
            )
        )

    def change_quantity(self, quantity):
        """Replace the quantity. Lines are removed explicitly, never by zeroing."""
        _check_quantity(quantity)

        previous_quantity = self.quantity
        self.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineQuantityChanged(
                line_id=str(self.id),
                user_id=str(self.user_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
