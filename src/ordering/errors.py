"""Errors raised by the ordering context.

Errors a shopper can correct subclass Protean's ValidationError so they carry
a ``messages`` dict keyed by the offending field.
"""

from protean.exceptions import ValidationError


class InvalidQuantity(ValidationError):
    """A cart quantity below one was requested."""

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__({"quantity": [f"Quantity must be at least 1, got {quantity}"]})


class MissingFields(ValidationError):
    """Required checkout fields were left blank. Lists every one of them."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__({field: ["This field is required"] for field in self.fields})


class EmptyOrder(ValidationError):
    """Checkout was attempted with nothing priceable in the cart."""

    def __init__(self):
        super().__init__({"cart": ["Cannot place an order for an empty cart"]})


class InsufficientStock(ValidationError):
    """Some cart lines ask for more units than the catalogue has in stock."""

    def __init__(self, line_ids):
        self.line_ids = list(line_ids)
        super().__init__({"quantity": [f"Not enough stock for cart line {line_id}" for line_id in self.line_ids]})


class UnknownShippingMethod(ValidationError):
    def __init__(self, method):
        self.method = method
        super().__init__({"shipping": [f"Unknown shipping method: {method}"]})


class CartLineNotFound(LookupError):
    def __init__(self, line_id):
        self.line_id = str(line_id)
        super().__init__(f"Cart line {self.line_id} not found")


class CartStoreError(Exception):
    """The cart store failed; the underlying error is chained as ``__cause__``."""
