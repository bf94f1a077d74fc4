"""Domain events for the CartLine aggregate."""

from protean.fields import Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="CartLine")
class CartLineAdded:
    """Units of a product were added to a user's bag, on a new or existing line."""

    __version__ = 1

    line_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity_added = Integer(required=True)
    quantity = Integer(required=True)


@ordering.event(part_of="CartLine")
class CartLineQuantityChanged:
    """The quantity of a cart line was replaced."""

    __version__ = 1

    line_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
