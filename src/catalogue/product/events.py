"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductListed:
    """A seller put a new product up for sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier()
    name: String(required=True)
    price: Float(required=True)
    discount: Float()
    quantity: Integer(required=True)
    listed_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductListingUpdated:
    """Name, price, discount or stock of a listing changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    discount: Float()
    quantity: Integer(required=True)
    updated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductDelisted:
    """A product was withdrawn from sale. Carts referencing it can no longer be priced for it."""

    __version__ = 1

    product_id: Identifier(required=True)
    delisted_at: DateTime(required=True)
