"""Product aggregate root: a seller's listing in the storefront."""

from datetime import datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue


class ProductStatus(Enum):
    """Enumeration of listing statuses."""

    ACTIVE = "Active"
    DELISTED = "Delisted"


@catalogue.aggregate
class Product:
    """Product aggregate root.

    ``discount`` is a percentage off ``price``; ``quantity`` is the stock
    currently available to buyers.
    """

    seller_id: Identifier()
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    discount: Float(default=0.0, min_value=0.0, max_value=100.0)
    quantity: Integer(default=0, min_value=0)
    image_url: String(max_length=500)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    listed_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @property
    def is_live(self):
        return self.status == ProductStatus.ACTIVE.value

    @classmethod
    def create_listing(
        cls,
        name,
        price,
        quantity=0,
        discount=None,
        seller_id=None,
        description=None,
        image_url=None,
    ):
        from catalogue.product.events import ProductListed

        now = datetime.now()
        product = cls(
            seller_id=seller_id,
            name=name,
            description=description,
            price=price,
            discount=discount or 0.0,
            quantity=quantity,
            image_url=image_url,
            listed_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=product.id,
                seller_id=seller_id,
                name=name,
                price=product.price,
                discount=product.discount,
                quantity=product.quantity,
                listed_at=now,
            )
        )
        return product

    def update_listing(self, name=None, description=None, price=None, discount=None, quantity=None, image_url=None):
        from catalogue.product.events import ProductListingUpdated

        if not self.is_live:
            raise ValidationError({"status": ["Delisted products cannot be updated"]})

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if discount is not None:
            self.discount = discount
        if quantity is not None:
            self.quantity = quantity
        if image_url is not None:
            self.image_url = image_url

        self.updated_at = datetime.now()

        self.raise_(
            ProductListingUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                discount=self.discount,
                quantity=self.quantity,
                updated_at=self.updated_at,
            )
        )

    def delist(self):
        from catalogue.product.events import ProductDelisted

        if not self.is_live:
            raise ValidationError({"status": ["Product is already delisted"]})

        self.status = ProductStatus.DELISTED.value
        self.updated_at = datetime.now()

        self.raise_(
            ProductDelisted(
                product_id=self.id,
                delisted_at=self.updated_at,
            )
        )
