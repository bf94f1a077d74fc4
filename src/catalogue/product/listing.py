"""Seller listings: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class ListProduct:
    seller_id: Identifier()
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    discount: Float()
    quantity: Integer(default=0)
    image_url: String(max_length=500)


@catalogue.command(part_of="Product")
class UpdateListing:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float()
    discount: Float()
    quantity: Integer()
    image_url: String(max_length=500)


@catalogue.command(part_of="Product")
class DelistProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ManageListingHandler:
    @handle(ListProduct)
    def list_product(self, command):
        product = Product.create_listing(
            seller_id=command.seller_id,
            name=command.name,
            description=command.description,
            price=command.price,
            discount=command.discount,
            quantity=command.quantity or 0,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateListing)
    def update_listing(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_listing(
            name=command.name,
            description=command.description,
            price=command.price,
            discount=command.discount,
            quantity=command.quantity,
            image_url=command.image_url,
        )
        repo.add(product)

    @handle(DelistProduct)
    def delist_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.delist()
        repo.add(product)
