"""Errors raised while reading the catalogue on behalf of other contexts."""


class CatalogUnavailable(Exception):
    """The product store could not be reached. Callers may retry."""


class ProductNotFound(LookupError):
    """No live product exists for the requested id."""

    def __init__(self, product_id):
        self.product_id = str(product_id)
        super().__init__(f"Product {self.product_id} not found")
