"""Catalog snapshots: point-in-time reads of product pricing and stock.

The ordering context never stores prices on cart lines. It asks for a fresh
snapshot of the products a cart references each time it prices the cart.
"""

from collections.abc import Iterable, Iterator, Mapping
from datetime import UTC, datetime
from decimal import Decimal
from typing import NamedTuple

import structlog
from protean.exceptions import ObjectNotFoundError

from catalogue.domain import catalogue
from catalogue.errors import CatalogUnavailable, ProductNotFound
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)


class ProductSnapshot(NamedTuple):
    """Pricing-relevant attributes of one live product."""

    product_id: str
    name: str
    unit_price: Decimal
    discount_percent: Decimal
    available_quantity: int
    image_url: str | None = None


class CatalogSnapshot(Mapping):
    """Read-only mapping of product id to ProductSnapshot.

    Ids that were requested but had no live product are kept in ``missing``.
    """

    def __init__(self, products: Mapping[str, ProductSnapshot], missing: Iterable[str] = (), read_at=None):
        self._products = dict(products)
        self.missing = frozenset(missing)
        self.read_at = read_at or datetime.now(UTC)

    def __getitem__(self, product_id) -> ProductSnapshot:
        return self._products[str(product_id)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def require(self, product_id) -> ProductSnapshot:
        """Return the snapshot for ``product_id`` or raise ProductNotFound."""
        try:
            return self[product_id]
        except KeyError:
            raise ProductNotFound(product_id) from None


def _to_decimal(value) -> Decimal:
    # Floats go through str() so 19.99 stays 19.99
    return Decimal(str(value)) if value is not None else Decimal("0")


def snapshot_of(product: Product) -> ProductSnapshot:
    return ProductSnapshot(
        product_id=str(product.id),
        name=product.name,
        unit_price=_to_decimal(product.price),
        discount_percent=_to_decimal(product.discount),
        available_quantity=product.quantity or 0,
        image_url=product.image_url,
    )


def _load_live(repo, product_id) -> Product | None:
    try:
        product = repo.get(product_id)
    except ObjectNotFoundError:
        return None
    return product if product.is_live else None


def read_snapshot(product_ids: Iterable[str]) -> CatalogSnapshot:
    """Read the current state of each product in ``product_ids``.

    Products that do not exist or are delisted are reported through
    ``CatalogSnapshot.missing`` rather than raised.
    """
    requested = list(dict.fromkeys(str(pid) for pid in product_ids))
    products = {}
    missing = []

    try:
        with catalogue.domain_context():
            repo = catalogue.repository_for(Product)
            for product_id in requested:
                product = _load_live(repo, product_id)
                if product is None:
                    missing.append(product_id)
                else:
                    products[product_id] = snapshot_of(product)
    except Exception as exc:
        logger.error("Catalogue read failed", product_count=len(requested), error=str(exc))
        raise CatalogUnavailable("Product catalogue is unavailable") from exc

    if missing:
        logger.info("Snapshot requested products that are not live", missing=missing)

    return CatalogSnapshot(products, missing=missing)


def read_product(product_id) -> ProductSnapshot:
    """Snapshot of a single live product; raises ProductNotFound otherwise."""
    return read_snapshot([product_id]).require(product_id)
