"""Checkout quotes: price a user's current bag against the live catalogue."""

import structlog
from catalogue.product.snapshot import read_snapshot

from ordering.cart.store import list_lines
from ordering.pricing.engine import PricedOrder, price
from ordering.pricing.shipping import ShippingMethod

logger = structlog.get_logger(__name__)


def quote_cart(user_id, promotion_code=None, shipping=ShippingMethod.CASH_ON_DELIVERY, reader=read_snapshot) -> PricedOrder:
    """Price the user's bag as it stands now.

    ``reader`` maps product ids to a catalogue snapshot; it defaults to the
    catalogue's own reader. CatalogUnavailable from the reader propagates.
    """
    lines = list_lines(user_id)
    snapshot = reader(line.product_id for line in lines)
    priced = price(lines, snapshot, promotion=promotion_code, shipping=shipping)

    if priced.excluded_line_ids:
        logger.warning(
            "Cart lines reference products that are no longer available",
            user_id=str(user_id),
            excluded_line_ids=list(priced.excluded_line_ids),
        )
    return priced
