"""Cart pricing engine.

Pure functions that turn cart lines plus a catalogue snapshot into an
itemised order total. No I/O happens here: identical inputs always price to
an identical PricedOrder.

Money is handled as Decimal and reported to two places, rounding half up.
"""

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

from catalogue.product.snapshot import ProductSnapshot

from ordering.pricing.promotions import normalize_code, promotion_percent
from ordering.pricing.shipping import ShippingMethod, rate_for, resolve_shipping

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


class PricedLine(NamedTuple):
    """One cart line priced against the current catalogue."""

    line_id: str
    product_id: str
    name: str
    quantity: int
    unit_price: Decimal
    discount_percent: Decimal
    effective_unit_price: Decimal
    line_total: Decimal


class PricedOrder(NamedTuple):
    """Result of pricing a cart."""

    subtotal: Decimal
    discount_amount: Decimal
    shipping_cost: Decimal
    cod_surcharge: Decimal
    total: Decimal
    excluded_line_ids: tuple[str, ...]
    lines: tuple[PricedLine, ...]
    promotion_code: str | None
    promotion_percent: Decimal
    shipping_method: ShippingMethod
    over_stock_line_ids: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.lines


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, half up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def effective_unit_price(snapshot: ProductSnapshot) -> Decimal:
    """Unit price after the product's own discount, unrounded."""
    discount = snapshot.discount_percent or Decimal("0")
    return snapshot.unit_price * (HUNDRED - discount) / HUNDRED


def effective_line_price(snapshot: ProductSnapshot, quantity: int) -> Decimal:
    return effective_unit_price(snapshot) * quantity


def discount_for(subtotal: Decimal, percent: Decimal) -> Decimal:
    """Promotion discount on ``subtotal``, never more than the subtotal itself."""
    return min(round_money(subtotal * percent / HUNDRED), subtotal)


def price(
    lines: Iterable,
    catalog: Mapping[str, ProductSnapshot],
    promotion: str | None = None,
    shipping=ShippingMethod.CASH_ON_DELIVERY,
) -> PricedOrder:
    """Price ``lines`` against ``catalog``.

    Each line needs ``id``, ``product_id`` and ``quantity``. Lines whose
    product is not in ``catalog`` are left out of the subtotal and reported in
    ``excluded_line_ids``; unknown promotion codes price at zero percent.
    Neither case raises.
    """
    method = resolve_shipping(shipping)
    rate = rate_for(method)

    priced_lines = []
    excluded = []
    over_stock = []
    exact_subtotal = Decimal("0")

    for line in lines:
        line_id = str(line.id)
        snapshot = catalog.get(str(line.product_id))
        if snapshot is None:
            excluded.append(line_id)
            continue

        line_total = effective_line_price(snapshot, line.quantity)
        exact_subtotal += line_total
        if line.quantity > snapshot.available_quantity:
            over_stock.append(line_id)

        priced_lines.append(
            PricedLine(
                line_id=line_id,
                product_id=snapshot.product_id,
                name=snapshot.name,
                quantity=line.quantity,
                unit_price=round_money(snapshot.unit_price),
                discount_percent=snapshot.discount_percent,
                effective_unit_price=round_money(effective_unit_price(snapshot)),
                line_total=round_money(line_total),
            )
        )

    subtotal = round_money(exact_subtotal)
    percent = promotion_percent(promotion)
    discount_amount = discount_for(subtotal, percent)
    total = round_money(subtotal - discount_amount + rate.base_cost + rate.surcharge)

    return PricedOrder(
        subtotal=subtotal,
        discount_amount=discount_amount,
        shipping_cost=rate.base_cost,
        cod_surcharge=rate.surcharge,
        total=total,
        excluded_line_ids=tuple(excluded),
        lines=tuple(priced_lines),
        promotion_code=normalize_code(promotion) if percent else None,
        promotion_percent=percent,
        shipping_method=method,
        over_stock_line_ids=tuple(over_stock),
    )
