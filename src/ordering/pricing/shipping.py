"""Shipping methods and their fixed costs."""

from decimal import Decimal
from enum import Enum
from typing import NamedTuple

from ordering.errors import UnknownShippingMethod


class ShippingMethod(Enum):
    CASH_ON_DELIVERY = "cod"
    FREE = "free"


class ShippingRate(NamedTuple):
    base_cost: Decimal
    surcharge: Decimal


SHIPPING_RATES = {
    ShippingMethod.CASH_ON_DELIVERY: ShippingRate(base_cost=Decimal("250.00"), surcharge=Decimal("50.00")),
    ShippingMethod.FREE: ShippingRate(base_cost=Decimal("0.00"), surcharge=Decimal("0.00")),
}


def resolve_shipping(method) -> ShippingMethod:
    """Accept a ShippingMethod or its string value, in any case."""
    if isinstance(method, ShippingMethod):
        return method
    try:
        return ShippingMethod(str(method).strip().lower())
    except ValueError:
        raise UnknownShippingMethod(method) from None


def rate_for(method) -> ShippingRate:
    return SHIPPING_RATES[resolve_shipping(method)]
