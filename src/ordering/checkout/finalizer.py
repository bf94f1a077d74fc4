"""Order finalization: turn a priced cart and checkout details into a placed order.

Only presence of the required contact and delivery fields is checked here;
the form layer owns format validation. Placing an order does not touch
product stock.
"""

import uuid
from datetime import UTC, datetime
from typing import NamedTuple

import structlog
from protean.exceptions import ValidationError

from ordering.checkout.quote import quote_cart
from ordering.errors import EmptyOrder, InsufficientStock, MissingFields
from ordering.pricing.engine import PricedOrder
from ordering.pricing.shipping import ShippingMethod, resolve_shipping

logger = structlog.get_logger(__name__)


class ContactInfo(NamedTuple):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email_offers: bool = False


class DeliveryAddress(NamedTuple):
    address_line: str | None = None
    city: str | None = None
    country: str | None = None
    phone: str | None = None
    postal_code: str | None = None
    billing_same_as_shipping: bool = True


class OrderConfirmation(NamedTuple):
    reference: str
    user_id: str | None
    email: str
    shipping_method: ShippingMethod
    priced_order: PricedOrder
    placed_at: datetime

    @property
    def total(self):
        return self.priced_order.total


REQUIRED_CONTACT_FIELDS = ("email", "first_name", "last_name")
REQUIRED_ADDRESS_FIELDS = ("address_line", "phone", "city", "country")


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def missing_fields(contact: ContactInfo, address: DeliveryAddress) -> list[str]:
    """Names of every required field left blank, in form order."""
    missing = [name for name in REQUIRED_CONTACT_FIELDS if _is_blank(getattr(contact, name))]
    missing += [name for name in REQUIRED_ADDRESS_FIELDS if _is_blank(getattr(address, name))]
    return missing


def new_reference() -> str:
    return f"ORD-{uuid.uuid4().hex[:10].upper()}"


def finalize(
    contact: ContactInfo,
    address: DeliveryAddress,
    shipping,
    priced_order: PricedOrder,
    user_id=None,
) -> OrderConfirmation:
    """Validate checkout details and confirm the order.

    Raises MissingFields naming every blank required field, EmptyOrder when
    nothing in the cart could be priced, and InsufficientStock when a line
    asks for more than the catalogue holds.
    """
    missing = missing_fields(contact, address)
    if missing:
        raise MissingFields(missing)

    method = resolve_shipping(shipping)
    if method != priced_order.shipping_method:
        raise ValidationError(
            {"shipping": [f"Order was priced for {priced_order.shipping_method.value} shipping, not {method.value}"]}
        )

    if priced_order.is_empty:
        raise EmptyOrder()

    if priced_order.over_stock_line_ids:
        raise InsufficientStock(priced_order.over_stock_line_ids)

    confirmation = OrderConfirmation(
        reference=new_reference(),
        user_id=str(user_id) if user_id is not None else None,
        email=contact.email.strip(),
        shipping_method=method,
        priced_order=priced_order,
        placed_at=datetime.now(UTC),
    )

    logger.info(
        "Order placed",
        reference=confirmation.reference,
        user_id=confirmation.user_id,
        total=str(priced_order.total),
        shipping_method=confirmation.shipping_method.value,
        line_count=len(priced_order.lines),
    )
    return confirmation


def place_order(user_id, contact: ContactInfo, address: DeliveryAddress, shipping, promotion_code=None, **quote_kwargs):
    """Quote the user's bag and finalize it in one step."""
    priced_order = quote_cart(user_id, promotion_code=promotion_code, shipping=shipping, **quote_kwargs)
    return finalize(contact, address, shipping, priced_order, user_id=user_id)
