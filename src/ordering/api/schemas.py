"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands and the pricing engine's result types.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ordering.checkout.finalizer import ContactInfo, DeliveryAddress, OrderConfirmation
from ordering.pricing.engine import PricedOrder


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ContactSchema(BaseModel):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email_offers: bool = False

    def to_contact(self) -> ContactInfo:
        return ContactInfo(**self.model_dump())


class AddressSchema(BaseModel):
    address_line: str | None = None
    city: str | None = None
    country: str | None = None
    phone: str | None = None
    postal_code: str | None = None
    billing_same_as_shipping: bool = True

    def to_address(self) -> DeliveryAddress:
        return DeliveryAddress(**self.model_dump())


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddToBagRequest(BaseModel):
    product_id: str
    quantity: int = 1


class SetQuantityRequest(BaseModel):
    quantity: int


class QuoteRequest(BaseModel):
    promotion_code: str | None = None
    shipping: str = "cod"

    model_config = {"json_schema_extra": {"examples": [{"promotion_code": "SAVE10", "shipping": "cod"}]}}


class CheckoutRequest(BaseModel):
    contact: ContactSchema = Field(default_factory=ContactSchema)
    address: AddressSchema = Field(default_factory=AddressSchema)
    shipping: str = "cod"
    promotion_code: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "contact": {
                        "email": "ayesha@example.com",
                        "first_name": "Ayesha",
                        "last_name": "Khan",
                    },
                    "address": {
                        "address_line": "House 12, Street 4, F-7/2",
                        "city": "Islamabad",
                        "country": "Pakistan",
                        "phone": "+92 300 1234567",
                    },
                    "shipping": "cod",
                    "promotion_code": "SAVE10",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class LineIdResponse(BaseModel):
    line_id: str


class CartLineResponse(BaseModel):
    line_id: str
    product_id: str
    quantity: int
    added_at: datetime | None = None


class PricedLineResponse(BaseModel):
    line_id: str
    product_id: str
    name: str
    quantity: int
    unit_price: Decimal
    discount_percent: Decimal
    effective_unit_price: Decimal
    line_total: Decimal


class PricedOrderResponse(BaseModel):
    subtotal: Decimal
    discount_amount: Decimal
    shipping_cost: Decimal
    cod_surcharge: Decimal
    total: Decimal
    excluded_line_ids: list[str]
    over_stock_line_ids: list[str]
    promotion_code: str | None = None
    promotion_percent: Decimal
    shipping: str
    lines: list[PricedLineResponse]

    @classmethod
    def from_priced(cls, priced: PricedOrder) -> "PricedOrderResponse":
        return cls(
            subtotal=priced.subtotal,
            discount_amount=priced.discount_amount,
            shipping_cost=priced.shipping_cost,
            cod_surcharge=priced.cod_surcharge,
            total=priced.total,
            excluded_line_ids=list(priced.excluded_line_ids),
            over_stock_line_ids=list(priced.over_stock_line_ids),
            promotion_code=priced.promotion_code,
            promotion_percent=priced.promotion_percent,
            shipping=priced.shipping_method.value,
            lines=[PricedLineResponse(**line._asdict()) for line in priced.lines],
        )


class OrderConfirmationResponse(BaseModel):
    reference: str
    email: str
    shipping: str
    total: Decimal
    placed_at: datetime
    order: PricedOrderResponse

    @classmethod
    def from_confirmation(cls, confirmation: OrderConfirmation) -> "OrderConfirmationResponse":
        return cls(
            reference=confirmation.reference,
            email=confirmation.email,
            shipping=confirmation.shipping_method.value,
            total=confirmation.total,
            placed_at=confirmation.placed_at,
            order=PricedOrderResponse.from_priced(confirmation.priced_order),
        )


class StatusResponse(BaseModel):
    status: str = "ok"
