"""FastAPI routes for the Ordering domain: bag, quotes and checkout."""

from fastapi import APIRouter

from ordering.api.schemas import (
    AddToBagRequest,
    CartLineResponse,
    CheckoutRequest,
    LineIdResponse,
    OrderConfirmationResponse,
    PricedOrderResponse,
    QuoteRequest,
    SetQuantityRequest,
    StatusResponse,
)
from ordering.cart import store
from ordering.checkout.finalizer import place_order
from ordering.checkout.quote import quote_cart

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(tags=["carts"])


@cart_router.get("/users/{user_id}/cart", response_model=list[CartLineResponse])
async def list_cart(user_id: str) -> list[CartLineResponse]:
    return [
        CartLineResponse(
            line_id=str(line.id),
            product_id=str(line.product_id),
            quantity=line.quantity,
            added_at=line.added_at,
        )
        for line in store.list_lines(user_id)
    ]


@cart_router.post("/users/{user_id}/cart/items", response_model=LineIdResponse)
async def add_to_bag(user_id: str, body: AddToBagRequest) -> LineIdResponse:
    line_id = store.add_or_merge(user_id, body.product_id, body.quantity)
    return LineIdResponse(line_id=line_id)


@cart_router.put("/cart/items/{line_id}", response_model=StatusResponse)
async def set_line_quantity(line_id: str, body: SetQuantityRequest) -> StatusResponse:
    store.set_quantity(line_id, body.quantity)
    return StatusResponse()


@cart_router.delete("/cart/items/{line_id}", response_model=StatusResponse)
async def remove_line(line_id: str) -> StatusResponse:
    store.remove(line_id)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/users", tags=["checkout"])


@checkout_router.post("/{user_id}/cart/quote", response_model=PricedOrderResponse)
async def quote(user_id: str, body: QuoteRequest) -> PricedOrderResponse:
    priced = quote_cart(user_id, promotion_code=body.promotion_code, shipping=body.shipping)
    return PricedOrderResponse.from_priced(priced)


@checkout_router.post("/{user_id}/checkout", status_code=201, response_model=OrderConfirmationResponse)
async def checkout(user_id: str, body: CheckoutRequest) -> OrderConfirmationResponse:
    confirmation = place_order(
        user_id,
        contact=body.contact.to_contact(),
        address=body.address.to_address(),
        shipping=body.shipping,
        promotion_code=body.promotion_code,
    )
    return OrderConfirmationResponse.from_confirmation(confirmation)
