"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    ListProductRequest,
    ProductIdResponse,
    ProductResponse,
    StatusResponse,
    UpdateListingRequest,
)
from catalogue.product.listing import DelistProduct, ListProduct, UpdateListing
from catalogue.product.product import Product, ProductStatus
from catalogue.product.snapshot import read_product, snapshot_of

product_router = APIRouter(prefix="/products", tags=["products"])


# --- Browse endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def browse_products() -> list[ProductResponse]:
    repo = current_domain.repository_for(Product)
    products = repo._dao.query.filter(status=ProductStatus.ACTIVE.value).all().items
    return [ProductResponse(**snapshot_of(product)._asdict()) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse(**read_product(product_id)._asdict())


# --- Seller endpoints ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def list_product(body: ListProductRequest) -> ProductIdResponse:
    command = ListProduct(
        seller_id=body.seller_id,
        name=body.name,
        description=body.description,
        price=body.price,
        discount=body.discount,
        quantity=body.quantity,
        image_url=body.image_url,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_listing(product_id: str, body: UpdateListingRequest) -> StatusResponse:
    command = UpdateListing(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        discount=body.discount,
        quantity=body.quantity,
        image_url=body.image_url,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delist_product(product_id: str) -> StatusResponse:
    current_domain.process(DelistProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()
