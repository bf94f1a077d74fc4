"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class ListProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "seller_id": "seller-042",
                    "name": "Handwoven Cotton Kurta",
                    "description": "Breathable summer kurta in indigo.",
                    "price": 2499.0,
                    "discount": 15,
                    "quantity": 40,
                    "image_url": "https://cdn.example.com/kurta-indigo.jpg",
                }
            ]
        }
    }

    seller_id: str | None = None
    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    discount: float | None = Field(None, ge=0, le=100)
    quantity: int = Field(0, ge=0)
    image_url: str | None = Field(None, max_length=500)


class UpdateListingRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 2299.0, "quantity": 35}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    discount: float | None = Field(None, ge=0, le=100)
    quantity: int | None = Field(None, ge=0)
    image_url: str | None = Field(None, max_length=500)


# --- Response Schemas ---


class ProductIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "550e8400-e29b-41d4-a716-446655440000"}]}}

    product_id: str


class ProductResponse(BaseModel):
    product_id: str
    name: str
    unit_price: Decimal
    discount_percent: Decimal
    available_quantity: int
    image_url: str | None = None


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
