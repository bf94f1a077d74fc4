"""Storefront FastAPI application.

Serves the catalogue (browse and seller listings) and ordering (bag, quote,
checkout) domains. Each request is wrapped in the correct domain context
based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the domain.toml overlay (memory, sqlite, production).
from catalogue.domain import catalogue
from catalogue.errors import CatalogUnavailable, ProductNotFound
from catalogue.utils.logging import add_context, clear_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from ordering.errors import CartLineNotFound, CartStoreError, MissingFields
from protean.exceptions import ObjectNotFoundError, ValidationError

catalogue.init()
ordering.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/products": catalogue,
    "/users": ordering,
    "/cart": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Retail storefront: catalogue, bag, pricing and checkout",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        add_context(domain=domain.name, method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response
    # No domain match: pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
def register_error_handlers(application: FastAPI) -> None:
    """Map domain errors to HTTP responses."""

    @application.exception_handler(MissingFields)
    async def missing_fields(request: Request, exc: MissingFields):
        return JSONResponse(status_code=422, content={"error": "missing_fields", "fields": exc.fields})

    @application.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": "validation_error", "messages": exc.messages})

    @application.exception_handler(ObjectNotFoundError)
    async def object_not_found(request: Request, exc: ObjectNotFoundError):
        return JSONResponse(status_code=404, content={"error": "not_found", "detail": str(exc)})

    @application.exception_handler(ProductNotFound)
    async def product_not_found(request: Request, exc: ProductNotFound):
        return JSONResponse(status_code=404, content={"error": "product_not_found", "product_id": exc.product_id})

    @application.exception_handler(CartLineNotFound)
    async def cart_line_not_found(request: Request, exc: CartLineNotFound):
        return JSONResponse(status_code=404, content={"error": "cart_line_not_found", "line_id": exc.line_id})

    @application.exception_handler(CatalogUnavailable)
    async def catalog_unavailable(request: Request, exc: CatalogUnavailable):
        return JSONResponse(status_code=503, content={"error": "catalog_unavailable", "detail": str(exc)})

    @application.exception_handler(CartStoreError)
    async def cart_store_error(request: Request, exc: CartStoreError):
        return JSONResponse(status_code=503, content={"error": "cart_store_error", "detail": str(exc)})


register_error_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import product_router  # noqa: E402
from ordering.api.routes import cart_router, checkout_router  # noqa: E402

app.include_router(product_router)
app.include_router(cart_router)
app.include_router(checkout_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
            },
        }
    )
