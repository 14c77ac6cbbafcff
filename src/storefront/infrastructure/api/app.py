"""Storefront FastAPI application.

Usage:
    uvicorn --factory storefront.infrastructure.api.app:create_default_app --port 8000
    storefront serve

``create_app`` takes its collaborators as arguments so tests can run the
API against in-memory repositories.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.application.delivery_addresses import ListDeliveryAddressesHandler
from storefront.application.order_service import OrderService
from storefront.domain.exceptions import (
    AccessDeniedError,
    AllocationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.repository.token_registry import TokenRegistry
from storefront.infrastructure import bootstrap
from storefront.infrastructure.api.routes import admin_router, checkout_router, order_router
from storefront.infrastructure.logging import configure_logging

logger = structlog.get_logger(__name__)

# Most specific first; the first match wins.
_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, 404),
    (AccessDeniedError, 403),
    (ValidationError, 400),
    (AllocationError, 500),
]


def status_for(exc: DomainException) -> int:
    for exc_type, status in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status
    return 500


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status = status_for(exc)
    log = logger.error if status >= 500 else logger.info
    log(
        "Request failed",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
        status=status,
    )
    return JSONResponse(status_code=status, content={"detail": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": errors})


def create_app(
    orders: OrderService,
    addresses: ListDeliveryAddressesHandler,
    tokens: TokenRegistry,
) -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Checkout, customer orders and order administration",
    )
    app.state.orders = orders
    app.state.addresses = addresses
    app.state.tokens = tokens

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(order_router)
    app.include_router(checkout_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok"})

    return app


def create_default_app() -> FastAPI:
    """Build the app on top of the JSON-file repositories."""
    configure_logging(bootstrap.settings())
    return create_app(
        orders=bootstrap.order_service(),
        addresses=ListDeliveryAddressesHandler(
            bootstrap.customer_repository(),
            bootstrap.address_repository(),
        ),
        tokens=bootstrap.token_registry(),
    )
