"""FastAPI routes for checkout, customer orders and order administration.

Routes are plain ``def`` functions: the services do blocking file I/O,
so FastAPI runs each request in its worker thread pool.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, Response

from storefront.application.delivery_addresses import ListDeliveryAddressesHandler
from storefront.application.dto import CreateOrderRequest
from storefront.application.order_service import OrderService
from storefront.domain.model.identity import Caller
from storefront.domain.service.line_item_pricer import LineRequest
from storefront.infrastructure.api.schemas import (
    AddressResponse,
    CreateOrderBody,
    OrderCreatedResponse,
    OrderDetailResponse,
    OrderSummaryResponse,
    UpdateStatusBody,
)
from storefront.infrastructure.api.security import current_caller


def order_service(request: Request) -> OrderService:
    return request.app.state.orders


def address_book(request: Request) -> ListDeliveryAddressesHandler:
    return request.app.state.addresses


# ---------------------------------------------------------------------------
# Customer orders
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderCreatedResponse)
def create_order(
    body: CreateOrderBody,
    caller: Caller = Depends(current_caller),
    service: OrderService = Depends(order_service),
) -> OrderCreatedResponse:
    request = CreateOrderRequest(
        delivery_address_id=body.delivery_address_id,
        payment_method=body.payment_method,
        shipping_cost=body.shipping_cost,
        lines=[
            LineRequest(
                product_id=line.product_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in body.lines
        ],
    )
    created = service.create(request, caller)
    return OrderCreatedResponse(**asdict(created))


@order_router.get("/mine", response_model=list[OrderSummaryResponse])
def list_my_orders(
    caller: Caller = Depends(current_caller),
    service: OrderService = Depends(order_service),
) -> list[OrderSummaryResponse]:
    return [OrderSummaryResponse(**asdict(dto)) for dto in service.list_mine(caller)]


@order_router.get("/{order_number}", response_model=OrderDetailResponse)
def get_order_detail(
    order_number: str,
    caller: Caller = Depends(current_caller),
    service: OrderService = Depends(order_service),
) -> OrderDetailResponse:
    return OrderDetailResponse(**asdict(service.detail(order_number, caller)))


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/api/checkout", tags=["checkout"])


@checkout_router.get("/addresses", response_model=list[AddressResponse])
def list_checkout_addresses(
    caller: Caller = Depends(current_caller),
    handler: ListDeliveryAddressesHandler = Depends(address_book),
) -> list[AddressResponse]:
    return [AddressResponse(**asdict(dto)) for dto in handler.handle(caller)]


# ---------------------------------------------------------------------------
# Administration
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/api/admin/orders", tags=["admin"])


@admin_router.get("", response_model=list[OrderSummaryResponse])
def admin_list_orders(
    caller: Caller = Depends(current_caller),
    service: OrderService = Depends(order_service),
) -> list[OrderSummaryResponse]:
    return [OrderSummaryResponse(**asdict(dto)) for dto in service.admin_list(caller)]


@admin_router.patch("/{order_number}/status", status_code=204)
def admin_update_status(
    order_number: str,
    body: UpdateStatusBody,
    caller: Caller = Depends(current_caller),
    service: OrderService = Depends(order_service),
) -> Response:
    service.admin_update_status(order_number, body.status, caller)
    return Response(status_code=204)
