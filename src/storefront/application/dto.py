"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/API and application layers without
exposing domain internals to the outside world. Money fields are plain
two-decimal strings (e.g. "215.00").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.customer import DeliveryAddress
from storefront.domain.model.order import Order
from storefront.domain.service.line_item_pricer import LineRequest


@dataclass(frozen=True)
class CreateOrderRequest:
    """Input: what the customer submitted at checkout."""

    delivery_address_id: str
    payment_method: str
    shipping_cost: str | Decimal
    lines: list[LineRequest] = field(default_factory=list)


@dataclass(frozen=True)
class OrderCreatedDTO:
    order_number: str
    total: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    order_number: str
    created_at: datetime
    total: str
    status: str


@dataclass(frozen=True)
class AddressDTO:
    id: str
    postal_code: str
    street: str
    number: str
    complement: str
    district: str
    city: str
    state: str
    is_default: bool


@dataclass(frozen=True)
class OrderDetailLineDTO:
    product_id: str
    product_name: str
    product_image: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDetailDTO:
    order_number: str
    created_at: datetime
    status: str
    payment_method: str
    shipping_cost: str
    total: str
    delivery_address: AddressDTO
    items: list[OrderDetailLineDTO]


def to_summary(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        order_number=order.number.value,
        created_at=order.created_at,
        total=order.total.to_plain(),
        status=order.status.value,
    )


def to_address_dto(address: DeliveryAddress) -> AddressDTO:
    return AddressDTO(
        id=address.id,
        postal_code=address.postal_code,
        street=address.street,
        number=address.number,
        complement=address.complement,
        district=address.district,
        city=address.city,
        state=address.state,
        is_default=address.is_default,
    )
