"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.order_service import OrderService
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonAddressRepository,
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_order_number_sequence import (
    JsonOrderNumberSequence,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_token_registry import (
    JsonTokenRegistry,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(settings().data_dir / "customers.json")


def address_repository() -> JsonAddressRepository:
    return JsonAddressRepository(settings().data_dir / "addresses.json")


def order_number_sequence() -> JsonOrderNumberSequence:
    return JsonOrderNumberSequence(settings().data_dir / "sequences.json")


def order_service() -> OrderService:
    return OrderService(
        order_repo=order_repository(),
        customer_repo=customer_repository(),
        address_repo=address_repository(),
        product_repo=product_repository(),
        sequence=order_number_sequence(),
        policy=settings().status_policy,
    )


def token_registry() -> JsonTokenRegistry:
    return JsonTokenRegistry(settings().data_dir / "tokens.json")
