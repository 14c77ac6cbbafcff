"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model. This
is the only place that coordinates multiple aggregates (customer,
address and product lookups + Order creation).

Everything that can fail is checked before the order number is
allocated, and the order is written with a single ``save`` call, so a
failed checkout never leaves a partial order behind.
"""

from __future__ import annotations

import structlog

from storefront.application.customer_lookup import customer_for
from storefront.application.dto import CreateOrderRequest, OrderCreatedDTO
from storefront.domain.exceptions import AddressNotFoundError, ValidationError
from storefront.domain.model.identity import Caller, Role
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import (
    AddressRepository,
    CustomerRepository,
)
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.authorization import require_role
from storefront.domain.service.line_item_pricer import LineItemPricer
from storefront.domain.service.order_number_allocator import OrderNumberAllocator

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        address_repo: AddressRepository,
        product_repo: ProductRepository,
        allocator: OrderNumberAllocator,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._address_repo = address_repo
        self._pricer = LineItemPricer(product_repo)
        self._allocator = allocator

    def handle(self, request: CreateOrderRequest, caller: Caller) -> OrderCreatedDTO:
        """Create a new order for the calling customer.

        Steps:
        1. Resolve the caller to a customer.
        2. Validate the request shape (lines, payment method, money).
        3. Resolve the delivery address; it must be the customer's own.
        4. Price every line with the unit price from the request.
        5. Allocate an order number and persist the order once.
        """
        require_role(caller, Role.CUSTOMER)
        customer = customer_for(caller, self._customer_repo)

        if not request.lines:
            raise ValidationError("Order must contain at least one item")
        if not request.payment_method or not request.payment_method.strip():
            raise ValidationError("Payment method is required")
        shipping_cost = Money.of(request.shipping_cost)
        for line in request.lines:
            self._pricer.validate(line)

        address = self._address_repo.get_by_id(str(request.delivery_address_id))
        if address is None or not address.belongs_to(customer.id):
            raise AddressNotFoundError(
                f"Address not found: '{request.delivery_address_id}'"
            )

        items = self._pricer.price_all(request.lines)
        # Totals must fit in Money before a number is handed out.
        Order.compute_total(items, shipping_cost)

        number = self._allocator.next()
        order = Order.create(
            number=number,
            customer_id=customer.id,
            delivery_address_id=address.id,
            payment_method=request.payment_method,
            shipping_cost=shipping_cost,
            items=items,
        )
        self._order_repo.save(order)

        logger.info(
            "Order created",
            order_number=order.number.value,
            customer_id=customer.id,
            total=order.total.to_plain(),
            line_count=len(order.items),
        )
        return OrderCreatedDTO(
            order_number=order.number.value,
            total=order.total.to_plain(),
        )
