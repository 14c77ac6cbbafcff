"""OrderService: one entry point for the order use cases.

Controllers (HTTP routes, CLI commands) talk to this facade instead of
wiring the individual handlers themselves.
"""

from __future__ import annotations

from storefront.application.admin_list_orders import AdminListOrdersHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import (
    CreateOrderRequest,
    OrderCreatedDTO,
    OrderDetailDTO,
    OrderSummaryDTO,
)
from storefront.application.list_my_orders import ListMyOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.model.identity import Caller
from storefront.domain.model.lifecycle import OrderStatus, TransitionPolicy
from storefront.domain.repository.customer_repository import (
    AddressRepository,
    CustomerRepository,
)
from storefront.domain.repository.order_number_sequence import OrderNumberSequence
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.order_number_allocator import OrderNumberAllocator


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        address_repo: AddressRepository,
        product_repo: ProductRepository,
        sequence: OrderNumberSequence,
        policy: TransitionPolicy = TransitionPolicy.STRICT,
    ) -> None:
        self._create = CreateOrderHandler(
            order_repo,
            customer_repo,
            address_repo,
            product_repo,
            OrderNumberAllocator(sequence),
        )
        self._list_mine = ListMyOrdersHandler(order_repo, customer_repo)
        self._show = ShowOrderHandler(order_repo, customer_repo, address_repo, product_repo)
        self._admin_list = AdminListOrdersHandler(order_repo)
        self._update_status = UpdateOrderStatusHandler(order_repo, policy)

    def create(self, request: CreateOrderRequest, caller: Caller) -> OrderCreatedDTO:
        return self._create.handle(request, caller)

    def list_mine(self, caller: Caller) -> list[OrderSummaryDTO]:
        return self._list_mine.handle(caller)

    def detail(self, order_number: str, caller: Caller) -> OrderDetailDTO:
        return self._show.handle(order_number, caller)

    def admin_list(self, caller: Caller) -> list[OrderSummaryDTO]:
        return self._admin_list.handle(caller)

    def admin_update_status(
        self, order_number: str, new_status: str, caller: Caller
    ) -> OrderStatus:
        return self._update_status.handle(order_number, new_status, caller)
