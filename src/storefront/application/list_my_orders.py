"""Application service: List My Orders use case (query)."""

from __future__ import annotations

from storefront.application.customer_lookup import customer_for
from storefront.application.dto import OrderSummaryDTO, to_summary
from storefront.domain.model.identity import Caller, Role
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import require_role


class ListMyOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo

    def handle(self, caller: Caller) -> list[OrderSummaryDTO]:
        """Return the caller's orders, newest first."""
        require_role(caller, Role.CUSTOMER)
        customer = customer_for(caller, self._customer_repo)
        return [to_summary(o) for o in self._order_repo.list_by_customer(customer.id)]
