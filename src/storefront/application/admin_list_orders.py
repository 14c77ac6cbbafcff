"""Application service: Admin List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderSummaryDTO, to_summary
from storefront.domain.model.identity import BACK_OFFICE_ROLES, Caller
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import require_role


class AdminListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, caller: Caller) -> list[OrderSummaryDTO]:
        """Return every order in the store, newest first."""
        require_role(caller, *BACK_OFFICE_ROLES)
        return [to_summary(o) for o in self._order_repo.list_all()]
