"""Application service: Update Order Status use case.

Status changes are triggered from outside (payment gateway callbacks,
warehouse staff) and only back-office roles may apply them. Whether the
lifecycle graph is enforced depends on the configured TransitionPolicy.

The write is a plain overwrite: two concurrent updates to the same
order resolve as last-write-wins.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import OrderNotFoundError, ValidationError
from storefront.domain.model.identity import BACK_OFFICE_ROLES, Caller
from storefront.domain.model.lifecycle import OrderStatus, TransitionPolicy
from storefront.domain.model.value_objects import OrderNumber
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import require_role

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        policy: TransitionPolicy = TransitionPolicy.STRICT,
    ) -> None:
        self._order_repo = order_repo
        self._policy = policy

    def handle(self, order_number: str, new_status: str, caller: Caller) -> OrderStatus:
        """Apply *new_status* to the order and return the resulting status."""
        require_role(caller, *BACK_OFFICE_ROLES)
        target = OrderStatus.parse(new_status)

        try:
            number = OrderNumber.parse(order_number)
        except ValidationError:
            raise OrderNotFoundError(f"Order {order_number} not found") from None
        order = self._order_repo.get_by_number(number)
        if order is None:
            raise OrderNotFoundError(f"Order {order_number} not found")

        previous = order.change_status(target, self._policy)
        self._order_repo.save(order)

        logger.info(
            "Order status changed",
            order_number=order.number.value,
            old_status=previous.value,
            new_status=order.status.value,
            changed_by=caller.email,
            policy=self._policy.value,
        )
        return order.status
