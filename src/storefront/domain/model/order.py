"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items. It refers to
its customer and delivery address by id only; it never holds copies of
them. The total is computed once, at creation, and stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.lifecycle import OrderStatus, TransitionPolicy
from storefront.domain.model.value_objects import Money, OrderNumber, Quantity


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price of a product at order-creation time.

    The unit price comes from the checkout request, so later catalog
    price changes never alter a historical order.
    """

    product_id: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    number: OrderNumber
    customer_id: str
    delivery_address_id: str
    payment_method: str
    shipping_cost: Money
    items: list[OrderLineItem]
    total: Money
    status: OrderStatus = OrderStatus.AWAITING_PAYMENT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        number: OrderNumber,
        customer_id: str,
        delivery_address_id: str,
        payment_method: str,
        shipping_cost: Money,
        items: list[OrderLineItem],
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_id:
            raise ValidationError("Customer is required")

        if not delivery_address_id:
            raise ValidationError("Delivery address is required")

        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=None,
            number=number,
            customer_id=customer_id,
            delivery_address_id=delivery_address_id,
            payment_method=payment_method.strip(),
            shipping_cost=shipping_cost,
            items=list(items),
            total=Order.compute_total(items, shipping_cost),
            status=OrderStatus.AWAITING_PAYMENT,
        )

    @staticmethod
    def compute_total(items: list[OrderLineItem], shipping_cost: Money) -> Money:
        result = Money.zero()
        for item in items:
            result = result + item.line_total
        return result + shipping_cost

    # --- State transitions ----------------------------------------------------

    def change_status(
        self,
        new_status: OrderStatus,
        policy: TransitionPolicy = TransitionPolicy.STRICT,
    ) -> OrderStatus:
        """Move the order to *new_status* and return the previous status."""
        previous = self.status
        policy.check(previous, new_status)
        self.status = new_status
        return previous

    # --- Queries --------------------------------------------------------------

    def is_owned_by(self, customer_id: str) -> bool:
        return self.customer_id == customer_id
