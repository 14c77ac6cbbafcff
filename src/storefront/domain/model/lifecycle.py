"""Order status lifecycle.

The status vocabulary, the graph of allowed moves between statuses, and
the policy deciding whether that graph is enforced.

Older records and clients use a second, overlapping vocabulary
(PENDING, PROCESSING, SHIPPED, ...). Those values are accepted on input
and folded into the canonical set by ``OrderStatus.parse``.
"""

from __future__ import annotations

from enum import Enum

from storefront.domain.exceptions import InvalidStatusTransitionError, ValidationError


class OrderStatus(Enum):
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    PAYMENT_SUCCEEDED = "PAYMENT_SUCCEEDED"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"
    AWAITING_PICKUP = "AWAITING_PICKUP"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        """Resolve a canonical or legacy status name (case-insensitive)."""
        key = (raw or "").strip().upper().replace("-", "_").replace(" ", "_")
        if key in LEGACY_STATUS_ALIASES:
            return LEGACY_STATUS_ALIASES[key]
        try:
            return OrderStatus(key)
        except ValueError:
            raise ValidationError(f"Unknown order status: {raw!r}") from None


TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

LEGACY_STATUS_ALIASES: dict[str, OrderStatus] = {
    "PENDING": OrderStatus.AWAITING_PAYMENT,
    "PROCESSING": OrderStatus.PAYMENT_SUCCEEDED,
    "IN_PROCESSING": OrderStatus.PAYMENT_SUCCEEDED,
    "SHIPPED": OrderStatus.IN_TRANSIT,
    "COMPLETED": OrderStatus.DELIVERED,
}

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.AWAITING_PAYMENT: frozenset({
        OrderStatus.PAYMENT_SUCCEEDED,
        OrderStatus.PAYMENT_REJECTED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.PAYMENT_SUCCEEDED: frozenset({
        OrderStatus.AWAITING_PICKUP,
        OrderStatus.IN_TRANSIT,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.PAYMENT_REJECTED: frozenset({
        OrderStatus.AWAITING_PICKUP,
        OrderStatus.IN_TRANSIT,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.AWAITING_PICKUP: frozenset({
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.IN_TRANSIT: frozenset({
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class TransitionPolicy(Enum):
    """How strictly status changes follow ``ALLOWED_TRANSITIONS``.

    STRICT rejects any move that is not an edge of the graph.
    PERMISSIVE lets any status overwrite any other, which is how
    historical data was produced.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"

    @staticmethod
    def parse(raw: str) -> TransitionPolicy:
        try:
            return TransitionPolicy((raw or "").strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown status transition policy: {raw!r}") from None

    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        """Raise if moving from *current* to *target* is not allowed."""
        if self is TransitionPolicy.PERMISSIVE or current == target:
            return
        if target not in ALLOWED_TRANSITIONS[current]:
            raise InvalidStatusTransitionError(
                f"Cannot move order from {current.value} to {target.value}"
            )
