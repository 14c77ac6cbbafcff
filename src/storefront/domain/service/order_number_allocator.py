"""Domain service: hands out order numbers.

Numbers come from an atomically incremented sequence, never from
counting existing orders, so concurrent checkouts cannot collide.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import AllocationError
from storefront.domain.model.value_objects import OrderNumber
from storefront.domain.repository.order_number_sequence import OrderNumberSequence

logger = structlog.get_logger(__name__)


class OrderNumberAllocator:

    def __init__(self, sequence: OrderNumberSequence) -> None:
        self._sequence = sequence

    def next(self) -> OrderNumber:
        try:
            value = self._sequence.next_value()
        except AllocationError:
            raise
        except Exception as exc:
            logger.error("Order number sequence unavailable", error=str(exc))
            raise AllocationError("Could not allocate an order number") from exc

        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise AllocationError(f"Order number sequence returned {value!r}")
        return OrderNumber(value)
