"""Domain service: turns requested lines into priced order lines.

The unit price is the one the customer saw at checkout and is carried in
the request. The catalog is consulted only to check that the product
exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class LineRequest:
    """One requested line: product, how many, and the agreed unit price."""

    product_id: str
    quantity: int
    unit_price: str | Decimal


class LineItemPricer:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def validate(self, line: LineRequest) -> tuple[Quantity, Money]:
        """Check quantity and price without touching the catalog."""
        return Quantity(line.quantity), Money.of(line.unit_price)

    def price(self, line: LineRequest) -> OrderLineItem:
        quantity, unit_price = self.validate(line)

        product = self._product_repo.get_by_id(str(line.product_id))
        if product is None:
            raise ProductNotFoundError(f"Product not found: '{line.product_id}'")

        return OrderLineItem(
            product_id=product.id,
            quantity=quantity,
            unit_price=unit_price,
        )

    def price_all(self, lines: list[LineRequest]) -> list[OrderLineItem]:
        """Price every line, failing on the first invalid one.

        All lines are validated before any product lookup happens.
        """
        for line in lines:
            self.validate(line)
        return [self.price(line) for line in lines]
