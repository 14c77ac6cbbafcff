"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import OrderNumber


class OrderRepository(ABC):

    @abstractmethod
    def get_by_number(self, number: OrderNumber) -> Order | None:
        """Return an order by its order number, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return a customer's orders, newest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        New orders (``id is None``) receive their storage id here.
        """


def newest_first(orders: list[Order]) -> list[Order]:
    """Sort by creation time descending, order number breaking ties."""
    return sorted(orders, key=lambda o: (o.created_at, o.number), reverse=True)
