"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.lifecycle import OrderStatus
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, OrderNumber, Quantity
from storefront.domain.repository.order_repository import OrderRepository, newest_first
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def get_by_number(self, number: OrderNumber) -> Order | None:
        for raw in self._file.read():
            if raw["number"] == number.value:
                return self._to_domain(raw)
        return None

    def list_by_customer(self, customer_id: str) -> list[Order]:
        return newest_first([
            self._to_domain(raw)
            for raw in self._file.read()
            if raw["customer_id"] == customer_id
        ])

    def list_all(self) -> list[Order]:
        return newest_first([self._to_domain(raw) for raw in self._file.read()])

    def save(self, order: Order) -> None:
        with self._file.lock:
            orders = self._file.read()

            if order.id is None:
                order.id = max((o["id"] for o in orders), default=0) + 1

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

            self._file.write(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "number": order.number.value,
            "customer_id": order.customer_id,
            "delivery_address_id": order.delivery_address_id,
            "payment_method": order.payment_method,
            "shipping_cost": str(order.shipping_cost.amount),
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            number=OrderNumber.parse(raw["number"]),
            customer_id=raw["customer_id"],
            delivery_address_id=raw["delivery_address_id"],
            payment_method=raw["payment_method"],
            shipping_cost=Money(Decimal(raw["shipping_cost"]), currency),
            items=items,
            total=Money(Decimal(raw["total"]), currency),
            # Records written before the status vocabulary was unified may
            # still carry legacy names.
            status=OrderStatus.parse(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
