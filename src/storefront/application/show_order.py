"""Application service: Show Order use case (query).

A customer may only see their own orders. The ownership check runs
before anything about the order is read or returned.
"""

from __future__ import annotations

from storefront.application.customer_lookup import customer_for
from storefront.application.dto import OrderDetailDTO, OrderDetailLineDTO, to_address_dto
from storefront.domain.exceptions import (
    AccessDeniedError,
    AddressNotFoundError,
    OrderNotFoundError,
    ValidationError,
)
from storefront.domain.model.customer import DeliveryAddress
from storefront.domain.model.identity import Caller, Role
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import OrderNumber
from storefront.domain.repository.customer_repository import (
    AddressRepository,
    CustomerRepository,
)
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.authorization import require_role


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        address_repo: AddressRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._address_repo = address_repo
        self._product_repo = product_repo

    def handle(self, order_number: str, caller: Caller) -> OrderDetailDTO:
        require_role(caller, Role.CUSTOMER)
        customer = customer_for(caller, self._customer_repo)

        order = self._find(order_number)
        if not order.is_owned_by(customer.id):
            raise AccessDeniedError(f"Access denied to order {order_number}")

        address = self._address_repo.get_by_id(order.delivery_address_id)
        if address is None:
            raise AddressNotFoundError(
                f"Address not found: '{order.delivery_address_id}'"
            )
        return self._to_dto(order, address)

    def _find(self, order_number: str) -> Order:
        try:
            number = OrderNumber.parse(order_number)
        except ValidationError:
            raise OrderNotFoundError(f"Order {order_number} not found") from None
        order = self._order_repo.get_by_number(number)
        if order is None:
            raise OrderNotFoundError(f"Order {order_number} not found")
        return order

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, order: Order, address: DeliveryAddress) -> OrderDetailDTO:
        lines = []
        for item in order.items:
            # Name and image stay blank for products gone from the catalog.
            product = self._product_repo.get_by_id(item.product_id)
            lines.append(
                OrderDetailLineDTO(
                    product_id=item.product_id,
                    product_name=product.name if product else "",
                    product_image=product.image if product else "",
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.to_plain(),
                    line_total=item.line_total.to_plain(),
                )
            )

        return OrderDetailDTO(
            order_number=order.number.value,
            created_at=order.created_at,
            status=order.status.value,
            payment_method=order.payment_method,
            shipping_cost=order.shipping_cost.to_plain(),
            total=order.total.to_plain(),
            delivery_address=to_address_dto(address),
            items=lines,
        )
