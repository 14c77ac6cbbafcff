"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import threading

from storefront.application.dto import CreateOrderRequest
from storefront.application.order_service import OrderService
from storefront.domain.model.customer import Customer, DeliveryAddress
from storefront.domain.model.identity import Caller, Role
from storefront.domain.model.lifecycle import TransitionPolicy
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, OrderNumber
from storefront.domain.repository.customer_repository import (
    AddressRepository,
    CustomerRepository,
)
from storefront.domain.repository.order_number_sequence import OrderNumberSequence
from storefront.domain.repository.order_repository import OrderRepository, newest_first
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.token_registry import TokenRegistry
from storefront.domain.service.line_item_pricer import LineRequest


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_number(self, number: OrderNumber) -> Order | None:
        for order in self._store.values():
            if order.number == number:
                return order
        return None

    def list_by_customer(self, customer_id: str) -> list[Order]:
        return newest_first([o for o in self._store.values() if o.customer_id == customer_id])

    def list_all(self) -> list[Order]:
        return newest_first(list(self._store.values()))

    def save(self, order: Order) -> None:
        with self._lock:
            if order.id is None:
                order.id = self._next_id
                self._next_id += 1
            self._store[order.id] = order

    def count(self) -> int:
        return len(self._store)


class FakeOrderNumberSequence(OrderNumberSequence):

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next_value(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def current(self) -> int:
        return self._value


class BrokenOrderNumberSequence(OrderNumberSequence):
    """A counter source that is always down."""

    def next_value(self) -> int:
        raise ConnectionError("sequence store unreachable")


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        for c in customers or []:
            self._store[c.id] = c

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._store.get(customer_id)

    def get_by_email(self, email: str) -> Customer | None:
        for c in self._store.values():
            if c.email == email.strip().lower():
                return c
        return None

    def list_all(self) -> list[Customer]:
        return list(self._store.values())

    def save(self, customer: Customer) -> None:
        self._store[customer.id] = customer


class FakeAddressRepository(AddressRepository):

    def __init__(self, addresses: list[DeliveryAddress] | None = None) -> None:
        self._store: dict[str, DeliveryAddress] = {}
        for a in addresses or []:
            self._store[a.id] = a

    def get_by_id(self, address_id: str) -> DeliveryAddress | None:
        return self._store.get(address_id)

    def list_by_customer(self, customer_id: str) -> list[DeliveryAddress]:
        return [a for a in self._store.values() if a.customer_id == customer_id]

    def list_all(self) -> list[DeliveryAddress]:
        return list(self._store.values())

    def save(self, address: DeliveryAddress) -> None:
        self._store[address.id] = address


class FakeTokenRegistry(TokenRegistry):

    def __init__(self, tokens: dict[str, Caller] | None = None) -> None:
        self._store: dict[str, Caller] = dict(tokens or {})

    def resolve(self, token: str) -> Caller | None:
        return self._store.get(token)

    def issue(self, caller: Caller) -> str:
        token = f"token-{len(self._store) + 1}"
        self._store[token] = caller
        return token


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

def make_address(address_id: str = "A1", customer_id: str = "1", **overrides) -> DeliveryAddress:
    fields = dict(
        id=address_id,
        customer_id=customer_id,
        postal_code="01310100",
        street="Avenida Paulista",
        number="1000",
        district="Bela Vista",
        city="Sao Paulo",
        state="SP",
    )
    fields.update(overrides)
    return DeliveryAddress(**fields)


class World:
    """A small store: two customers with one address each, two products."""

    ANA = "ana@example.com"
    BRUNO = "bruno@example.com"
    ADMIN = "admin@example.com"
    STOCKIST = "stock@example.com"

    def __init__(self, sequence: OrderNumberSequence | None = None, policy=None) -> None:
        self.customers = FakeCustomerRepository([
            Customer(id="1", email=self.ANA, full_name="Ana Souza"),
            Customer(id="2", email=self.BRUNO, full_name="Bruno Lima"),
        ])
        self.addresses = FakeAddressRepository([
            make_address("A1", customer_id="1", is_default=True),
            make_address("A2", customer_id="2", street="Rua Augusta", is_default=True),
        ])
        self.products = FakeProductRepository([
            Product(id="P1", name="Keyboard", price=Money.of("50.00"), image="keyboard.jpg"),
            Product(id="P2", name="Monitor", price=Money.of("100.00"), image="monitor.jpg"),
        ])
        self.orders = FakeOrderRepository()
        self.sequence = sequence or FakeOrderNumberSequence()
        self.service = OrderService(
            order_repo=self.orders,
            customer_repo=self.customers,
            address_repo=self.addresses,
            product_repo=self.products,
            sequence=self.sequence,
            policy=policy or TransitionPolicy.STRICT,
        )

    @property
    def ana(self) -> Caller:
        return Caller.customer(self.ANA)

    @property
    def bruno(self) -> Caller:
        return Caller.customer(self.BRUNO)

    @property
    def admin(self) -> Caller:
        return Caller(self.ADMIN, frozenset({Role.ADMINISTRATOR}))

    @property
    def stockist(self) -> Caller:
        return Caller(self.STOCKIST, frozenset({Role.STOCKIST}))

    def checkout(self, caller: Caller | None = None, address_id: str = "A1", **overrides):
        """Place the reference order: 2x P1 @ 50.00 + 1x P2 @ 100.00 + 15.00 shipping."""
        fields = dict(
            delivery_address_id=address_id,
            payment_method="credit-card",
            shipping_cost="15.00",
            lines=[
                LineRequest("P1", 2, "50.00"),
                LineRequest("P2", 1, "100.00"),
            ],
        )
        fields.update(overrides)
        return self.service.create(CreateOrderRequest(**fields), caller or self.ana)
