"""Unit tests for the Order aggregate and its business rules."""

import pytest

from storefront.domain.exceptions import InvalidStatusTransitionError, ValidationError
from storefront.domain.model.lifecycle import OrderStatus, TransitionPolicy
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, OrderNumber, Quantity


def _make_item(product_id: str = "P1", qty: int = 1, price: str = "15.00") -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id=product_id,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


def _create(items=None, shipping="15.00", payment="credit-card") -> Order:
    return Order.create(
        number=OrderNumber(1),
        customer_id="1",
        delivery_address_id="A1",
        payment_method=payment,
        shipping_cost=Money.of(shipping),
        items=items if items is not None else [_make_item()],
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = _create([_make_item(qty=2, price="10.00")])
        assert order.customer_id == "1"
        assert order.delivery_address_id == "A1"
        assert order.status == OrderStatus.AWAITING_PAYMENT
        assert order.number.value == "PED00001"
        assert order.total == Money.of("35.00")

    def test_id_is_none_for_new_orders(self):
        assert _create().id is None  # assigned by repository

    def test_total_is_lines_plus_shipping(self):
        order = _create(
            [
                _make_item("P1", qty=2, price="50.00"),
                _make_item("P2", qty=1, price="100.00"),
            ],
            shipping="15.00",
        )
        assert order.total == Money.of("215.00")

    def test_free_shipping(self):
        order = _create([_make_item(qty=3, price="0.10")], shipping="0")
        assert order.total == Money.of("0.30")

    def test_created_at_is_timezone_aware(self):
        assert _create().created_at.tzinfo is not None

    def test_payment_method_is_trimmed(self):
        assert _create(payment="  pix  ").payment_method == "pix"


class TestOrderValidation:

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _create(items=[])

    def test_blank_payment_method_rejected(self):
        with pytest.raises(ValidationError, match="Payment method"):
            _create(payment="   ")


class TestOrderTotalIsFrozen:

    def test_total_not_recomputed_on_status_change(self):
        order = _create([_make_item(qty=1, price="20.00")], shipping="5.00")
        order.change_status(OrderStatus.PAYMENT_SUCCEEDED)
        assert order.total == Money.of("25.00")


class TestOrderStatusChanges:

    def test_forward_move(self):
        order = _create()
        previous = order.change_status(OrderStatus.PAYMENT_SUCCEEDED)
        assert previous == OrderStatus.AWAITING_PAYMENT
        assert order.status == OrderStatus.PAYMENT_SUCCEEDED

    def test_strict_policy_rejects_invalid_move(self):
        order = _create()
        order.change_status(OrderStatus.PAYMENT_SUCCEEDED)
        order.change_status(OrderStatus.IN_TRANSIT)
        order.change_status(OrderStatus.DELIVERED)

        with pytest.raises(InvalidStatusTransitionError, match="DELIVERED to AWAITING_PAYMENT"):
            order.change_status(OrderStatus.AWAITING_PAYMENT)
        assert order.status == OrderStatus.DELIVERED

    def test_permissive_policy_allows_any_move(self):
        order = _create()
        order.change_status(OrderStatus.CANCELLED, TransitionPolicy.PERMISSIVE)
        order.change_status(OrderStatus.AWAITING_PAYMENT, TransitionPolicy.PERMISSIVE)
        assert order.status == OrderStatus.AWAITING_PAYMENT


class TestOrderOwnership:

    def test_is_owned_by(self):
        order = _create()
        assert order.is_owned_by("1")
        assert not order.is_owned_by("2")
