"""CLI commands for customer-facing order operations.

The CLI trusts its operator: ``--customer`` names the customer the
command acts for, standing in for the authenticated caller.
"""

from __future__ import annotations

import re

import click

from storefront.application.dto import CreateOrderRequest, OrderDetailDTO
from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import Caller
from storefront.domain.service.line_item_pricer import LineRequest
from storefront.infrastructure.bootstrap import order_service


_ITEM_RE = re.compile(r"^([^:@]+):(-?\d+)@(.+)$")


def _parse_items(raw: str) -> list[LineRequest]:
    """Parse '1:2@50.00,2:1@100.00' (product:qty@unit_price) into LineRequests."""
    lines: list[LineRequest] = []
    for entry in raw.split(","):
        entry = entry.strip()
        match = _ITEM_RE.match(entry)
        if match is None:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Quantity@UnitPrice'."
            )
        product_id, qty, price = match.groups()
        lines.append(
            LineRequest(product_id=product_id.strip(), quantity=int(qty), unit_price=price.strip())
        )
    return lines


@click.command("create")
@click.option("--customer", required=True, help="Customer email.")
@click.option("--address", "address_id", required=True, help="Delivery address ID.")
@click.option("--payment", required=True, help="Payment method label.")
@click.option("--shipping", default="0.00", show_default=True, help="Shipping cost.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty@Price,...'.")
def order_create(customer: str, address_id: str, payment: str, shipping: str, items: str) -> None:
    """Check out a new order for a customer."""
    request = CreateOrderRequest(
        delivery_address_id=address_id,
        payment_method=payment,
        shipping_cost=shipping,
        lines=_parse_items(items),
    )

    try:
        created = order_service().create(request, Caller.customer(customer))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {created.order_number} created  (total=${created.total})")


@click.command("mine")
@click.option("--customer", required=True, help="Customer email.")
def order_mine(customer: str) -> None:
    """List a customer's orders, newest first."""
    try:
        orders = order_service().list_mine(Caller.customer(customer))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_summaries(orders)


def display_summaries(orders) -> None:
    """Shared formatting for order listings."""
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<12} {'Created':<17} {'Status':<18} {'Total':>12}")
    click.echo("-" * 62)
    for o in orders:
        click.echo(
            f"{o.order_number:<12} {o.created_at.strftime('%Y-%m-%d %H:%M'):<17} "
            f"{o.status:<18} {'$' + o.total:>12}"
        )


def _display_order(dto: OrderDetailDTO) -> None:
    address = dto.delivery_address
    click.echo(f"Order {dto.order_number}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(
        f"Ship to:  {address.street}, {address.number}"
        f"{' ' + address.complement if address.complement else ''} - "
        f"{address.district}, {address.city}/{address.state} {address.postal_code}"
    )
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        name = item.product_name or f"#{item.product_id}"
        click.echo(
            f"  {name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Shipping':<27} {dto.shipping_cost:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("show")
@click.option("--number", "order_number", required=True, help="Order number, e.g. PED00001.")
@click.option("--customer", required=True, help="Customer email.")
def order_show(order_number: str, customer: str) -> None:
    """Show details of one of a customer's orders."""
    try:
        dto = order_service().detail(order_number, Caller.customer(customer))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
