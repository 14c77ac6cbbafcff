"""CLI commands for order administration."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import Caller, Role
from storefront.infrastructure.bootstrap import order_service
from storefront.infrastructure.cli.order_commands import display_summaries

OPERATOR = Caller(email="cli-operator", roles=frozenset({Role.ADMINISTRATOR}))


@click.command("list")
def admin_list() -> None:
    """List every order, newest first."""
    try:
        orders = order_service().admin_list(OPERATOR)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_summaries(orders)


@click.command("set-status")
@click.option("--number", "order_number", required=True, help="Order number, e.g. PED00001.")
@click.option("--status", required=True, help="New status, e.g. PAYMENT_SUCCEEDED.")
def admin_set_status(order_number: str, status: str) -> None:
    """Change the status of an order."""
    try:
        new_status = order_service().admin_update_status(order_number, status, OPERATOR)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_number} is now {new_status.value}")
