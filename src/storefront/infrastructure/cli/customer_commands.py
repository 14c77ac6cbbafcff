"""CLI commands for customers, their addresses and API tokens."""

from __future__ import annotations

import click

from storefront.application.delivery_addresses import (
    AddDeliveryAddressHandler,
    ListDeliveryAddressesHandler,
)
from storefront.application.register_customer import RegisterCustomerHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import Caller, Role
from storefront.infrastructure.bootstrap import (
    address_repository,
    customer_repository,
    token_registry,
)


@click.command("register")
@click.option("--email", required=True, help="Customer email (login).")
@click.option("--name", "full_name", required=True, help="Full name.")
def customer_register(email: str, full_name: str) -> None:
    """Register a new customer."""
    handler = RegisterCustomerHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(email=email, full_name=full_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} registered as {customer.email}")


@click.command("add-address")
@click.option("--customer", required=True, help="Customer email.")
@click.option("--postal-code", required=True, help="8-digit postal code.")
@click.option("--street", required=True)
@click.option("--number", required=True)
@click.option("--complement", default="")
@click.option("--district", required=True)
@click.option("--city", required=True)
@click.option("--state", required=True, help="2-letter state code.")
def customer_add_address(
    customer: str,
    postal_code: str,
    street: str,
    number: str,
    complement: str,
    district: str,
    city: str,
    state: str,
) -> None:
    """Add a delivery address to a customer."""
    handler = AddDeliveryAddressHandler(customer_repository(), address_repository())

    try:
        address = handler.handle(
            Caller.customer(customer),
            postal_code=postal_code,
            street=street,
            number=number,
            district=district,
            city=city,
            state=state,
            complement=complement,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    default = " (default)" if address.is_default else ""
    click.echo(f"Address #{address.id} added{default}")


@click.command("addresses")
@click.option("--customer", required=True, help="Customer email.")
def customer_addresses(customer: str) -> None:
    """List a customer's delivery addresses."""
    handler = ListDeliveryAddressesHandler(customer_repository(), address_repository())

    try:
        addresses = handler.handle(Caller.customer(customer))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for a in addresses:
        marker = "*" if a.is_default else " "
        click.echo(f"{marker} #{a.id:<4} {a.street}, {a.number} - {a.city}/{a.state} {a.postal_code}")


@click.command("issue")
@click.option("--email", required=True, help="Identity the token stands for.")
@click.option(
    "--role",
    "roles",
    multiple=True,
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    default=[Role.CUSTOMER.value],
    show_default=True,
    help="Role granted to the token (repeatable).",
)
def token_issue(email: str, roles: tuple[str, ...]) -> None:
    """Issue an API bearer token."""
    caller = Caller(
        email=email.strip().lower(),
        roles=frozenset(Role(r.upper()) for r in roles),
    )
    click.echo(token_registry().issue(caller))
