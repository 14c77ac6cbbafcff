import click

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.admin_commands import admin_list, admin_set_status
from storefront.infrastructure.cli.customer_commands import (
    customer_add_address,
    customer_addresses,
    customer_register,
    token_issue,
)
from storefront.infrastructure.cli.order_commands import order_create, order_mine, order_show
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: checkout and order back-office."""
    configure_logging(bootstrap.settings())


@cli.group()
def order() -> None:
    """Check out and inspect customer orders."""


@cli.group()
def admin() -> None:
    """Administer orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers and their addresses."""


@cli.group()
def token() -> None:
    """Manage API tokens."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    from storefront.infrastructure.api.app import create_default_app

    uvicorn.run(create_default_app(), host=host, port=port)


# Register subcommands
order.add_command(order_create)
order.add_command(order_mine)
order.add_command(order_show)
admin.add_command(admin_list)
admin.add_command(admin_set_status)
product.add_command(product_add)
product.add_command(product_list)
customer.add_command(customer_register)
customer.add_command(customer_add_address)
customer.add_command(customer_addresses)
token.add_command(token_issue)
