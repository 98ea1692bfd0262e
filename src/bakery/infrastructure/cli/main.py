import click

from bakery.infrastructure import settings
from bakery.infrastructure.cli.cart_commands import cart_box, cart_quote
from bakery.infrastructure.cli.order_commands import order_list, order_place, order_show
from bakery.infrastructure.cli.product_commands import product_list, product_show
from bakery.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=settings.LOG_LEVEL, show_default=True)
def cli(log_level: str) -> None:
    """Bakery storefront"""
    configure_logging(log_level, settings.LOG_JSON)


@cli.group()
def order() -> None:
    """Place and look up orders."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Price a cart."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    from bakery.infrastructure.api.app import create_app

    uvicorn.run(create_app(), host=host, port=port)


# Register subcommands
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_list)
product.add_command(product_show)
cart.add_command(cart_box)
cart.add_command(cart_quote)
