"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from bakery.application.catalog import ListProductsHandler, ShowProductHandler
from bakery.application.formatting import format_cents
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        marker = " *" if p.featured else ""
        click.echo(f"{p.id:<6} {p.name:<20} {format_cents(p.price):>10}{marker}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show one product."""
    handler = ShowProductHandler(product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name}  ({format_cents(p.price)})")
    click.echo(p.description)
    if not p.available:
        click.echo("Currently unavailable.")
