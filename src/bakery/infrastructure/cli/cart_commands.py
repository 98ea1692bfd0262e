"""CLI commands for building and pricing a cart."""

from __future__ import annotations

import click

from bakery.application.checkout import assemble_box, build_cart, quote
from bakery.application.dto import CartSelection
from bakery.domain.exceptions import DomainException
from bakery.domain.model.cart import DEFAULT_BOX_NAME, Cart, CustomBox
from bakery.domain.repository.product_repository import ProductRepository
from bakery.infrastructure import settings
from bakery.infrastructure.bootstrap import product_repository
from bakery.infrastructure.cli.formatting import display_lines, display_totals


def parse_items(raw: str) -> list[CartSelection]:
    """Parse '1:12,2:40' into CartSelection list."""
    selections: list[CartSelection] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.rsplit(":", 1)
        try:
            selections.append(CartSelection(product_id=int(pid_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return selections


def parse_box(raw: str) -> tuple[str, list[CartSelection]]:
    """Parse 'Party Box=1:6,2:6' into a box name and its flavors.

    The name is optional: '1:6,2:6' gives the default box name.
    """
    name, _, flavors = raw.rpartition("=")
    return name.strip() or DEFAULT_BOX_NAME, parse_items(flavors)


def build_box(products: ProductRepository, name: str, selections: list[CartSelection]) -> CustomBox:
    return assemble_box(
        products,
        selections,
        name=name,
        unit_price_cents=settings.CUSTOM_BOX_UNIT_PRICE_CENTS,
    )


def _print_quote(cart: Cart) -> None:
    result = quote(cart)
    display_lines(result.lines)
    display_totals(result.totals)
    click.echo()
    if result.units_until_minimum:
        click.echo(f"Add {result.units_until_minimum} more for the minimum order.")
    if result.units_until_discount:
        click.echo(f"Add {result.units_until_discount} more for the bulk discount.")
    else:
        click.echo("Bulk discount applied!")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def cart_quote(items: str) -> None:
    """Show what a cart would cost before checkout."""
    try:
        cart = build_cart(product_repository(), parse_items(items))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_quote(cart)


@click.command("box")
@click.option("--name", default=DEFAULT_BOX_NAME, show_default=True, help="Box name.")
@click.option("--flavors", required=True, help="Flavors as 'ProductId:Qty,ProductId:Qty'.")
def cart_box(name: str, flavors: str) -> None:
    """Assemble a custom box and price it as a single cart line."""
    try:
        box = build_box(product_repository(), name, parse_items(flavors))
        cart = Cart()
        cart.add_item(box.to_line_item())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for flavor, count in box.composition.items():
        click.echo(f"  {count:>3} x {flavor}")
    click.echo()
    _print_quote(cart)
