"""CLI commands for placing and looking up orders."""

from __future__ import annotations

import click

from bakery.application.checkout import build_cart, prepare_submission
from bakery.application.formatting import format_cents
from bakery.application.show_order import ListOrdersHandler, ShowOrderHandler
from bakery.application.submit_order import SubmitOrderHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import (
    confirmation_dispatcher,
    order_repository,
    product_repository,
)
from bakery.infrastructure.cli.cart_commands import build_box, parse_box, parse_items
from bakery.infrastructure.cli.formatting import display_order


@click.command("place")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--email", required=True)
@click.option("--phone", required=True)
@click.option("--items", default="", help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option(
    "--box",
    "boxes",
    multiple=True,
    help="Custom box as 'Name=ProductId:Qty,...'. Repeatable.",
)
@click.option("--pickup-date", default="", help="YYYY-MM-DD.")
@click.option("--pickup-time", default="", help="HH:MM, 24-hour.")
@click.option("--delivery", is_flag=True, default=False, help="Deliver instead of pickup.")
@click.option("--address", default="", help="Delivery street address.")
@click.option("--city", default="", help="Delivery city.")
@click.option("--postal-code", default="", help="Delivery postal code.")
@click.option("--instructions", default=None, help="Special instructions.")
def order_place(
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    items: str,
    boxes: tuple[str, ...],
    pickup_date: str,
    pickup_time: str,
    delivery: bool,
    address: str,
    city: str,
    postal_code: str,
    instructions: str | None,
) -> None:
    """Build a cart, check out and store the order."""
    if not items and not boxes:
        raise click.UsageError("Provide --items, --box, or both.")
    selections = parse_items(items) if items else []
    box_specs = [parse_box(raw) for raw in boxes]

    handler = SubmitOrderHandler(
        order_repo=order_repository(),
        dispatcher=confirmation_dispatcher(),
    )

    try:
        products = product_repository()
        cart = build_cart(products, selections)
        for name, flavors in box_specs:
            cart.add_item(build_box(products, name, flavors).to_line_item())
        submission = prepare_submission(
            cart,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            pickup_date=pickup_date,
            pickup_time=pickup_time,
            delivery_option="delivery" if delivery else "pickup",
            delivery_address=address,
            delivery_city=city,
            delivery_postal_code=postal_code,
            special_instructions=instructions,
        )
        dto = handler.handle(submission)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    cart.clear()
    click.echo("Order placed.")
    display_order(dto)


@click.command("show")
@click.option("--number", "order_number", required=True, help="Order number, e.g. MAC-12345.")
def order_show(order_number: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
def order_list() -> None:
    """List every stored order."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Number':<12} {'Customer':<24} {'Qty':>5} {'Total':>10}")
    click.echo("-" * 54)
    for o in orders:
        name = f"{o.first_name} {o.last_name}"
        click.echo(f"{o.order_number:<12} {name:<24} {o.total_quantity:>5} {format_cents(o.total):>10}")
