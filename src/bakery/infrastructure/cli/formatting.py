"""Shared table output for CLI commands."""

from __future__ import annotations

import click

from bakery.application.dto import OrderDTO, OrderLineItemDTO
from bakery.application.formatting import format_cents, format_order_date, format_pickup
from bakery.domain.model.value_objects import describe_selections
from bakery.domain.service.pricing import PriceBreakdown
from bakery.infrastructure import settings


def display_lines(lines: list[OrderLineItemDTO]) -> None:
    click.echo(f"  {'Item':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*56}")
    for item in lines:
        click.echo(
            f"  {item.name:<28} {item.quantity:>5} "
            f"{format_cents(item.price):>10} {format_cents(item.line_total):>10}"
        )
        if item.variant_selections:
            annotation = describe_selections(tuple(item.variant_selections.items()))
            click.echo(f"    ({annotation})")
    click.echo(f"  {'-'*56}")


def display_totals(totals: PriceBreakdown) -> None:
    click.echo(f"  {'Subtotal':<36} {format_cents(totals.subtotal_cents):>20}")
    if totals.discount_applied:
        click.echo(
            f"  {'Bulk discount':<36} {'-' + format_cents(totals.discount_cents):>20}"
        )
    click.echo(f"  {'Total':<36} {format_cents(totals.total_cents):>20}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_number}")
    click.echo(f"Customer: {dto.first_name} {dto.last_name} <{dto.email}>  {dto.phone}")
    click.echo(f"Created:  {format_order_date(dto.created_at, settings.BUSINESS_TIMEZONE)}")
    if dto.delivery_option == "delivery":
        click.echo(
            f"Delivery: {dto.delivery_address}, {dto.delivery_city} {dto.delivery_postal_code}"
        )
    click.echo(f"Pickup:   {format_pickup(dto.pickup_date, dto.pickup_time)}")
    if dto.special_instructions:
        click.echo(f"Notes:    {dto.special_instructions}")
    click.echo()
    display_lines(dto.items)
    display_totals(
        PriceBreakdown(
            subtotal_cents=dto.subtotal,
            total_quantity=dto.total_quantity,
            discount_applied=dto.discount_applied,
            total_cents=dto.total,
        )
    )
