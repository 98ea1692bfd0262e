"""Display formatting for money, dates and pickup slots."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from bakery.domain.model.order import Fulfillment
from bakery.domain.model.value_objects import Money

TO_BE_ARRANGED = "To be arranged via email"


def format_cents(cents: int) -> str:
    return str(Money(cents))


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(value: date) -> str:
    """``October 19th, 2026``"""
    return f"{value:%B} {_ordinal(value.day)}, {value.year}"


def format_full_date(value: date) -> str:
    """``Monday, October 19th, 2026``"""
    return f"{value:%A}, {format_long_date(value)}"


def format_order_date(value: datetime | None, timezone: str | None = None) -> str:
    """Long date of *value* as seen in *timezone*.

    Naive datetimes are taken as already local and are not converted.
    """
    zone = ZoneInfo(timezone) if timezone else None
    if value is None:
        value = datetime.now(zone)
    elif zone is not None and value.tzinfo is not None:
        value = value.astimezone(zone)
    return format_long_date(value)


def format_time_12h(value: str) -> str:
    """``14:30`` -> ``2:30 PM``.  Raises ValueError for non-numeric hours."""
    hour_part, _, minute = value.partition(":")
    hour = int(hour_part)
    ampm = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute or '00'} {ampm}"


def format_pickup(pickup_date: str, pickup_time: str) -> str:
    if not pickup_date or not pickup_time:
        return TO_BE_ARRANGED
    try:
        parsed = date.fromisoformat(pickup_date)
    except ValueError:
        return TO_BE_ARRANGED
    try:
        return f"{format_full_date(parsed)} at {format_time_12h(pickup_time)}"
    except ValueError:
        return f"{pickup_date} at {pickup_time}"


def format_fulfillment(fulfillment: Fulfillment) -> str:
    if fulfillment.is_delivery:
        address = ", ".join(
            part
            for part in (
                fulfillment.delivery_address,
                fulfillment.delivery_city,
                fulfillment.delivery_postal_code,
            )
            if part
        )
        when = format_pickup(fulfillment.pickup_date, fulfillment.pickup_time)
        return f"Delivery to {address} ({when})"
    return f"Pickup: {format_pickup(fulfillment.pickup_date, fulfillment.pickup_time)}"
