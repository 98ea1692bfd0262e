"""Domain service: Pricing Policy.

The only place in the codebase that turns line items into money.  The
cart estimate, order creation, confirmation artifacts and CLI quotes
all call ``compute_cart_aggregate``; nothing else sums prices.

Bulk discount: once the whole cart holds ``BULK_DISCOUNT_THRESHOLD``
units, every unit is charged 90% of its own price, floored to the cent
*per item* before multiplying by quantity.  This is not the same as 10%
off the subtotal; the two can differ by a cent or more.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

MINIMUM_ORDER_QUANTITY = 12
BULK_DISCOUNT_THRESHOLD = 50
BULK_DISCOUNT_PERCENT_PAID = 90


class PricedLine(Protocol):
    """Anything with a captured unit price and a quantity."""

    @property
    def unit_price_cents(self) -> int: ...

    @property
    def quantity(self) -> int: ...


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal_cents: int
    total_quantity: int
    discount_applied: bool
    total_cents: int

    @property
    def discount_cents(self) -> int:
        return self.subtotal_cents - self.total_cents


EMPTY_BREAKDOWN = PriceBreakdown(
    subtotal_cents=0, total_quantity=0, discount_applied=False, total_cents=0
)


def compute_line_total(unit_price_cents: int, quantity: int) -> int:
    return unit_price_cents * quantity


def discounted_unit_price(unit_price_cents: int) -> int:
    """Bulk rate for one unit: ``floor(unit * 0.9)`` in exact integer math."""
    return unit_price_cents * BULK_DISCOUNT_PERCENT_PAID // 100


def compute_cart_aggregate(items: Iterable[PricedLine]) -> PriceBreakdown:
    """Aggregate a list of line items into a :class:`PriceBreakdown`.

    The discount decision is made once for the whole list (by total
    quantity), then applied to every line.
    """
    lines = [(item.unit_price_cents, item.quantity) for item in items]
    if not lines:
        return EMPTY_BREAKDOWN

    total_quantity = sum(qty for _, qty in lines)
    subtotal = sum(compute_line_total(unit, qty) for unit, qty in lines)
    discount_applied = total_quantity >= BULK_DISCOUNT_THRESHOLD

    if discount_applied:
        total = sum(
            compute_line_total(discounted_unit_price(unit), qty) for unit, qty in lines
        )
    else:
        total = subtotal

    return PriceBreakdown(
        subtotal_cents=subtotal,
        total_quantity=total_quantity,
        discount_applied=discount_applied,
        total_cents=total,
    )


def units_until_discount(total_quantity: int) -> int:
    """How many more units unlock the bulk rate (0 once it applies)."""
    return max(0, BULK_DISCOUNT_THRESHOLD - total_quantity)


def units_until_minimum(total_quantity: int) -> int:
    """How many more units are needed before checkout is allowed."""
    return max(0, MINIMUM_ORDER_QUANTITY - total_quantity)
