"""Order aggregate — an immutable record of a submitted cart.

Orders are created exactly once, by the repository, from a validated
``NewOrder`` command.  They are never mutated or deleted afterwards:
every dataclass here is frozen and the item snapshot is a tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bakery.domain.model.value_objects import VariantSelections, describe_selections
from bakery.domain.service.pricing import PriceBreakdown, compute_line_total


class FulfillmentMode(Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"


@dataclass(frozen=True)
class Customer:
    first_name: str
    last_name: str
    email: str
    phone: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Fulfillment:
    """Pickup or delivery details.

    Pickup date/time may be empty for delivery orders; they are then
    arranged with the customer by email.
    """

    mode: FulfillmentMode = FulfillmentMode.PICKUP
    pickup_date: str = ""
    pickup_time: str = ""
    delivery_address: str = ""
    delivery_city: str = ""
    delivery_postal_code: str = ""

    @property
    def is_delivery(self) -> bool:
        return self.mode is FulfillmentMode.DELIVERY

    @property
    def has_pickup_slot(self) -> bool:
        return bool(self.pickup_date and self.pickup_time)


@dataclass(frozen=True)
class OrderLineItem:
    """Snapshot of one cart line at submission time (price locked)."""

    product_id: int
    name: str
    unit_price_cents: int
    quantity: int
    variant_selections: VariantSelections = ()

    @property
    def line_total_cents(self) -> int:
        return compute_line_total(self.unit_price_cents, self.quantity)

    @property
    def annotation(self) -> str:
        return describe_selections(self.variant_selections)


@dataclass(frozen=True)
class NewOrder:
    """Validated order-creation command.

    ``totals`` always comes from the Pricing Policy over ``items``;
    see ``OrderValidator``.
    """

    customer: Customer
    fulfillment: Fulfillment
    items: tuple[OrderLineItem, ...]
    totals: PriceBreakdown
    special_instructions: str | None = None


@dataclass(frozen=True)
class Order:
    order_number: str
    customer: Customer
    fulfillment: Fulfillment
    items: tuple[OrderLineItem, ...]
    totals: PriceBreakdown
    created_at: datetime
    special_instructions: str | None = None

    @property
    def total_cents(self) -> int:
        return self.totals.total_cents

    @staticmethod
    def from_command(command: NewOrder, order_number: str, created_at: datetime) -> Order:
        return Order(
            order_number=order_number,
            customer=command.customer,
            fulfillment=command.fulfillment,
            items=tuple(command.items),
            totals=command.totals,
            created_at=created_at,
            special_instructions=command.special_instructions,
        )
