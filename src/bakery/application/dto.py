"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals.  Amounts stay in integer cents;
formatting is the presentation layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from bakery.domain.model.order import Order
from bakery.domain.model.product import Product
from bakery.domain.service.pricing import PriceBreakdown


@dataclass(frozen=True)
class CartSelection:
    """Input: a catalog product and how many of it to put in the cart."""

    product_id: int
    quantity: int
    variant_selections: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: int
    image_url: str
    available: bool
    featured: bool
    tags: list[str]


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: int
    name: str
    price: int
    quantity: int
    line_total: int
    variant_selections: dict[str, str]


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as returned to clients."""

    order_number: str
    first_name: str
    last_name: str
    email: str
    phone: str
    delivery_option: str
    pickup_date: str
    pickup_time: str
    delivery_address: str
    delivery_city: str
    delivery_postal_code: str
    special_instructions: str | None
    items: list[OrderLineItemDTO]
    total_quantity: int
    subtotal: int
    discount_applied: bool
    total: int
    created_at: datetime


@dataclass(frozen=True)
class QuoteDTO:
    """Output: a cart estimate for display before checkout."""

    lines: list[OrderLineItemDTO]
    totals: PriceBreakdown
    units_until_minimum: int
    units_until_discount: int


# --- Mapping ------------------------------------------------------------------


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.unit_price.cents,
        image_url=product.image_ref,
        available=product.available,
        featured=product.is_featured,
        tags=sorted(product.tags),
    )


def to_order_dto(order: Order) -> OrderDTO:
    f = order.fulfillment
    return OrderDTO(
        order_number=order.order_number,
        first_name=order.customer.first_name,
        last_name=order.customer.last_name,
        email=order.customer.email,
        phone=order.customer.phone,
        delivery_option=f.mode.value,
        pickup_date=f.pickup_date,
        pickup_time=f.pickup_time,
        delivery_address=f.delivery_address,
        delivery_city=f.delivery_city,
        delivery_postal_code=f.delivery_postal_code,
        special_instructions=order.special_instructions,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                name=item.name,
                price=item.unit_price_cents,
                quantity=item.quantity,
                line_total=item.line_total_cents,
                variant_selections=dict(item.variant_selections),
            )
            for item in order.items
        ],
        total_quantity=order.totals.total_quantity,
        subtotal=order.totals.subtotal_cents,
        discount_applied=order.totals.discount_applied,
        total=order.totals.total_cents,
        created_at=order.created_at,
    )
