"""Application service: cart building, quoting and the checkout gate.

These functions play the client's role: they fill a Cart from catalog
selections, show an estimate, and refuse to proceed to submission while
the cart is below the minimum.  The server re-checks everything in
``OrderValidator``; nothing computed here is sent as authoritative.
"""

from __future__ import annotations

from bakery.application.dto import CartSelection, OrderLineItemDTO, QuoteDTO
from bakery.domain.exceptions import BusinessRuleViolation, EntityNotFoundError
from bakery.domain.model.cart import DEFAULT_BOX_NAME, Cart, CartLineItem, CustomBox
from bakery.domain.repository.product_repository import ProductRepository
from bakery.domain.service.order_validator import (
    MINIMUM_ORDER_MESSAGE,
    OrderSubmission,
    SubmittedItem,
)
from bakery.domain.service.pricing import (
    MINIMUM_ORDER_QUANTITY,
    units_until_discount,
    units_until_minimum,
)


def build_cart(product_repo: ProductRepository, selections: list[CartSelection]) -> Cart:
    """Add each selection to a fresh cart at the product's current price."""
    cart = Cart()
    for selection in selections:
        product = product_repo.get_by_id(selection.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{selection.product_id} not found")
        cart.add_item(
            CartLineItem.from_product(
                product,
                quantity=selection.quantity,
                variant_selections=selection.variant_selections,
            )
        )
    return cart


def assemble_box(
    product_repo: ProductRepository,
    selections: list[CartSelection],
    name: str = DEFAULT_BOX_NAME,
    unit_price_cents: int = 200,
) -> CustomBox:
    """Fill a custom box from catalog flavors.  ``to_line_item`` enforces the size."""
    box = CustomBox(name=name, unit_price_cents=unit_price_cents)
    for selection in selections:
        product = product_repo.get_by_id(selection.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{selection.product_id} not found")
        box.change(product, selection.quantity)
    return box


def quote(cart: Cart) -> QuoteDTO:
    totals = cart.get_totals()
    return QuoteDTO(
        lines=[
            OrderLineItemDTO(
                product_id=item.product_id,
                name=item.display_name,
                price=item.unit_price_cents,
                quantity=item.quantity,
                line_total=item.line_total_cents,
                variant_selections=dict(item.variant_selections),
            )
            for item in cart
        ],
        totals=totals,
        units_until_minimum=units_until_minimum(totals.total_quantity),
        units_until_discount=units_until_discount(totals.total_quantity),
    )


def ensure_minimum_order(cart: Cart) -> None:
    """Checkout gate: at least ``MINIMUM_ORDER_QUANTITY`` units in the cart."""
    if cart.total_quantity < MINIMUM_ORDER_QUANTITY:
        raise BusinessRuleViolation(MINIMUM_ORDER_MESSAGE)


def submission_items(cart: Cart) -> list[SubmittedItem]:
    """Snapshot the cart's lines in the shape the order endpoint accepts."""
    return [
        SubmittedItem(
            product_id=item.product_id,
            name=item.display_name,
            price=item.unit_price_cents,
            quantity=item.quantity,
            variant_selections=dict(item.variant_selections) or None,
        )
        for item in cart
    ]


def prepare_submission(cart: Cart, **customer_fields: str | None) -> OrderSubmission:
    """Gate the cart and combine it with the checkout form's fields."""
    ensure_minimum_order(cart)
    return OrderSubmission(items=submission_items(cart), **customer_fields)  # type: ignore[arg-type]
