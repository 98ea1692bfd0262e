"""Cart aggregate — the customer's selection before checkout.

The Cart is client-session state: it is never persisted server-side.
It owns quantity mutation and delegates every price computation to the
Pricing Policy.  Entries are keyed by identity (product + variant
selections), so two additions merge only when both match exactly.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from uuid import uuid4

from bakery.domain.exceptions import BusinessRuleViolation, ValidationError
from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import (
    Money,
    Quantity,
    VariantSelections,
    freeze_selections,
    selections_key,
)
from bakery.domain.service.pricing import (
    MINIMUM_ORDER_QUANTITY,
    PriceBreakdown,
    compute_cart_aggregate,
    compute_line_total,
)

IdentityKey = tuple[int, VariantSelections, str]

CUSTOM_BOX_PRODUCT_ID = 0
DEFAULT_BOX_NAME = "Custom Macaron Box"


@dataclass
class CartLineItem:
    """One entry in the cart.

    ``unit_price_cents`` is captured when the item is created and never
    re-read from the catalog afterwards.  ``line_token`` is part of the
    identity but never displayed; custom boxes set it so that two boxes
    with the same contents stay separate lines.
    """

    product_id: int
    display_name: str
    unit_price_cents: int
    quantity: int
    variant_selections: VariantSelections = ()
    line_token: str = ""

    def __post_init__(self) -> None:
        Quantity(self.quantity)
        Money(self.unit_price_cents)
        self.variant_selections = freeze_selections(self.variant_selections)

    @property
    def identity_key(self) -> IdentityKey:
        return (self.product_id, selections_key(self.variant_selections), self.line_token)

    @property
    def line_total_cents(self) -> int:
        return compute_line_total(self.unit_price_cents, self.quantity)

    @staticmethod
    def from_product(
        product: Product,
        quantity: int,
        variant_selections: dict[str, str] | None = None,
        display_name: str | None = None,
    ) -> CartLineItem:
        """Select a catalog product, locking in its current price."""
        if not product.available:
            raise ValidationError(f"{product.name} is currently unavailable")
        return CartLineItem(
            product_id=product.id,
            display_name=display_name or product.name,
            unit_price_cents=product.unit_price.cents,
            quantity=quantity,
            variant_selections=freeze_selections(variant_selections),
        )


def identity_key_for(
    product_id: int,
    variant_selections: dict[str, str] | None = None,
    line_token: str = "",
) -> IdentityKey:
    return (product_id, selections_key(freeze_selections(variant_selections)), line_token)


@dataclass
class Cart:
    """Ordered collection of line items with unique identity keys."""

    _entries: dict[IdentityKey, CartLineItem] = field(default_factory=dict)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: CartLineItem) -> None:
        """Append *item*, or add its quantity to an identical entry."""
        existing = self._entries.get(item.identity_key)
        if existing is not None:
            existing.quantity += item.quantity
            return
        self._entries[item.identity_key] = CartLineItem(
            product_id=item.product_id,
            display_name=item.display_name,
            unit_price_cents=item.unit_price_cents,
            quantity=item.quantity,
            variant_selections=item.variant_selections,
            line_token=item.line_token,
        )

    def update_quantity(self, key: IdentityKey, new_quantity: int) -> None:
        """Set the quantity of an entry; zero or less removes it."""
        if new_quantity <= 0:
            self.remove_item(key)
            return
        entry = self._entries.get(key)
        if entry is not None:
            entry.quantity = Quantity(new_quantity).value

    def remove_item(self, key: IdentityKey) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> list[CartLineItem]:
        return list(self._entries.values())

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self._entries.values())

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def get(self, key: IdentityKey) -> CartLineItem | None:
        return self._entries.get(key)

    def get_totals(self) -> PriceBreakdown:
        return compute_cart_aggregate(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(list(self._entries.values()))


@dataclass
class CustomBox:
    """A named assortment of flavors sold as a single cart line.

    The box is priced per macaron at the base rate; the bulk discount is
    left to the Pricing Policy so it is applied exactly once.
    """

    name: str = DEFAULT_BOX_NAME
    unit_price_cents: int = 200
    _counts: dict[int, int] = field(default_factory=dict)
    _names: dict[int, str] = field(default_factory=dict)

    def change(self, product: Product, delta: int) -> None:
        """Add (or with a negative *delta*, take out) macarons of one flavor."""
        new_count = max(0, self._counts.get(product.id, 0) + delta)
        if new_count == 0:
            self._counts.pop(product.id, None)
            self._names.pop(product.id, None)
            return
        self._counts[product.id] = new_count
        self._names[product.id] = product.name

    @property
    def total_quantity(self) -> int:
        return sum(self._counts.values())

    @property
    def composition(self) -> dict[str, int]:
        return {self._names[pid]: count for pid, count in self._counts.items()}

    def to_line_item(self) -> CartLineItem:
        if self.total_quantity < MINIMUM_ORDER_QUANTITY:
            raise BusinessRuleViolation(
                f"Your custom box must contain at least {MINIMUM_ORDER_QUANTITY} macarons"
            )
        selections = {flavor: str(count) for flavor, count in self.composition.items()}
        return CartLineItem(
            product_id=CUSTOM_BOX_PRODUCT_ID,
            display_name=self.name.strip() or DEFAULT_BOX_NAME,
            unit_price_cents=self.unit_price_cents,
            quantity=self.total_quantity,
            variant_selections=freeze_selections(selections),
            line_token=uuid4().hex[:8],
        )

    def reset(self) -> None:
        self._counts.clear()
        self._names.clear()
