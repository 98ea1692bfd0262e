"""Domain service: Order Validator.

Turns a raw ``OrderSubmission`` into a ``NewOrder`` command or raises.
Checks run in a fixed order and the first failing step wins:

  1. customer and fulfillment fields (all failing fields reported together)
  2. item list shape
  3. minimum order quantity (a ``BusinessRuleViolation``, not a
     ``ValidationError``, so callers can show a distinct message)
  4. delivery address, when delivering

Any total the client may have computed is ignored; the command's
totals come from the Pricing Policy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bakery.domain.exceptions import BusinessRuleViolation, FieldError, ValidationError
from bakery.domain.model.order import (
    Customer,
    Fulfillment,
    FulfillmentMode,
    NewOrder,
    OrderLineItem,
)
from bakery.domain.model.value_objects import freeze_selections
from bakery.domain.service.pricing import MINIMUM_ORDER_QUANTITY, compute_cart_aggregate

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_FLAVOR_RE = re.compile(r"flavor", re.IGNORECASE)

MINIMUM_ORDER_MESSAGE = f"Minimum order quantity is {MINIMUM_ORDER_QUANTITY} macarons"


@dataclass(frozen=True)
class SubmittedItem:
    """One item as the client sent it.  Nothing here is trusted yet."""

    product_id: int | None = None
    name: str = ""
    price: int | None = None
    quantity: int | None = None
    variant_selections: dict[str, str] | None = None


@dataclass(frozen=True)
class OrderSubmission:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    pickup_date: str = ""
    pickup_time: str = ""
    delivery_option: str = "pickup"
    delivery_address: str = ""
    delivery_city: str = ""
    delivery_postal_code: str = ""
    special_instructions: str | None = None
    items: list[SubmittedItem] = field(default_factory=list)


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value or ""))


def canadian_spelling(name: str) -> str:
    """Replace "flavor" with "flavour", keeping a leading capital."""
    return _FLAVOR_RE.sub(
        lambda m: "Flavour" if m.group(0)[0].isupper() else "flavour", name
    )


def _clean(value: str | None) -> str:
    return (value or "").strip()


class OrderValidator:

    def validate(self, submission: OrderSubmission) -> NewOrder:
        mode = self._check_fields(submission)
        self._check_items(submission.items)
        self._check_minimum(submission.items)
        if mode is FulfillmentMode.DELIVERY:
            self._check_delivery_address(submission)
        return self._build_command(submission, mode)

    # --- Step 1 ---------------------------------------------------------------

    @staticmethod
    def _check_fields(s: OrderSubmission) -> FulfillmentMode:
        errors: list[FieldError] = []

        if not _clean(s.first_name):
            errors.append(FieldError("firstName", "First name is required"))
        if not _clean(s.last_name):
            errors.append(FieldError("lastName", "Last name is required"))
        if not is_valid_email(_clean(s.email)):
            errors.append(FieldError("email", "Invalid email address"))
        if not _clean(s.phone):
            errors.append(FieldError("phone", "Phone number is required"))

        option = _clean(s.delivery_option).lower() or FulfillmentMode.PICKUP.value
        try:
            mode = FulfillmentMode(option)
        except ValueError:
            errors.append(
                FieldError("deliveryOption", "Delivery option must be 'pickup' or 'delivery'")
            )
            mode = FulfillmentMode.PICKUP

        if mode is FulfillmentMode.PICKUP:
            if not _clean(s.pickup_date):
                errors.append(FieldError("pickupDate", "Pickup date is required"))
            if not _clean(s.pickup_time):
                errors.append(FieldError("pickupTime", "Pickup time is required"))

        if errors:
            raise ValidationError.from_fields(errors)
        return mode

    # --- Step 2 ---------------------------------------------------------------

    @staticmethod
    def _check_items(items: list[SubmittedItem]) -> None:
        if not items:
            raise ValidationError.from_fields(
                [FieldError("items", "Order must contain at least one item")]
            )

        errors: list[FieldError] = []
        for index, item in enumerate(items):
            if item.quantity is None or item.quantity < 1:
                errors.append(
                    FieldError(f"items[{index}].quantity", "Quantity must be at least 1")
                )
            if item.price is None:
                errors.append(FieldError(f"items[{index}].price", "Price is required"))
            elif item.price < 0:
                errors.append(
                    FieldError(f"items[{index}].price", "Price cannot be negative")
                )
            if not _clean(item.name):
                errors.append(FieldError(f"items[{index}].name", "Item name is required"))
        if errors:
            raise ValidationError.from_fields(errors)

    # --- Step 3 ---------------------------------------------------------------

    @staticmethod
    def _check_minimum(items: list[SubmittedItem]) -> None:
        total_quantity = sum(item.quantity or 0 for item in items)
        if total_quantity < MINIMUM_ORDER_QUANTITY:
            raise BusinessRuleViolation(MINIMUM_ORDER_MESSAGE)

    # --- Step 4 ---------------------------------------------------------------

    @staticmethod
    def _check_delivery_address(s: OrderSubmission) -> None:
        errors: list[FieldError] = []
        if not _clean(s.delivery_address):
            errors.append(FieldError("deliveryAddress", "Delivery address is required"))
        if not _clean(s.delivery_city):
            errors.append(FieldError("deliveryCity", "Delivery city is required"))
        if not _clean(s.delivery_postal_code):
            errors.append(FieldError("deliveryPostalCode", "Postal code is required"))
        if errors:
            raise ValidationError.from_fields(errors)

    # --- Normalized command ---------------------------------------------------

    @staticmethod
    def _build_command(s: OrderSubmission, mode: FulfillmentMode) -> NewOrder:
        items = tuple(
            OrderLineItem(
                product_id=item.product_id if item.product_id is not None else 0,
                name=canadian_spelling(_clean(item.name)),
                unit_price_cents=item.price,  # type: ignore[arg-type]
                quantity=item.quantity,  # type: ignore[arg-type]
                variant_selections=freeze_selections(item.variant_selections),
            )
            for item in s.items
        )

        delivery = mode is FulfillmentMode.DELIVERY
        return NewOrder(
            customer=Customer(
                first_name=_clean(s.first_name),
                last_name=_clean(s.last_name),
                email=_clean(s.email),
                phone=_clean(s.phone),
            ),
            fulfillment=Fulfillment(
                mode=mode,
                pickup_date=_clean(s.pickup_date),
                pickup_time=_clean(s.pickup_time),
                delivery_address=_clean(s.delivery_address) if delivery else "",
                delivery_city=_clean(s.delivery_city) if delivery else "",
                delivery_postal_code=_clean(s.delivery_postal_code) if delivery else "",
            ),
            items=items,
            totals=compute_cart_aggregate(items),
            special_instructions=_clean(s.special_instructions) or None,
        )
