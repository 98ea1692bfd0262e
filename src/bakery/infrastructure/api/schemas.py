"""Request/response schemas for the HTTP API (camelCase on the wire).

Request fields are deliberately permissive: missing or empty values are
let through so ``OrderValidator`` can report them with its own messages.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bakery.domain.service.order_validator import OrderSubmission, SubmittedItem


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Requests -----------------------------------------------------------------


class ColorIn(CamelModel):
    name: str
    value: str = ""


class OrderItemIn(CamelModel):
    product_id: int | None = Field(
        None, validation_alias=AliasChoices("productId", "flavorId", "product_id")
    )
    name: str = ""
    price: int | None = None
    quantity: int | None = None
    variant_selections: dict[str, str] | None = None
    shell_color: ColorIn | None = None
    filling_color: ColorIn | None = None

    def to_submitted(self) -> SubmittedItem:
        selections = dict(self.variant_selections or {})
        if self.shell_color:
            selections.setdefault("Shell", self.shell_color.name)
        if self.filling_color:
            selections.setdefault("Filling", self.filling_color.name)
        return SubmittedItem(
            product_id=self.product_id,
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            variant_selections=selections or None,
        )


class OrderIn(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    pickup_date: str | None = None
    pickup_time: str | None = None
    delivery_option: str | None = "pickup"
    delivery_address: str | None = None
    delivery_city: str | None = None
    delivery_postal_code: str | None = None
    special_instructions: str | None = None
    items: list[OrderItemIn] = Field(default_factory=list)

    def to_submission(self) -> OrderSubmission:
        return OrderSubmission(
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            email=self.email or "",
            phone=self.phone or "",
            pickup_date=self.pickup_date or "",
            pickup_time=self.pickup_time or "",
            delivery_option=self.delivery_option or "pickup",
            delivery_address=self.delivery_address or "",
            delivery_city=self.delivery_city or "",
            delivery_postal_code=self.delivery_postal_code or "",
            special_instructions=self.special_instructions,
            items=[item.to_submitted() for item in self.items],
        )


# --- Responses ----------------------------------------------------------------


class ProductOut(CamelModel):
    id: int
    name: str
    description: str
    price: int
    image_url: str
    available: bool
    featured: bool
    tags: list[str]


class OrderItemOut(CamelModel):
    product_id: int
    name: str
    price: int
    quantity: int
    line_total: int
    variant_selections: dict[str, str]


class OrderOut(CamelModel):
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
    items: list[OrderItemOut]
    total_quantity: int
    subtotal: int
    discount_applied: bool
    total: int
    created_at: datetime


class InvoiceRowOut(CamelModel):
    name: str
    quantity: int
    unit_price: str
    line_total: str
    annotation: str


class InvoiceOut(CamelModel):
    order_number: str
    order_date: str
    rows: list[InvoiceRowOut]
    total_quantity: int
    subtotal: str
    discount: str | None
    grand_total: str
    fulfillment: str
    special_instructions: str | None
    customer_name: str
    business_name: str
    business_location: str


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ErrorOut(BaseModel):
    message: str
    errors: list[FieldErrorOut] | None = None
