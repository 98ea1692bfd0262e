"""Application service: order confirmation artifacts and their dispatch.

For every persisted order two artifacts are built from the same data:
one for the customer and one for the business.  The invoice view uses
the customer artifact directly; the dispatcher renders both to HTML and
emails them.

Dispatch is best-effort.  It runs after the order has been stored, makes
a single attempt per channel, and never raises: every failure is logged
as a DispatchError and the order stands.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from bakery.application import email_templates
from bakery.application.email_port import EmailMessage, EmailSender
from bakery.application.formatting import format_cents, format_fulfillment, format_order_date
from bakery.domain.exceptions import DispatchError
from bakery.domain.model.order import Order
from bakery.domain.service.order_validator import is_valid_email

logger = structlog.get_logger(__name__)

CUSTOMER = "customer"
BUSINESS = "business"


@dataclass(frozen=True)
class BusinessProfile:
    name: str
    email: str
    from_email: str
    location: str = ""
    timezone: str = "UTC"


@dataclass(frozen=True)
class ArtifactRow:
    name: str
    quantity: int
    unit_price: str
    line_total: str
    annotation: str = ""


@dataclass(frozen=True)
class ConfirmationArtifact:
    audience: str
    order_number: str
    order_date: str
    rows: tuple[ArtifactRow, ...]
    total_quantity: int
    subtotal: str
    discount: str | None
    grand_total: str
    fulfillment: str
    special_instructions: str | None
    customer_name: str
    customer_email: str
    customer_phone: str
    business_name: str
    business_location: str


def build_artifact(order: Order, business: BusinessProfile, audience: str = CUSTOMER) -> ConfirmationArtifact:
    totals = order.totals
    return ConfirmationArtifact(
        audience=audience,
        order_number=order.order_number,
        order_date=format_order_date(order.created_at, business.timezone),
        rows=tuple(
            ArtifactRow(
                name=item.name,
                quantity=item.quantity,
                unit_price=format_cents(item.unit_price_cents),
                line_total=format_cents(item.line_total_cents),
                annotation=item.annotation,
            )
            for item in order.items
        ),
        total_quantity=totals.total_quantity,
        subtotal=format_cents(totals.subtotal_cents),
        discount=f"-{format_cents(totals.discount_cents)}" if totals.discount_applied else None,
        grand_total=format_cents(totals.total_cents),
        fulfillment=format_fulfillment(order.fulfillment),
        special_instructions=order.special_instructions,
        customer_name=order.customer.full_name,
        customer_email=order.customer.email,
        customer_phone=order.customer.phone,
        business_name=business.name,
        business_location=business.location,
    )


def build_messages(order: Order, business: BusinessProfile) -> dict[str, EmailMessage]:
    customer = build_artifact(order, business, CUSTOMER)
    internal = build_artifact(order, business, BUSINESS)
    return {
        CUSTOMER: EmailMessage(
            to=order.customer.email,
            sender=business.from_email,
            reply_to=business.email,
            subject=f"Your {business.name} Order #{order.order_number}",
            html_body=email_templates.render_customer_email(customer, business.email),
        ),
        BUSINESS: EmailMessage(
            to=business.email,
            sender=business.from_email,
            reply_to=order.customer.email,
            subject=f"New Order #{order.order_number} - {business.name}",
            html_body=email_templates.render_business_email(internal),
        ),
    }


class ConfirmationDispatcher:

    def __init__(self, sender: EmailSender | None, business: BusinessProfile) -> None:
        self._sender = sender
        self._business = business

    def dispatch(self, order: Order) -> list[str]:
        """Email both confirmations; return the channels that succeeded."""
        log = logger.bind(order_number=order.order_number)

        if self._sender is None:
            log.warning("confirmation_skipped", reason="no email transport configured")
            return []

        try:
            messages = build_messages(order, self._business)
        except Exception as exc:  # noqa: BLE001
            log.error("confirmation_build_failed", error=str(DispatchError(str(exc))))
            return []

        sent: list[str] = []
        if is_valid_email(order.customer.email):
            if self._send(CUSTOMER, messages[CUSTOMER], log):
                sent.append(CUSTOMER)
        else:
            log.error("confirmation_skipped", channel=CUSTOMER, reason="invalid customer email")

        if self._send(BUSINESS, messages[BUSINESS], log):
            sent.append(BUSINESS)

        log.info("confirmation_dispatched", channels=sent)
        return sent

    def _send(self, channel: str, message: EmailMessage, log) -> bool:
        try:
            message_id = self._sender.send(message)  # type: ignore[union-attr]
        except DispatchError as exc:
            log.error("confirmation_failed", channel=channel, error=str(exc))
            return False
        except Exception as exc:  # noqa: BLE001
            log.exception("confirmation_failed", channel=channel, error=str(exc))
            return False
        log.debug("confirmation_sent", channel=channel, message_id=message_id)
        return True
