"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from bakery.application.confirmation import BusinessProfile, ConfirmationDispatcher
from bakery.application.email_port import EmailSender
from bakery.infrastructure import settings
from bakery.infrastructure.catalog_seed import default_products
from bakery.infrastructure.email.resend_sender import ResendEmailSender
from bakery.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from bakery.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(default_products())


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings.DATA_DIR / "orders.json")


def business_profile() -> BusinessProfile:
    return BusinessProfile(
        name=settings.BUSINESS_NAME,
        email=settings.BUSINESS_EMAIL,
        from_email=settings.FROM_EMAIL,
        location=settings.BUSINESS_LOCATION,
        timezone=settings.BUSINESS_TIMEZONE,
    )


def email_sender() -> EmailSender | None:
    if not settings.RESEND_API_KEY:
        return None
    return ResendEmailSender(
        api_key=settings.RESEND_API_KEY,
        api_url=settings.RESEND_API_URL,
        timeout=settings.EMAIL_TIMEOUT_SECONDS,
    )


def confirmation_dispatcher() -> ConfirmationDispatcher:
    return ConfirmationDispatcher(email_sender(), business_profile())
