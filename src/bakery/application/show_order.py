"""Application service: order queries (show, invoice, list)."""

from __future__ import annotations

from bakery.application.confirmation import (
    CUSTOMER,
    BusinessProfile,
    ConfirmationArtifact,
    build_artifact,
)
from bakery.application.dto import OrderDTO, to_order_dto
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.order import Order
from bakery.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_number: str) -> OrderDTO:
        return to_order_dto(self._load(order_number))

    def _load(self, order_number: str) -> Order:
        order = self._order_repo.get_by_order_number(order_number)
        if order is None:
            raise EntityNotFoundError(f"Order {order_number} not found")
        return order


class ShowInvoiceHandler(ShowOrderHandler):
    """The invoice view: the customer's confirmation artifact."""

    def __init__(self, order_repo: OrderRepository, business: BusinessProfile) -> None:
        super().__init__(order_repo)
        self._business = business

    def handle(self, order_number: str) -> ConfirmationArtifact:  # type: ignore[override]
        return build_artifact(self._load(order_number), self._business, CUSTOMER)


class ListOrdersHandler:
    """Administrative listing; not exposed over HTTP."""

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [to_order_dto(o) for o in self._order_repo.list_all()]
