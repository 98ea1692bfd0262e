"""In-memory implementation of OrderRepository (the server's store)."""

from __future__ import annotations

from bakery.domain.model.order import Order
from bakery.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._store: dict[str, Order] = {}

    # --- OrderRepository interface --------------------------------------------

    def get_by_order_number(self, order_number: str) -> Order | None:
        return self._store.get(order_number)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def _contains(self, order_number: str) -> bool:
        return order_number in self._store

    def _insert(self, order: Order) -> None:
        self._store[order.order_number] = order
