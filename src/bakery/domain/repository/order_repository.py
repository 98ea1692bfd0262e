"""Abstract repository for the Order aggregate.

``create_order`` is implemented here, once, so every store gets the same
critical section: number generation, collision check and insertion all
happen under a single lock.  Concrete stores only provide lookup and
raw insertion.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone

from bakery.domain.model.order import NewOrder, Order
from bakery.domain.service.order_numbers import OrderNumberGenerator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderRepository(ABC):

    def __init__(
        self,
        number_generator: OrderNumberGenerator | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._numbers = number_generator or OrderNumberGenerator()
        self._clock = clock
        self._lock = threading.Lock()

    def create_order(self, command: NewOrder) -> Order:
        """Persist a validated order under a fresh, unique order number."""
        with self._lock:
            number = self._numbers.generate(self._contains)
            order = Order.from_command(command, order_number=number, created_at=self._clock())
            self._insert(order)
        return order

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Return the order with exactly this number, or None."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in insertion order."""

    @abstractmethod
    def _contains(self, order_number: str) -> bool:
        """True if an order with this number is already stored."""

    @abstractmethod
    def _insert(self, order: Order) -> None:
        """Store a new order.  Raise PersistenceError on failure."""
