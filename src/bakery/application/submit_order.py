"""Application service: Submit Order use case.

Orchestrates the flow between validator, repository and dispatcher:

1. Validate the submission and price it (OrderValidator).
2. Persist under a fresh order number (OrderRepository).
3. Hand the persisted order to the confirmation dispatcher through
   ``schedule`` so the caller can return before emails go out.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from bakery.application.confirmation import ConfirmationDispatcher
from bakery.application.dto import OrderDTO, to_order_dto
from bakery.domain.exceptions import PersistenceError
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.order_validator import OrderSubmission, OrderValidator

logger = structlog.get_logger(__name__)

Scheduler = Callable[..., Any]


def run_inline(func: Callable[..., Any], *args: Any) -> None:
    func(*args)


class SubmitOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dispatcher: ConfirmationDispatcher,
        schedule: Scheduler = run_inline,
        validator: OrderValidator | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._dispatcher = dispatcher
        self._schedule = schedule
        self._validator = validator or OrderValidator()

    def handle(self, submission: OrderSubmission) -> OrderDTO:
        command = self._validator.validate(submission)

        try:
            order = self._order_repo.create_order(command)
        except PersistenceError:
            raise
        except Exception as exc:
            logger.exception("order_persist_failed")
            raise PersistenceError("Failed to create order") from exc

        logger.info(
            "order_created",
            order_number=order.order_number,
            total_quantity=order.totals.total_quantity,
            total_cents=order.total_cents,
            discount_applied=order.totals.discount_applied,
        )

        self._schedule(self._dispatcher.dispatch, order)
        return to_order_dto(order)
