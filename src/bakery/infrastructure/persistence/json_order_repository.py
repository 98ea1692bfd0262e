"""JSON-file-backed implementation of OrderRepository.

Used by the CLI so orders survive between invocations.  Orders are
append-only: ``_insert`` never replaces an existing record.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from bakery.domain.exceptions import PersistenceError
from bakery.domain.model.order import (
    Customer,
    Fulfillment,
    FulfillmentMode,
    Order,
    OrderLineItem,
)
from bakery.domain.model.value_objects import freeze_selections
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.pricing import PriceBreakdown


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_order_number(self, order_number: str) -> Order | None:
        for raw in self._load_raw():
            if raw["order_number"] == order_number:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def _contains(self, order_number: str) -> bool:
        return any(raw["order_number"] == order_number for raw in self._load_raw())

    def _insert(self, order: Order) -> None:
        orders = self._load_raw()
        orders.append(self._to_raw(order))
        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        f = order.fulfillment
        return {
            "order_number": order.order_number,
            "customer": {
                "first_name": order.customer.first_name,
                "last_name": order.customer.last_name,
                "email": order.customer.email,
                "phone": order.customer.phone,
            },
            "fulfillment": {
                "mode": f.mode.value,
                "pickup_date": f.pickup_date,
                "pickup_time": f.pickup_time,
                "delivery_address": f.delivery_address,
                "delivery_city": f.delivery_city,
                "delivery_postal_code": f.delivery_postal_code,
            },
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "unit_price_cents": item.unit_price_cents,
                    "quantity": item.quantity,
                    "variant_selections": [list(pair) for pair in item.variant_selections],
                }
                for item in order.items
            ],
            "totals": {
                "subtotal_cents": order.totals.subtotal_cents,
                "total_quantity": order.totals.total_quantity,
                "discount_applied": order.totals.discount_applied,
                "total_cents": order.totals.total_cents,
            },
            "special_instructions": order.special_instructions,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        fulfillment = dict(raw["fulfillment"])
        fulfillment["mode"] = FulfillmentMode(fulfillment["mode"])
        items = tuple(
            OrderLineItem(
                product_id=i["product_id"],
                name=i["name"],
                unit_price_cents=i["unit_price_cents"],
                quantity=i["quantity"],
                variant_selections=freeze_selections(
                    [tuple(pair) for pair in i.get("variant_selections", [])]
                ),
            )
            for i in raw["items"]
        )
        return Order(
            order_number=raw["order_number"],
            customer=Customer(**raw["customer"]),
            fulfillment=Fulfillment(**fulfillment),
            items=items,
            totals=PriceBreakdown(**raw["totals"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            special_instructions=raw.get("special_instructions"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(orders, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Could not write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
