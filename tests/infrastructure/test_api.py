"""HTTP API tests through FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from bakery.application.confirmation import ConfirmationDispatcher
from bakery.domain.model.order import Order
from bakery.infrastructure.api.app import create_app
from bakery.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from tests.fakes import BUSINESS, FakeEmailSender, make_order_repo, make_product_repo


def _payload(quantity: int = 12, **overrides) -> dict:
    body = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "250-555-0100",
        "pickupDate": "2026-10-24",
        "pickupTime": "14:30",
        "deliveryOption": "pickup",
        "items": [
            {"productId": 1, "name": "Vanilla Bean", "price": 200, "quantity": quantity}
        ],
    }
    body.update(overrides)
    return body


class _BrokenRepo(InMemoryOrderRepository):
    def _insert(self, order: Order) -> None:
        raise OSError("disk full")


@pytest.fixture
def sender():
    return FakeEmailSender()


@pytest.fixture
def order_repo():
    return make_order_repo()


@pytest.fixture
def client(order_repo, sender):
    app = create_app(
        product_repo=make_product_repo(),
        order_repo=order_repo,
        dispatcher=ConfirmationDispatcher(sender, BUSINESS),
        business=BUSINESS,
        api_prefix="/api",
    )
    return TestClient(app)


class TestCatalogRoutes:

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    @pytest.mark.parametrize("path", ["/api/products", "/api/flavours", "/api/flavors"])
    def test_list(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 200
        body = resp.json()
        assert [p["id"] for p in body] == [1, 2, 3, 4]
        assert body[0]["price"] == 200
        assert "imageUrl" in body[0]
        assert body[0]["featured"] is True
        assert body[1]["featured"] is False

    @pytest.mark.parametrize("path", ["/api/products/2", "/api/flavours/2", "/api/flavors/2"])
    def test_show(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.json()["name"] == "Raspberry"

    def test_show_unknown(self, client):
        resp = client.get("/api/products/42")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Product #42 not found"}

    def test_show_non_numeric_id(self, client):
        resp = client.get("/api/flavours/abc")
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid product ID"}


class TestSubmitOrder:

    def test_created(self, client, order_repo):
        resp = client.post("/api/orders", json=_payload(12))
        assert resp.status_code == 201
        body = resp.json()
        assert body["orderNumber"].startswith("MAC-")
        assert body["total"] == 2400
        assert body["discountApplied"] is False
        assert order_repo.get_by_order_number(body["orderNumber"]) is not None

    def test_bulk_discount(self, client):
        body = client.post("/api/orders", json=_payload(50)).json()
        assert body["subtotal"] == 10000
        assert body["total"] == 9000
        assert body["discountApplied"] is True

    def test_client_total_ignored(self, client):
        body = client.post("/api/orders", json=_payload(12, total=1)).json()
        assert body["total"] == 2400

    def test_confirmations_sent_after_response(self, client, sender):
        body = client.post("/api/orders", json=_payload()).json()
        assert [m.to for m in sender.sent] == ["ada@example.com", "orders@example.com"]
        assert body["orderNumber"] in sender.sent[0].subject

    def test_colors_become_variant_selections(self, client):
        item = {
            "flavorId": 1,
            "name": "Vanilla Bean",
            "price": 200,
            "quantity": 12,
            "shellColor": {"name": "Pink", "value": "#f9c"},
            "fillingColor": {"name": "White", "value": "#fff"},
        }
        body = client.post("/api/orders", json=_payload(items=[item])).json()
        assert body["items"][0]["productId"] == 1
        assert body["items"][0]["variantSelections"] == {"Shell": "Pink", "Filling": "White"}

    def test_flavor_spelled_the_canadian_way(self, client):
        item = {"productId": 0, "name": "Mixed Flavor Box", "price": 200, "quantity": 12}
        body = client.post("/api/orders", json=_payload(items=[item])).json()
        assert body["items"][0]["name"] == "Mixed Flavour Box"

    def test_below_minimum(self, client, order_repo):
        resp = client.post("/api/orders", json=_payload(11))
        assert resp.status_code == 400
        assert resp.json() == {"message": "Minimum order quantity is 12 macarons"}
        assert order_repo.list_all() == []

    def test_missing_fields(self, client):
        resp = client.post("/api/orders", json=_payload(firstName="", email="nope"))
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"].startswith("Validation failed")
        assert [e["field"] for e in body["errors"]] == ["firstName", "email"]

    def test_delivery_without_address(self, client):
        resp = client.post("/api/orders", json=_payload(deliveryOption="delivery"))
        assert resp.status_code == 400
        fields = [e["field"] for e in resp.json()["errors"]]
        assert fields == ["deliveryAddress", "deliveryCity", "deliveryPostalCode"]

    def test_malformed_json(self, client):
        resp = client.post(
            "/api/orders",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid request body"

    def test_wrong_type(self, client):
        item = {"productId": 1, "name": "Vanilla Bean", "price": 200, "quantity": "lots"}
        resp = client.post("/api/orders", json=_payload(items=[item]))
        assert resp.status_code == 400
        assert resp.json()["errors"]

    def test_persistence_failure(self, sender):
        app = create_app(
            product_repo=make_product_repo(),
            order_repo=_BrokenRepo(),
            dispatcher=ConfirmationDispatcher(sender, BUSINESS),
            business=BUSINESS,
            api_prefix="/api",
        )
        resp = TestClient(app).post("/api/orders", json=_payload())
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to create order"}
        assert sender.sent == []


class TestOrderLookup:

    def test_get_order(self, client):
        number = client.post("/api/orders", json=_payload(50)).json()["orderNumber"]
        resp = client.get(f"/api/orders/{number}")
        assert resp.status_code == 200
        assert resp.json()["total"] == 9000

    def test_unknown_order(self, client):
        resp = client.get("/api/orders/MAC-00001")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Order MAC-00001 not found"}

    def test_invoice(self, client):
        number = client.post(
            "/api/orders", json=_payload(50, specialInstructions="Gift wrap")
        ).json()["orderNumber"]
        body = client.get(f"/api/orders/{number}/invoice").json()
        assert body["orderNumber"] == number
        assert body["orderDate"] == "October 19th, 2026"
        assert body["subtotal"] == "$100.00"
        assert body["discount"] == "-$10.00"
        assert body["grandTotal"] == "$90.00"
        assert body["specialInstructions"] == "Gift wrap"
        assert body["rows"][0]["unitPrice"] == "$2.00"

    def test_unknown_invoice(self, client):
        assert client.get("/api/orders/MAC-00001/invoice").status_code == 404
