"""Unit tests for order number generation and the create_order critical section."""

import re
import threading

import pytest

from bakery.domain.model.order import NewOrder
from bakery.domain.service.order_numbers import OrderNumberGenerator
from bakery.domain.service.order_validator import (
    OrderSubmission,
    OrderValidator,
    SubmittedItem,
)
from tests.fakes import FIXED_NOW, ScriptedRandom, make_order_repo

NUMBER_RE = re.compile(r"^MAC-\d{5}$")


def _command() -> NewOrder:
    return OrderValidator().validate(
        OrderSubmission(
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            phone="250-555-0100",
            pickup_date="2026-10-24",
            pickup_time="14:30",
            items=[SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=12)],
        )
    )


class TestGenerator:

    def test_format(self):
        number = OrderNumberGenerator().generate(lambda _: False)
        assert NUMBER_RE.match(number)

    def test_skips_taken_numbers(self):
        taken = {"MAC-11111", "MAC-22222"}
        gen = OrderNumberGenerator(rng=ScriptedRandom([11111, 22222, 33333]))
        assert gen.generate(taken.__contains__) == "MAC-33333"

    def test_widens_after_repeated_collisions(self):
        gen = OrderNumberGenerator(rng=ScriptedRandom([12345] * 3), attempts_per_width=3)
        number = gen.generate(lambda n: len(n) == len("MAC-12345"))
        assert re.match(r"^MAC-\d{6}$", number)

    def test_custom_prefix(self):
        gen = OrderNumberGenerator(prefix="BKR", digits=3)
        assert re.match(r"^BKR-\d{3}$", gen.generate(lambda _: False))

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            OrderNumberGenerator(digits=0)


class TestCreateOrder:

    def test_assigns_number_and_timestamp(self):
        repo = make_order_repo()
        order = repo.create_order(_command())
        assert NUMBER_RE.match(order.order_number)
        assert order.created_at == FIXED_NOW
        assert repo.get_by_order_number(order.order_number) == order

    def test_collision_is_regenerated(self):
        repo = make_order_repo(rng=ScriptedRandom([40000, 40000, 40001]))
        first = repo.create_order(_command())
        second = repo.create_order(_command())
        assert first.order_number == "MAC-40000"
        assert second.order_number == "MAC-40001"

    def test_rapid_creation_yields_unique_numbers(self):
        repo = make_order_repo()
        numbers = {repo.create_order(_command()).order_number for _ in range(200)}
        assert len(numbers) == 200

    def test_concurrent_creation_yields_unique_numbers(self):
        # Narrow space so threads are forced to collide
        repo = make_order_repo()
        repo._numbers = OrderNumberGenerator(digits=2, attempts_per_width=50)
        results: list[str] = []
        lock = threading.Lock()

        def worker():
            for _ in range(10):
                number = repo.create_order(_command()).order_number
                with lock:
                    results.append(number)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 80
        assert len(set(results)) == 80
        assert len(repo.list_all()) == 80
