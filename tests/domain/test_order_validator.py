"""Unit tests for the Order Validator."""

from dataclasses import replace

import pytest

from bakery.domain.exceptions import BusinessRuleViolation, ValidationError
from bakery.domain.model.order import FulfillmentMode
from bakery.domain.service.order_validator import (
    OrderSubmission,
    OrderValidator,
    SubmittedItem,
    canadian_spelling,
)


def _submission(**overrides) -> OrderSubmission:
    base = OrderSubmission(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone="250-555-0100",
        pickup_date="2026-10-24",
        pickup_time="14:30",
        items=[SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=12)],
    )
    return replace(base, **overrides)


def _fields(exc_info) -> list[str]:
    return [e.field for e in exc_info.value.errors]


class TestHappyPath:

    def test_builds_command(self):
        command = OrderValidator().validate(_submission())
        assert command.customer.full_name == "Ada Lovelace"
        assert command.fulfillment.mode is FulfillmentMode.PICKUP
        assert len(command.items) == 1
        assert command.totals.total_cents == 2400
        assert command.totals.discount_applied is False

    def test_strips_whitespace(self):
        command = OrderValidator().validate(
            _submission(first_name="  Ada ", email=" ada@example.com ")
        )
        assert command.customer.first_name == "Ada"
        assert command.customer.email == "ada@example.com"

    def test_empty_special_instructions_become_none(self):
        command = OrderValidator().validate(_submission(special_instructions="   "))
        assert command.special_instructions is None

    def test_item_snapshot_is_immutable_tuple(self):
        command = OrderValidator().validate(_submission())
        assert isinstance(command.items, tuple)

    def test_variant_selections_carried(self):
        item = SubmittedItem(
            product_id=1, name="Vanilla Bean", price=200, quantity=12,
            variant_selections={"Shell": "Pink"},
        )
        command = OrderValidator().validate(_submission(items=[item]))
        assert command.items[0].annotation == "Shell: Pink"


class TestRequiredFields:

    def test_all_missing_fields_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(
                _submission(first_name="", last_name=" ", phone="", pickup_time="")
            )
        assert _fields(exc_info) == ["firstName", "lastName", "phone", "pickupTime"]

    @pytest.mark.parametrize("email", ["", "ada", "ada@", "ada@example", "a b@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(email=email))
        assert _fields(exc_info) == ["email"]

    def test_pickup_requires_date_and_time(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(pickup_date="", pickup_time=""))
        assert _fields(exc_info) == ["pickupDate", "pickupTime"]

    def test_unknown_delivery_option(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(delivery_option="drone"))
        assert _fields(exc_info) == ["deliveryOption"]

    def test_field_errors_win_over_item_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(first_name="", items=[]))
        assert _fields(exc_info) == ["firstName"]


class TestItems:

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(items=[]))
        assert _fields(exc_info) == ["items"]

    def test_zero_quantity_rejected(self):
        items = [
            SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=12),
            SubmittedItem(product_id=2, name="Raspberry", price=200, quantity=0),
        ]
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(items=items))
        assert _fields(exc_info) == ["items[1].quantity"]

    def test_negative_price_rejected(self):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=-1, quantity=12)]
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(items=items))
        assert _fields(exc_info) == ["items[0].price"]

    def test_missing_price_reported_as_required(self):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=None, quantity=12)]
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(_submission(items=items))
        assert [(e.field, e.message) for e in exc_info.value.errors] == [
            ("items[0].price", "Price is required")
        ]

    def test_free_item_allowed(self):
        items = [SubmittedItem(product_id=1, name="Sample", price=0, quantity=12)]
        command = OrderValidator().validate(_submission(items=items))
        assert command.totals.total_cents == 0

    def test_item_errors_win_over_minimum(self):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=None, quantity=1)]
        with pytest.raises(ValidationError):
            OrderValidator().validate(_submission(items=items))


class TestMinimumOrder:

    def test_eleven_rejected_as_business_rule(self):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=11)]
        with pytest.raises(BusinessRuleViolation, match="Minimum order quantity is 12"):
            OrderValidator().validate(_submission(items=items))

    def test_not_a_validation_error(self):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=11)]
        with pytest.raises(BusinessRuleViolation) as exc_info:
            OrderValidator().validate(_submission(items=items))
        assert not isinstance(exc_info.value, ValidationError)

    def test_twelve_accepted(self):
        items = [
            SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=5),
            SubmittedItem(product_id=2, name="Raspberry", price=200, quantity=7),
        ]
        command = OrderValidator().validate(_submission(items=items))
        assert command.totals.total_quantity == 12


class TestClientTotalIgnored:

    @pytest.mark.parametrize("quantity, expected", [(49, 9800), (50, 9000)])
    def test_total_comes_from_pricing_policy(self, quantity, expected):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=quantity)]
        command = OrderValidator().validate(_submission(items=items))
        assert command.totals.total_cents == expected
        assert command.totals.discount_applied is (quantity >= 50)


class TestDelivery:

    def test_delivery_may_omit_pickup_slot(self):
        command = OrderValidator().validate(
            _submission(
                delivery_option="delivery",
                pickup_date="",
                pickup_time="",
                delivery_address="1 Fort St",
                delivery_city="Victoria",
                delivery_postal_code="V8W 1A1",
            )
        )
        assert command.fulfillment.is_delivery
        assert not command.fulfillment.has_pickup_slot

    def test_delivery_requires_address_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator().validate(
                _submission(delivery_option="delivery", delivery_city="Victoria")
            )
        assert _fields(exc_info) == ["deliveryAddress", "deliveryPostalCode"]

    def test_minimum_checked_before_address(self):
        items = [SubmittedItem(product_id=1, name="Vanilla Bean", price=200, quantity=3)]
        with pytest.raises(BusinessRuleViolation):
            OrderValidator().validate(_submission(delivery_option="delivery", items=items))

    def test_pickup_orders_drop_stray_address(self):
        command = OrderValidator().validate(_submission(delivery_address="1 Fort St"))
        assert command.fulfillment.delivery_address == ""

    def test_option_is_case_insensitive(self):
        command = OrderValidator().validate(
            _submission(
                delivery_option="Delivery",
                delivery_address="1 Fort St",
                delivery_city="Victoria",
                delivery_postal_code="V8W 1A1",
            )
        )
        assert command.fulfillment.mode is FulfillmentMode.DELIVERY


class TestCanadianSpelling:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Mixed Flavor Box", "Mixed Flavour Box"),
            ("six flavors", "six flavours"),
            ("Flavour Box", "Flavour Box"),
            ("Vanilla Bean", "Vanilla Bean"),
        ],
    )
    def test_spelling(self, name, expected):
        assert canadian_spelling(name) == expected

    def test_applied_to_item_names(self):
        items = [SubmittedItem(product_id=0, name="Custom Flavor Box", price=200, quantity=12)]
        command = OrderValidator().validate(_submission(items=items))
        assert command.items[0].name == "Custom Flavour Box"
