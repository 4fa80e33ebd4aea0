"""Tests for delivery resolution"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from pricing.delivery import (
    build_delivery_line_item,
    compute_completion_date,
    load_delivery_methods,
    parse_fulfillment_request,
    resolve_fulfillment,
)
from pricing.exceptions import DeliveryConfigurationError
from pricing.models import FulfillmentRequest


def raw_method(**overrides):
    method = {
        "id": "courier",
        "label": "Courier",
        "baseFee": 3,
        "speedOptions": {
            "standard": {"label": "Standard", "description": "", "fee": 5, "days": 7},
            "rush": {"label": "Rush", "description": "Next day", "fee": "12.50", "days": 1},
        },
        "defaultSpeed": "standard",
    }
    method.update(overrides)
    return method


class TestLoadDeliveryMethods:
    def test_parses_camel_case_config(self):
        methods = load_delivery_methods({"courier": raw_method()})
        courier = methods["courier"]
        assert courier.base_fee == Decimal("3")
        assert courier.speed_options["rush"].fee == Decimal("12.50")
        assert courier.speed_options["rush"].days == 1

    def test_parses_snake_case_config(self):
        methods = load_delivery_methods({
            "courier": {
                "label": "Courier",
                "base_fee": 0,
                "speed_options": {"standard": {"label": "Standard", "fee": 0, "days": 3}},
                "default_speed": "standard",
            }
        })
        assert methods["courier"].default_speed == "standard"

    @pytest.mark.parametrize("table", [None, {}, [], "pickup"])
    def test_missing_or_empty_table(self, table):
        with pytest.raises(DeliveryConfigurationError):
            load_delivery_methods(table)

    @pytest.mark.parametrize("overrides", [
        {"speedOptions": {}},
        {"speedOptions": "fast"},
        {"defaultSpeed": "teleport"},
        {"baseFee": -1},
        {"baseFee": "free"},
        {"speedOptions": {"standard": {"label": "Standard", "fee": 1, "days": "soon"}}},
        {"speedOptions": {"standard": {"label": "Standard", "fee": 1, "days": 1.5}}},
        {"speedOptions": {"standard": {"label": "Standard", "fee": -1, "days": 1}}},
        {"speedOptions": {"standard": None}},
    ])
    def test_malformed_method(self, overrides):
        with pytest.raises(DeliveryConfigurationError):
            load_delivery_methods({"courier": raw_method(**overrides)})


class TestResolveFulfillment:
    def test_requested_method_and_speed(self, delivery_config):
        resolved = resolve_fulfillment(FulfillmentRequest("shipping", "rush"), delivery_config)
        assert resolved.method.id == "shipping"
        assert resolved.speed.id == "rush"
        assert resolved.fee == Decimal("20")

    def test_unknown_method_falls_back_to_pickup(self, delivery_config):
        resolved = resolve_fulfillment(FulfillmentRequest("drone", "rush"), delivery_config)
        assert resolved.method.id == "pickup"
        assert resolved.speed.id == "rush"

    def test_unknown_speed_falls_back_to_default(self, delivery_config):
        resolved = resolve_fulfillment(FulfillmentRequest("delivery", "warp"), delivery_config)
        assert resolved.speed.id == "standard"

    def test_missing_request_uses_defaults(self, delivery_config):
        resolved = resolve_fulfillment(FulfillmentRequest(), delivery_config)
        assert (resolved.method.id, resolved.speed.id) == ("pickup", "standard")

    def test_table_without_pickup_uses_first_method(self):
        methods = load_delivery_methods({"courier": raw_method()})
        resolved = resolve_fulfillment(FulfillmentRequest("pickup"), methods)
        assert resolved.method.id == "courier"

    def test_empty_table(self):
        with pytest.raises(DeliveryConfigurationError):
            resolve_fulfillment(FulfillmentRequest(), {})


class TestDeliveryLineItem:
    def test_label_and_amount(self, delivery_config):
        resolved = resolve_fulfillment(FulfillmentRequest("pickup", "priority"), delivery_config)
        item = build_delivery_line_item(resolved)
        assert item.id == "delivery"
        assert item.label == "Pick Up • Priority (3 to 5 days)"
        assert item.amount == Decimal("5")

    def test_base_fee_is_folded_into_one_charge(self):
        methods = load_delivery_methods({"courier": raw_method()})
        item = build_delivery_line_item(resolve_fulfillment(FulfillmentRequest("courier"), methods))
        assert item.amount == Decimal("8")
        # Blank speed description leaves no empty parentheses
        assert item.label == "Courier • Standard"


def test_completion_date_is_local_midnight():
    assert compute_completion_date(14, date(2026, 3, 1)) == datetime(2026, 3, 15, 0, 0)
    assert compute_completion_date(1, date(2026, 12, 31)) == datetime(2027, 1, 1, 0, 0)


@pytest.mark.parametrize("raw, expected", [
    ({"method": "shipping", "speed": "rush"}, FulfillmentRequest("shipping", "rush")),
    ({"method": "", "speed": 3}, FulfillmentRequest()),
    (None, FulfillmentRequest()),
    (FulfillmentRequest("delivery"), FulfillmentRequest("delivery")),
])
def test_parse_fulfillment_request(raw, expected):
    assert parse_fulfillment_request(raw) == expected
