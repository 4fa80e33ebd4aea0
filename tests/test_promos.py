"""Tests for the promo discount calculator"""

from decimal import Decimal

import pytest

from pricing import compute_breakdown
from pricing.promos import PromoRule, PromoType, calculate_promo_discount


@pytest.fixture
def breakdown(catalog, delivery_config, today):
    # 40 for the sets + 7 standard shipping
    return compute_breakdown(
        [{"shapeId": "almond", "quantity": 2}],
        {"method": "shipping", "speed": "standard"},
        catalog=catalog,
        delivery_config=delivery_config,
        today=today,
    )


@pytest.mark.parametrize("rule, discount, description", [
    (PromoRule("WELCOME15", PromoType.PERCENTAGE, Decimal("15")), Decimal("7.05"), "15% off"),
    (PromoRule("HALF", PromoType.PERCENTAGE, Decimal("12.5")), Decimal("5.88"), "12.5% off"),
    (PromoRule("FIVEOFF", PromoType.FIXED_AMOUNT, Decimal("5")), Decimal("5"), "$5.00 off"),
    (PromoRule("BIG", PromoType.FIXED_AMOUNT, Decimal("80")), Decimal("47"), "$80.00 off"),
    (PromoRule("ITEM", PromoType.FIXED_PRICE_ITEM, Decimal("3")), Decimal("3"), "$3.00 off"),
    (PromoRule("FREESHIP", PromoType.FREE_SHIPPING), Decimal("7"), "Free shipping"),
    (PromoRule("ONUS", PromoType.FREE_ORDER), Decimal("47"), "Free order"),
])
def test_calculate_promo_discount(breakdown, rule, discount, description):
    promo = calculate_promo_discount(rule, breakdown)
    assert promo.discount == discount
    assert promo.description == description
    assert promo.code == rule.code


def test_free_shipping_on_empty_cart(catalog, delivery_config, today):
    empty = compute_breakdown([], {"method": "shipping"}, catalog=catalog, delivery_config=delivery_config, today=today)
    promo = calculate_promo_discount(PromoRule("FREESHIP", PromoType.FREE_SHIPPING), empty)
    assert promo.discount == 0


def test_result_feeds_back_into_engine(breakdown, catalog, delivery_config, today):
    promo = calculate_promo_discount(PromoRule("FREESHIP", PromoType.FREE_SHIPPING), breakdown)
    repriced = compute_breakdown(
        [{"shapeId": "almond", "quantity": 2}],
        {"method": "shipping", "speed": "standard"},
        promo=promo,
        catalog=catalog,
        delivery_config=delivery_config,
        today=today,
    )
    assert repriced.line_item("promo").label == "Free shipping"
    assert repriced.total == Decimal("40")
