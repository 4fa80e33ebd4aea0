"""Tests for discount application"""

from decimal import Decimal

import pytest

from pricing.discounts import apply_discounts, promo_amount
from pricing.models import LegacyPromoCode, LineItem, ValidatedPromo


@pytest.fixture
def line_items():
    return [
        LineItem(id="set_0", label="Almond Set (2 sets)", amount=Decimal("40")),
        LineItem(id="delivery", label="Shipping • Standard (10 to 14 days)", amount=Decimal("7")),
    ]


def amounts(result):
    return {item.id: item.amount for item in result.line_items}


def test_no_discounts(line_items):
    result = apply_discounts(line_items)
    assert result.subtotal == Decimal("47")
    assert result.total == Decimal("47")
    assert result.discounts == 0
    assert len(result.line_items) == 2


def test_validated_promo(line_items):
    result = apply_discounts(line_items, promo=ValidatedPromo(discount=Decimal("5"), description="$5.00 off"))
    assert amounts(result)["promo"] == Decimal("-5")
    assert result.line_items[-1].label == "$5.00 off"
    assert result.total == Decimal("42")


def test_validated_promo_is_clamped(line_items):
    result = apply_discounts(line_items, promo=ValidatedPromo(discount=Decimal("100")))
    assert amounts(result)["promo"] == Decimal("-47")
    assert result.total == 0


def test_negative_promo_adds_nothing(line_items):
    result = apply_discounts(line_items, promo=ValidatedPromo(discount=Decimal("-3")))
    assert "promo" not in amounts(result)
    assert result.total == Decimal("47")


@pytest.mark.parametrize("code", ["HOLIDAY10", "holiday10", "  Holiday10 "])
def test_legacy_code_is_case_insensitive(line_items, code):
    result = apply_discounts(line_items, promo=LegacyPromoCode(code=code))
    assert amounts(result)["promo"] == Decimal("-4.70")
    assert result.line_items[-1].label == "Holiday Discount"
    assert result.total == Decimal("42.30")


def test_legacy_percentage_rounds_half_up():
    items = [LineItem(id="set_0", label="x", amount=Decimal("0.05"))]
    # 10% of 0.05 is 0.005, rounded half-up to a cent
    amount, _ = promo_amount(LegacyPromoCode(code="HOLIDAY10"), items[0].amount)
    assert amount == Decimal("0.01")


def test_unknown_legacy_code(line_items):
    result = apply_discounts(line_items, promo=LegacyPromoCode(code="SUMMER99"))
    assert len(result.line_items) == 2
    assert result.discounts == 0


def test_admin_discount_applies_after_promo(line_items):
    result = apply_discounts(
        line_items,
        admin_discount=Decimal("40"),
        promo=ValidatedPromo(discount=Decimal("10")),
    )
    assert [item.id for item in result.line_items] == ["set_0", "delivery", "promo", "admin_discount"]
    assert amounts(result)["promo"] == Decimal("-10")
    # Admin stage only sees what the promo left
    assert amounts(result)["admin_discount"] == Decimal("-37")
    assert result.total == 0
    assert result.discounts == Decimal("47")


def test_admin_discount_clamped_to_subtotal():
    items = [
        LineItem(id="set_0", label="Almond Set (2 sets)", amount=Decimal("40")),
        LineItem(id="delivery", label="Pick Up • Standard", amount=Decimal("0")),
    ]
    result = apply_discounts(items, admin_discount=Decimal("100"))
    assert amounts(result)["admin_discount"] == Decimal("-40")
    assert result.total == 0


def test_discounts_match_negative_line_items(line_items):
    result = apply_discounts(
        line_items,
        promo=LegacyPromoCode(code="holiday10"),
        admin_discount=Decimal("2.25"),
    )
    negative = sum(-item.amount for item in result.line_items if item.amount < 0)
    assert result.discounts == negative
    assert result.total == result.subtotal - result.discounts


def test_plain_numbers_are_accepted(line_items):
    result = apply_discounts(line_items, promo=ValidatedPromo(discount=5), admin_discount=2)
    assert amounts(result)["promo"] == Decimal("-5")
    assert amounts(result)["admin_discount"] == Decimal("-2")
    assert result.total == Decimal("40")


def test_input_list_is_not_mutated(line_items):
    apply_discounts(line_items, admin_discount=Decimal("1"))
    assert len(line_items) == 2
