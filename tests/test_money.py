"""Tests for money helpers"""

from decimal import Decimal

import pytest

from pricing.money import format_currency, quantize_money, to_decimal


@pytest.mark.parametrize("amount, expected", [
    (Decimal("40"), "$40.00"),
    (12.5, "$12.50"),
    (Decimal("-4.7"), "-$4.70"),
    (0, "$0.00"),
    (None, "$0.00"),
    ("abc", "$0.00"),
    (Decimal("1234.565"), "$1234.57"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_symbol():
    assert format_currency(Decimal("3"), symbol="€") == "€3.00"


def test_quantize_money_rounds_half_up():
    assert quantize_money(Decimal("2.345")) == Decimal("2.35")
    assert quantize_money(Decimal("2.344")) == Decimal("2.34")



def test_quantize_money_beyond_default_precision():
    assert quantize_money(Decimal("1e30")) == Decimal("1e30")
    assert quantize_money(Decimal("12345678901234567890123456789.125")) == Decimal("12345678901234567890123456789.13")

@pytest.mark.parametrize("raw, expected", [
    (0.1, Decimal("0.1")),
    ("  7.25 ", Decimal("7.25")),
    (3, Decimal("3")),
    (True, None),
    ("NaN", None),
    ("Infinity", None),
    (float("inf"), None),
    (object(), None),
])
def test_to_decimal(raw, expected):
    assert to_decimal(raw) == expected
