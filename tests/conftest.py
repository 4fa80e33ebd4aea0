"""Shared fixtures"""

from datetime import date
from decimal import Decimal

import pytest

from pricing.catalog import DEFAULT_DELIVERY_METHODS
from pricing.models import CatalogShape


@pytest.fixture
def catalog():
    return {
        "almond": CatalogShape(id="almond", name="Almond", base_price=Decimal("20")),
        "square": CatalogShape(id="square", name="Square", base_price=Decimal("25")),
    }


@pytest.fixture
def delivery_config():
    return DEFAULT_DELIVERY_METHODS


@pytest.fixture
def today():
    return date(2026, 3, 1)
