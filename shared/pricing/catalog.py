"""Default shape catalog and delivery-method table"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .delivery import load_delivery_methods
from .models import CatalogShape, DeliveryMethodConfig
from .money import to_decimal

DEFAULT_SHAPES: dict[str, CatalogShape] = {
    "almond": CatalogShape(id="almond", name="Almond", base_price=Decimal("20")),
    "square": CatalogShape(id="square", name="Square", base_price=Decimal("20")),
    "coffin": CatalogShape(id="coffin", name="Coffin", base_price=Decimal("22")),
    "stiletto": CatalogShape(id="stiletto", name="Stiletto", base_price=Decimal("24")),
}

_SPEED_TAGLINES = {
    "standard": "Included",
    "priority": "Get your nails faster!",
    "rush": "Fast-track your order!",
}


def _speeds(standard_fee: int, priority_fee: int, rush_fee: int) -> dict[str, dict[str, Any]]:
    return {
        "standard": {
            "label": "Standard",
            "description": "10 to 14 days",
            "fee": standard_fee,
            "days": 14,
            "tagline": _SPEED_TAGLINES["standard"],
        },
        "priority": {
            "label": "Priority",
            "description": "3 to 5 days",
            "fee": priority_fee,
            "days": 5,
            "tagline": _SPEED_TAGLINES["priority"],
        },
        "rush": {
            "label": "Rush",
            "description": "Next day",
            "fee": rush_fee,
            "days": 1,
            "tagline": _SPEED_TAGLINES["rush"],
        },
    }


DEFAULT_DELIVERY_METHODS: dict[str, DeliveryMethodConfig] = load_delivery_methods({
    "pickup": {
        "label": "Pick Up",
        "description": "Ready in 10 to 14 days in 92127",
        "baseFee": 0,
        "speedOptions": _speeds(0, 5, 10),
        "defaultSpeed": "standard",
    },
    "delivery": {
        "label": "Local Delivery",
        "description": "Ready in 10 to 14 days in 92127",
        "baseFee": 0,
        "speedOptions": _speeds(5, 10, 15),
        "defaultSpeed": "standard",
    },
    "shipping": {
        "label": "Shipping",
        "description": "Ready to ship in 10 to 14 days",
        "baseFee": 0,
        "speedOptions": _speeds(7, 15, 20),
        "defaultSpeed": "standard",
    },
})


def load_catalog(records: Any) -> dict[str, CatalogShape]:
    """
    Build a shape catalog from raw records ({id, name, basePrice}).

    Records without an id or with a missing/negative price are skipped, so a
    broken entry prices like an unknown shape.
    """
    catalog: dict[str, CatalogShape] = {}
    if isinstance(records, Mapping):
        records = list(records.values())
    if not isinstance(records, (list, tuple)):
        return catalog

    for record in records:
        if isinstance(record, CatalogShape):
            catalog[record.id] = record
            continue
        if not isinstance(record, Mapping) or not record.get("id"):
            continue

        price = to_decimal(record.get("basePrice", record.get("base_price")))
        if price is None or price < 0:
            continue

        shape_id = str(record["id"])
        catalog[shape_id] = CatalogShape(
            id=shape_id,
            name=str(record.get("name") or shape_id),
            base_price=price,
        )

    return catalog
