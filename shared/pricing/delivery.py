"""
Delivery Resolver

Resolves the requested delivery method and speed against the configured
delivery-method table, and derives the fulfillment line item and the
estimated completion date.
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any

from .exceptions import DeliveryConfigurationError
from .models import (
    DeliveryMethodConfig,
    FulfillmentRequest,
    LineItem,
    ResolvedFulfillment,
    SpeedOption,
)
from .money import quantize_money, to_decimal

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_METHOD = "pickup"
DELIVERY_LINE_ID = "delivery"


def _pick(record: Mapping, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def _parse_money(value: Any, what: str) -> Any:
    amount = to_decimal(value if value is not None else 0)
    if amount is None:
        raise DeliveryConfigurationError(f"Invalid {what}: {value!r}")
    return amount


def _parse_days(value: Any, what: str) -> int:
    days = to_decimal(value)
    if days is None or days != int(days):
        raise DeliveryConfigurationError(f"Invalid day count for {what}: {value!r}")
    return int(days)


def parse_speed_option(speed_id: str, raw: Any) -> SpeedOption:
    """Build a SpeedOption from a raw config record"""
    if isinstance(raw, SpeedOption):
        return raw
    if not isinstance(raw, Mapping):
        raise DeliveryConfigurationError(f"Speed option '{speed_id}' is not a mapping")

    return SpeedOption(
        id=str(_pick(raw, "id", default=speed_id)),
        label=str(_pick(raw, "label", default=speed_id)),
        fee=_parse_money(_pick(raw, "fee"), f"fee for speed '{speed_id}'"),
        days=_parse_days(_pick(raw, "days"), f"speed '{speed_id}'"),
        description=str(_pick(raw, "description", default="")),
        tagline=str(_pick(raw, "tagline", default="")),
    )


def parse_delivery_method(method_id: str, raw: Any) -> DeliveryMethodConfig:
    """Build a DeliveryMethodConfig from a raw config record (camelCase or snake_case)"""
    if isinstance(raw, DeliveryMethodConfig):
        return raw
    if not isinstance(raw, Mapping):
        raise DeliveryConfigurationError(f"Delivery method '{method_id}' is not a mapping")

    raw_speeds = _pick(raw, "speedOptions", "speed_options", default={})
    if not isinstance(raw_speeds, Mapping):
        raise DeliveryConfigurationError(
            f"Delivery method '{method_id}' speed options must be a mapping"
        )

    speed_options = {
        str(speed_id): parse_speed_option(str(speed_id), speed)
        for speed_id, speed in raw_speeds.items()
    }

    return DeliveryMethodConfig(
        id=str(_pick(raw, "id", default=method_id)),
        label=str(_pick(raw, "label", default=method_id)),
        speed_options=speed_options,
        default_speed=str(_pick(raw, "defaultSpeed", "default_speed", default="standard")),
        description=str(_pick(raw, "description", default="")),
        base_fee=_parse_money(_pick(raw, "baseFee", "base_fee"), f"base fee for '{method_id}'"),
    )


def load_delivery_methods(raw: Any) -> dict[str, DeliveryMethodConfig]:
    """
    Parse and validate a delivery-method table.

    Raises:
        DeliveryConfigurationError: if the table is missing, empty or malformed
    """
    if not isinstance(raw, Mapping):
        raise DeliveryConfigurationError("Delivery configuration is missing")
    if not raw:
        raise DeliveryConfigurationError("Delivery configuration is empty")

    return {
        str(method_id): parse_delivery_method(str(method_id), config)
        for method_id, config in raw.items()
    }


def resolve_fulfillment(
    request: FulfillmentRequest,
    methods: Mapping[str, DeliveryMethodConfig],
    default_method: str = DEFAULT_DELIVERY_METHOD,
) -> ResolvedFulfillment:
    """
    Resolve method and speed with fallbacks.

    Unknown methods fall back to the default method (or the first configured
    one); unknown speeds fall back to the method's default speed.
    """
    if not methods:
        raise DeliveryConfigurationError("Delivery configuration is empty")

    method = methods.get(request.method) if request.method else None
    if method is None:
        method = methods.get(default_method) or next(iter(methods.values()))
        if request.method:
            logger.debug(
                f"Unknown delivery method '{request.method}', using '{method.id}'"
            )

    speed = method.speed_options.get(request.speed) if request.speed else None
    if speed is None:
        speed = method.speed_options[method.default_speed]
        if request.speed:
            logger.debug(
                f"Unknown speed '{request.speed}' for '{method.id}', using '{speed.id}'"
            )

    return ResolvedFulfillment(method=method, speed=speed)


def build_delivery_line_item(fulfillment: ResolvedFulfillment) -> LineItem:
    """Single fulfillment charge for the resolved method and speed"""
    method, speed = fulfillment.method, fulfillment.speed
    label = f"{method.label} • {speed.label}"
    if speed.description.strip():
        label = f"{label} ({speed.description.strip()})"

    return LineItem(
        id=DELIVERY_LINE_ID,
        label=label,
        amount=quantize_money(fulfillment.fee),
    )


def compute_completion_date(days: int, today: date) -> datetime:
    """Local midnight of `today` plus the speed tier's day count"""
    return datetime.combine(today + timedelta(days=max(0, days)), time.min)


def parse_fulfillment_request(raw: Any) -> FulfillmentRequest:
    """Accept a FulfillmentRequest, a {method, speed} mapping or nothing"""
    if isinstance(raw, FulfillmentRequest):
        return raw
    if isinstance(raw, Mapping):
        method = raw.get("method")
        speed = raw.get("speed")
        return FulfillmentRequest(
            method=method if isinstance(method, str) and method else None,
            speed=speed if isinstance(speed, str) and speed else None,
        )
    return FulfillmentRequest()
