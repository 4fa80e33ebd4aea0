"""
Pricing service

Feeds the in-memory catalog and delivery snapshots to the pricing engine
and converts breakdowns into API responses.
"""

import logging
from functools import lru_cache
from typing import Any, Optional

from pricing import Breakdown, LegacyPromoCode, PricingEngine, ValidatedPromo, format_currency
from pricing.models import PromoInput
from pricing.money import ZERO, to_decimal
from pricing.promos import PromoRule, calculate_promo_discount

from ..core.config import get_settings
from ..database.delivery_methods import delivery_db
from ..database.promo_codes import promo_db
from ..database.shapes import shape_db
from ..models.promo import PromoCode
from ..models.quote import (
    FulfillmentSelection,
    QuoteFulfillment,
    QuoteLineItem,
    QuoteResponse,
    QuoteSetSummary,
    QuoteSizes,
)

logger = logging.getLogger(__name__)


@lru_cache()
def get_pricing_engine() -> PricingEngine:
    """Engine configured from settings"""
    settings = get_settings()
    return PricingEngine(
        custom_art_setup_fee=settings.custom_art_setup_fee,
        default_delivery_method=settings.default_delivery_method,
    )


def price_cart(
    sets: list[Any],
    fulfillment: FulfillmentSelection,
    promo: Any = None,
    admin_discount: Optional[Any] = None,
) -> Breakdown:
    """Price a cart against the current catalog and delivery snapshots"""
    return get_pricing_engine().compute_breakdown(
        sets,
        fulfillment.model_dump(),
        promo,
        admin_discount,
        catalog=shape_db.catalog(),
        delivery_config=delivery_db.table(),
    )


def validate_promo(
    promo: PromoCode,
    breakdown: Breakdown,
) -> tuple[Optional[ValidatedPromo], Optional[str]]:
    """
    Check a stored promo against a cart priced without discounts.

    Returns:
        (ValidatedPromo, None) when usable, otherwise (None, error message)
    """
    error = promo_db.check_eligibility(promo, float(breakdown.subtotal))
    if error:
        return None, error

    rule = PromoRule(
        code=promo.code,
        type=promo.type,
        value=to_decimal(promo.value) or ZERO,
        description=promo.description,
    )
    return calculate_promo_discount(rule, breakdown), None


def resolve_promo_code(
    code: Optional[str],
    sets: list[Any],
    fulfillment: FulfillmentSelection,
) -> Optional[PromoInput]:
    """
    Turn a customer-entered code into promo input for the engine.

    Stored codes are re-validated against the cart on every call. Codes the
    store does not know are passed on as bare codes for the legacy table.
    """
    code = (code or "").strip()
    if not code:
        return None

    promo = promo_db.get_by_code(code)
    if promo is None:
        return LegacyPromoCode(code=code)

    validated, error = validate_promo(promo, price_cart(sets, fulfillment))
    if error:
        logger.info(f"Promo {promo.code} not applied: {error}")
    return validated


def to_quote_response(breakdown: Breakdown) -> QuoteResponse:
    """Convert a Breakdown into the API response"""
    symbol = get_settings().currency_symbol
    return QuoteResponse(
        line_items=[
            QuoteLineItem(
                id=item.id,
                label=item.label,
                amount=float(item.amount),
                display_amount=format_currency(item.amount, symbol),
            )
            for item in breakdown.line_items
        ],
        subtotal=float(breakdown.subtotal),
        discounts=float(breakdown.discounts),
        total=float(breakdown.total),
        display_total=format_currency(breakdown.total, symbol),
        estimated_completion_days=breakdown.estimated_completion_days,
        estimated_completion_date=breakdown.estimated_completion_date,
        summary=[
            QuoteSetSummary(
                id=item.id,
                name=item.name,
                shape_id=item.shape_id,
                shape_name=item.shape_name,
                quantity=item.quantity,
                unit_price=float(item.unit_price),
                setup_fee=float(item.setup_fee),
                subtotal=float(item.subtotal),
                requires_custom_art=item.requires_custom_art,
                notes=item.notes,
                sizes=QuoteSizes(**item.sizes.to_dict()),
            )
            for item in breakdown.summary
        ],
        fulfillment=QuoteFulfillment(
            method=breakdown.fulfillment.method.id,
            speed=breakdown.fulfillment.speed.id,
        ),
    )
