"""
Discount Applicator

Applies discounts to the running subtotal in a fixed order: promo first,
then the admin override. Every amount is clamped to what remains before the
line item is appended, so the total can never go negative.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from .models import LegacyPromoCode, LineItem, PromoInput, ValidatedPromo
from .money import ZERO, quantize_money, to_decimal

logger = logging.getLogger(__name__)

PROMO_LINE_ID = "promo"
ADMIN_DISCOUNT_LINE_ID = "admin_discount"


@dataclass(frozen=True)
class LegacyCode:
    """Fixed percentage-of-subtotal promo code"""
    label: str
    percent: Decimal


# Matched case-insensitively against bare promo strings
LEGACY_PROMO_CODES: dict[str, LegacyCode] = {
    "HOLIDAY10": LegacyCode(label="Holiday Discount", percent=Decimal("10")),
}


@dataclass(frozen=True)
class DiscountResult:
    """Outcome of the discount stages"""
    line_items: tuple[LineItem, ...]
    subtotal: Decimal
    total: Decimal

    @property
    def discounts(self) -> Decimal:
        return self.subtotal - self.total


def _clamp(amount: Any, running: Decimal) -> Decimal:
    amount = to_decimal(amount) or ZERO
    return quantize_money(min(max(amount, ZERO), running))


def promo_amount(promo: Optional[PromoInput], running: Decimal) -> tuple[Decimal, str]:
    """
    Discount granted by a promo against the current running subtotal.

    Returns the clamped amount and the line item label.
    """
    if isinstance(promo, ValidatedPromo):
        label = promo.description or (f"Promo {promo.code}" if promo.code else "Promo Discount")
        return _clamp(promo.discount, running), label

    if isinstance(promo, LegacyPromoCode):
        legacy = LEGACY_PROMO_CODES.get(promo.code.strip().upper())
        if legacy is None:
            logger.debug(f"Promo code '{promo.code}' not recognized")
            return ZERO, ""
        return _clamp(running * legacy.percent / 100, running), legacy.label

    return ZERO, ""


def apply_discounts(
    line_items: list[LineItem],
    *,
    promo: Optional[PromoInput] = None,
    admin_discount: Any = ZERO,
) -> DiscountResult:
    """
    Run the promo stage and then the admin stage over the priced line items.

    Args:
        line_items: Item and delivery line items (no discounts yet)
        promo: Validated promo or legacy code, None for no promo
        admin_discount: Operator override amount, non-numeric or negative counts as 0

    Returns:
        DiscountResult with the discount lines appended
    """
    items = list(line_items)
    subtotal = sum((item.amount for item in items), ZERO)
    running = subtotal

    amount, label = promo_amount(promo, running)
    if amount > 0:
        items.append(LineItem(id=PROMO_LINE_ID, label=label, amount=-amount))
        running -= amount

    amount = _clamp(admin_discount, running)
    if amount > 0:
        items.append(LineItem(id=ADMIN_DISCOUNT_LINE_ID, label="Admin Discount", amount=-amount))
        running -= amount

    return DiscountResult(line_items=tuple(items), subtotal=subtotal, total=running)
