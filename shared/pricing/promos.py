"""
Promo Discount Calculator

Computes the discount a promo rule grants for an already priced order and
packages it as a ValidatedPromo for the engine. Eligibility (active flag,
dates, usage limits) is decided by the promo store, not here.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from enum import Enum

from .delivery import DELIVERY_LINE_ID
from .models import Breakdown, ValidatedPromo
from .money import ZERO, format_currency, quantize_money


class PromoType(str, Enum):
    """Kinds of promo codes"""
    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"
    FREE_SHIPPING = "free_shipping"
    FREE_ORDER = "free_order"
    FIXED_PRICE_ITEM = "fixed_price_item"


@dataclass(frozen=True)
class PromoRule:
    """Discount definition of a promo code"""
    code: str
    type: PromoType
    value: Decimal = ZERO
    description: Optional[str] = None


def calculate_promo_discount(rule: PromoRule, breakdown: Breakdown) -> ValidatedPromo:
    """
    Discount for `rule` against a breakdown priced without promo or admin discount.

    Percentages apply to the subtotal including delivery. Fixed amounts are
    capped at that subtotal.
    """
    subtotal = breakdown.subtotal
    value = max(rule.value, ZERO)

    if rule.type == PromoType.PERCENTAGE:
        discount = quantize_money(subtotal * value / 100)
        description = f"{value.normalize():f}% off"
    elif rule.type in (PromoType.FIXED_AMOUNT, PromoType.FIXED_PRICE_ITEM):
        discount = min(value, subtotal)
        description = f"{format_currency(value)} off"
    elif rule.type == PromoType.FREE_SHIPPING:
        delivery = breakdown.line_item(DELIVERY_LINE_ID)
        discount = delivery.amount if delivery else ZERO
        description = "Free shipping"
    elif rule.type == PromoType.FREE_ORDER:
        discount = subtotal
        description = "Free order"
    else:
        discount = ZERO
        description = None

    return ValidatedPromo(
        discount=discount,
        description=description,
        code=rule.code,
    )
