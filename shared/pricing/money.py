"""Money helpers"""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Optional

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Convert a loosely typed number to Decimal.

    Returns None for bools, non-finite values and anything unparsable.
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        # str() avoids binary float artifacts (0.1 -> 0.1000000000000000055...)
        return Decimal(str(value))

    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None

    return None


def quantize_money(amount: Decimal) -> Decimal:
    """Round half-up to the cent"""
    with localcontext() as ctx:
        # Enough digits for the integer part plus cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Any, symbol: str = "$") -> str:
    """
    Format an amount for display with two decimals.

    Example: Decimal("12.5") -> "$12.50", Decimal("-3") -> "-$3.00"
    """
    value = to_decimal(amount) or ZERO
    value = quantize_money(value)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):.2f}"
