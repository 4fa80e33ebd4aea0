"""Promo code storage for the order service"""

from datetime import datetime
from typing import Optional

from ..models.promo import PromoCode
from pricing.promos import PromoType

# Seed promo codes
PROMO_CODES: dict[str, PromoCode] = {
    "WELCOME15": PromoCode(
        id="promo-001",
        code="WELCOME15",
        description="15% off your first order",
        type=PromoType.PERCENTAGE,
        value=15,
    ),
    "FIVEOFF": PromoCode(
        id="promo-002",
        code="FIVEOFF",
        description="$5 off orders of $20 or more",
        type=PromoType.FIXED_AMOUNT,
        value=5,
        min_order_amount=20,
    ),
    "FREESHIP": PromoCode(
        id="promo-003",
        code="FREESHIP",
        description="Free delivery on any order",
        type=PromoType.FREE_SHIPPING,
    ),
}


class PromoCodeDatabase:
    """In-memory promo code storage"""

    def __init__(self):
        self.promo_codes = {code: promo.model_copy() for code, promo in PROMO_CODES.items()}

    def get_by_code(self, code: str) -> Optional[PromoCode]:
        """Get a promo code, case-insensitive"""
        return self.promo_codes.get(code.strip().upper())

    def add(self, promo: PromoCode) -> PromoCode:
        """Add or replace a promo code"""
        promo = promo.model_copy(update={"code": promo.code.strip().upper()})
        self.promo_codes[promo.code] = promo
        return promo

    def list_codes(self) -> list[PromoCode]:
        """All promo codes"""
        return list(self.promo_codes.values())

    def check_eligibility(
        self,
        promo: PromoCode,
        subtotal: float,
        now: Optional[datetime] = None,
    ) -> Optional[str]:
        """
        Check whether a promo can be used right now.

        Returns:
            None when usable, otherwise a customer-facing error message
        """
        now = now or datetime.now()

        if not promo.active:
            return "Promo code not found or expired"
        if promo.start_date and promo.start_date > now:
            return "This promo code is not yet active"
        if promo.end_date and promo.end_date < now:
            return "Promo code not found or expired"
        if promo.min_order_amount and subtotal < promo.min_order_amount:
            return f"Minimum order ${promo.min_order_amount:.2f} required"
        if promo.max_uses is not None and promo.uses_count >= promo.max_uses:
            return "This code has been used up"
        return None


# Singleton instance
promo_db = PromoCodeDatabase()
