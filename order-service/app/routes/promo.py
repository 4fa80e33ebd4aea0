"""Promo code API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from pricing import DeliveryConfigurationError
from pricing.money import ZERO

from ..models.promo import PromoCode, ValidatePromoRequest, ValidatePromoResponse
from ..database.promo_codes import promo_db
from ..security.admin import require_admin
from ..services.pricing import price_cart, validate_promo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/promo-codes", tags=["Promo Codes"])


@router.post("/validate", response_model=ValidatePromoResponse)
async def validate_promo_code(request: ValidatePromoRequest):
    """
    Validate a promo code for the current cart.

    Invalid codes are reported in the body (`valid: false`), not as errors,
    so the order builder can show the message inline.
    """
    code = request.code.strip()
    if not code:
        return ValidatePromoResponse(valid=False, error="Promo code is required")

    promo = promo_db.get_by_code(code)
    if not promo:
        return ValidatePromoResponse(valid=False, error="Promo code not found or expired")

    try:
        # Priced without any discount so the promo sees the full subtotal
        breakdown = price_cart(request.sets, request.fulfillment)
    except DeliveryConfigurationError as e:
        logger.error(f"Pricing unavailable: {e}")
        raise HTTPException(status_code=503, detail="Pricing unavailable")

    validated, error = validate_promo(promo, breakdown)
    if error:
        return ValidatePromoResponse(valid=False, code=promo.code, error=error)

    new_total = max(ZERO, breakdown.subtotal - validated.discount)

    logger.info(f"Promo {promo.code} validated: discount={validated.discount}")

    return ValidatePromoResponse(
        valid=True,
        code=promo.code,
        discount=float(validated.discount),
        discount_description=validated.description,
        subtotal=float(breakdown.subtotal),
        new_total=float(new_total),
    )


@router.get("", response_model=list[PromoCode])
async def list_promo_codes(is_admin: bool = Depends(require_admin)):
    """List all promo codes (operators only)"""
    return promo_db.list_codes()
