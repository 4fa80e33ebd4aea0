"""Pricing API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from pricing import DeliveryConfigurationError
from pricing.normalizer import normalize_admin_discount

from ..models.quote import QuoteRequest, QuoteResponse
from ..security.admin import optional_admin
from ..services.pricing import price_cart, resolve_promo_code, to_quote_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pricing", tags=["Pricing"])


@router.post("/quote", response_model=QuoteResponse)
async def quote(
    request: QuoteRequest,
    is_admin: bool = Depends(optional_admin),
):
    """
    Price a cart.

    - Malformed sets are normalized, sets with unknown shapes are left out
    - `promo_code` is checked against the promo store on every quote;
      ineligible codes are ignored
    - `admin_discount` requires a valid X-Admin-Key header
    """
    if normalize_admin_discount(request.admin_discount) > 0 and not is_admin:
        raise HTTPException(
            status_code=403,
            detail="Admin discounts require operator authorization",
        )

    try:
        promo = resolve_promo_code(request.promo_code, request.sets, request.fulfillment)
        breakdown = price_cart(
            request.sets,
            request.fulfillment,
            promo=promo,
            admin_discount=request.admin_discount,
        )
    except DeliveryConfigurationError as e:
        logger.error(f"Pricing unavailable: {e}")
        raise HTTPException(status_code=503, detail="Pricing unavailable")

    logger.info(
        f"Quoted {len(breakdown.summary)} set(s) via "
        f"{breakdown.fulfillment.method.id}/{breakdown.fulfillment.speed.id}: "
        f"total={breakdown.total}"
    )

    return to_quote_response(breakdown)
