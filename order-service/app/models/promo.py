"""Promo code models for the order service"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from pricing.promos import PromoType

from .quote import FulfillmentSelection


class PromoCode(BaseModel):
    """
    Promo code definition.

    `uses_count` is maintained by whoever places orders; this service only
    reads it when checking `max_uses`.
    """
    id: str
    code: str
    description: Optional[str] = None
    type: PromoType
    value: float = Field(default=0.0, ge=0)
    active: bool = True
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    min_order_amount: Optional[float] = Field(default=None, ge=0)
    max_uses: Optional[int] = Field(default=None, ge=0)
    uses_count: int = Field(default=0, ge=0)


class ValidatePromoRequest(BaseModel):
    """Request to check a promo code against the current cart"""
    code: str
    sets: list = []
    fulfillment: FulfillmentSelection = FulfillmentSelection()


class ValidatePromoResponse(BaseModel):
    """Promo validation result; quote with the same code as `promo_code`"""
    valid: bool
    code: Optional[str] = None
    discount: float = 0.0
    discount_description: Optional[str] = None
    subtotal: Optional[float] = None
    new_total: Optional[float] = None
    error: Optional[str] = None
