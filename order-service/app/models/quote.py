"""Quote models for the order service"""

from pydantic import BaseModel, Field
from typing import Any, Optional
from datetime import datetime


class FulfillmentSelection(BaseModel):
    """Requested delivery method and speed"""
    method: Optional[str] = None
    speed: Optional[str] = None


class QuoteRequest(BaseModel):
    """
    Request to price a cart.

    `sets` is passed to the engine as-is; malformed entries are normalized
    there rather than rejected here.
    """
    sets: list[Any] = []
    fulfillment: FulfillmentSelection = FulfillmentSelection()
    # Re-validated on every quote; discounts are never taken from the client
    promo_code: Optional[str] = None
    admin_discount: Optional[Any] = None


class QuoteLineItem(BaseModel):
    """Signed breakdown entry"""
    id: str
    label: str
    amount: float
    display_amount: str


class QuoteSizes(BaseModel):
    """Sizing mode and per-finger sizes of a set"""
    mode: str = "standard"
    values: dict[str, str] = {}


class QuoteSetSummary(BaseModel):
    """Pricing of one accepted set"""
    id: str
    name: Optional[str] = None
    shape_id: str
    shape_name: str
    quantity: int = Field(gt=0)
    unit_price: float
    setup_fee: float
    subtotal: float
    requires_custom_art: bool
    notes: Optional[str] = None
    sizes: QuoteSizes = QuoteSizes()


class QuoteFulfillment(BaseModel):
    """Method and speed used after fallbacks"""
    method: str
    speed: str


class QuoteResponse(BaseModel):
    """Priced breakdown"""
    line_items: list[QuoteLineItem]
    subtotal: float
    discounts: float
    total: float
    display_total: str
    estimated_completion_days: int
    estimated_completion_date: datetime
    summary: list[QuoteSetSummary]
    fulfillment: QuoteFulfillment
