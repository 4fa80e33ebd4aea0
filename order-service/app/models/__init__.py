# Order Service Models

from .shape import Shape, ShapeListResponse
from .delivery import SpeedTier, DeliveryMethod, DeliveryMethodsResponse
from .quote import (
    FulfillmentSelection,
    QuoteRequest,
    QuoteResponse,
    QuoteLineItem,
    QuoteSetSummary,
    QuoteSizes,
    QuoteFulfillment,
)
from .promo import PromoCode, ValidatePromoRequest, ValidatePromoResponse

__all__ = [
    "Shape",
    "ShapeListResponse",
    "SpeedTier",
    "DeliveryMethod",
    "DeliveryMethodsResponse",
    "FulfillmentSelection",
    "QuoteRequest",
    "QuoteResponse",
    "QuoteLineItem",
    "QuoteSetSummary",
    "QuoteSizes",
    "QuoteFulfillment",
    "PromoCode",
    "ValidatePromoRequest",
    "ValidatePromoResponse",
]
