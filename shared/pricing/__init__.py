# Order Pricing & Fulfillment Engine
# Pure calculation of itemized order breakdowns and completion estimates

from .engine import PricingEngine, compute_breakdown, CUSTOM_ART_SETUP_FEE
from .exceptions import PricingError, DeliveryConfigurationError
from .models import (
    Breakdown,
    CatalogShape,
    CustomArtAsset,
    DeliveryMethodConfig,
    FulfillmentRequest,
    ItemSelection,
    ItemSummary,
    LegacyPromoCode,
    LineItem,
    PromoInput,
    SpeedOption,
    ValidatedPromo,
)
from .money import format_currency

__all__ = [
    "PricingEngine",
    "compute_breakdown",
    "CUSTOM_ART_SETUP_FEE",
    "PricingError",
    "DeliveryConfigurationError",
    "Breakdown",
    "CatalogShape",
    "CustomArtAsset",
    "DeliveryMethodConfig",
    "FulfillmentRequest",
    "ItemSelection",
    "ItemSummary",
    "LegacyPromoCode",
    "LineItem",
    "PromoInput",
    "SpeedOption",
    "ValidatedPromo",
    "format_currency",
]
