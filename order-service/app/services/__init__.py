# Services

from .pricing import (
    get_pricing_engine,
    price_cart,
    resolve_promo_code,
    to_quote_response,
    validate_promo,
)

__all__ = [
    "get_pricing_engine",
    "price_cart",
    "resolve_promo_code",
    "to_quote_response",
    "validate_promo",
]
