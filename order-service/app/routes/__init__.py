# API Routes

from .shapes import router as shapes_router
from .delivery import router as delivery_router
from .promo import router as promo_router
from .quote import router as quote_router

__all__ = ["shapes_router", "delivery_router", "promo_router", "quote_router"]
