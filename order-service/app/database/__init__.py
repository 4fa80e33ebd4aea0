# Database modules

from .shapes import shape_db, ShapeDatabase
from .delivery_methods import delivery_db, DeliveryMethodDatabase
from .promo_codes import promo_db, PromoCodeDatabase

__all__ = [
    "shape_db",
    "ShapeDatabase",
    "delivery_db",
    "DeliveryMethodDatabase",
    "promo_db",
    "PromoCodeDatabase",
]
