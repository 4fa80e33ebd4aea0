"""Delivery method storage for the order service"""

from typing import Any, Optional

from pricing.catalog import DEFAULT_DELIVERY_METHODS

from ..models.delivery import DeliveryMethod, SpeedTier


class DeliveryMethodDatabase:
    """In-memory delivery-method table"""

    def __init__(self):
        self.methods: dict[str, DeliveryMethod] = {
            method.id: DeliveryMethod(
                id=method.id,
                label=method.label,
                description=method.description,
                base_fee=float(method.base_fee),
                speed_options={
                    speed.id: SpeedTier(
                        id=speed.id,
                        label=speed.label,
                        description=speed.description,
                        fee=float(speed.fee),
                        days=speed.days,
                        tagline=speed.tagline,
                    )
                    for speed in method.speed_options.values()
                },
                default_speed=method.default_speed,
            )
            for method in DEFAULT_DELIVERY_METHODS.values()
        }

    def get_method(self, method_id: str) -> Optional[DeliveryMethod]:
        """Get a delivery method by ID"""
        return self.methods.get(method_id)

    def list_methods(self) -> dict[str, DeliveryMethod]:
        """All configured methods keyed by ID"""
        return dict(self.methods)

    def table(self) -> dict[str, dict[str, Any]]:
        """Raw snapshot handed to the pricing engine"""
        return {method_id: method.model_dump() for method_id, method in self.methods.items()}


# Singleton instance
delivery_db = DeliveryMethodDatabase()
