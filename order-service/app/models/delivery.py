"""Delivery method models for the order service"""

from pydantic import BaseModel, Field


class SpeedTier(BaseModel):
    """Turnaround tier of a delivery method"""
    id: str
    label: str
    description: str = ""
    fee: float = Field(ge=0)
    days: int = Field(ge=0)
    tagline: str = ""


class DeliveryMethod(BaseModel):
    """Fulfillment channel offered to customers"""
    id: str
    label: str
    description: str = ""
    base_fee: float = Field(default=0.0, ge=0)
    speed_options: dict[str, SpeedTier]
    default_speed: str


class DeliveryMethodsResponse(BaseModel):
    """Delivery-method table keyed by method id"""
    methods: dict[str, DeliveryMethod]
