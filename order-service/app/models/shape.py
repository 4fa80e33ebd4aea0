"""Shape models for the order service"""

from pydantic import BaseModel, Field
from typing import Optional


class Shape(BaseModel):
    """Nail shape in the catalog"""
    id: str
    name: str
    base_price: float = Field(ge=0)
    image_url: Optional[str] = None
    is_visible: bool = True
    display_order: int = 0

    class Config:
        from_attributes = True


class ShapeListResponse(BaseModel):
    """Visible shapes"""
    shapes: list[Shape]
    total: int
