"""Shape catalog storage for the order service"""

from typing import Optional

from pricing.catalog import DEFAULT_SHAPES, load_catalog
from pricing.models import CatalogShape

from ..models.shape import Shape


class ShapeDatabase:
    """In-memory shape catalog"""

    def __init__(self):
        self.shapes: dict[str, Shape] = {
            shape.id: Shape(
                id=shape.id,
                name=shape.name,
                base_price=float(shape.base_price),
                display_order=order,
            )
            for order, shape in enumerate(DEFAULT_SHAPES.values())
        }

    def get_shape(self, shape_id: str) -> Optional[Shape]:
        """Get a shape by ID"""
        return self.shapes.get(shape_id)

    def list_shapes(self, visible_only: bool = True) -> list[Shape]:
        """List shapes in display order"""
        shapes = [s for s in self.shapes.values() if s.is_visible or not visible_only]
        shapes.sort(key=lambda s: s.display_order)
        return shapes

    def catalog(self) -> dict[str, CatalogShape]:
        """
        Pricing snapshot of every shape.

        Hidden shapes stay priceable so existing carts keep their sets.
        """
        return load_catalog([shape.model_dump() for shape in self.shapes.values()])


# Singleton instance
shape_db = ShapeDatabase()
