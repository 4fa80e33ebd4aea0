"""Shape catalog API routes"""

from fastapi import APIRouter, HTTPException, Query

from ..models.shape import Shape, ShapeListResponse
from ..database.shapes import shape_db

router = APIRouter(prefix="/api/shapes", tags=["Shapes"])


@router.get("", response_model=ShapeListResponse)
async def list_shapes(
    include_hidden: bool = Query(False, description="Include hidden shapes"),
):
    """List shapes customers can order"""
    shapes = shape_db.list_shapes(visible_only=not include_hidden)
    return ShapeListResponse(shapes=shapes, total=len(shapes))


@router.get("/{shape_id}", response_model=Shape)
async def get_shape(shape_id: str):
    """Get a shape by ID"""
    shape = shape_db.get_shape(shape_id)
    if not shape:
        raise HTTPException(status_code=404, detail="Shape not found")
    return shape
