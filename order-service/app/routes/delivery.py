"""Delivery method API routes"""

from fastapi import APIRouter, HTTPException

from ..models.delivery import DeliveryMethod, DeliveryMethodsResponse
from ..database.delivery_methods import delivery_db

router = APIRouter(prefix="/api/delivery-methods", tags=["Delivery"])


@router.get("", response_model=DeliveryMethodsResponse)
async def list_delivery_methods():
    """Delivery methods with their speed tiers"""
    return DeliveryMethodsResponse(methods=delivery_db.list_methods())


@router.get("/{method_id}", response_model=DeliveryMethod)
async def get_delivery_method(method_id: str):
    """Get a delivery method by ID"""
    method = delivery_db.get_method(method_id)
    if not method:
        raise HTTPException(status_code=404, detail="Delivery method not found")
    return method
