"""
Delivery Management API Endpoints.

Staff (SALE role) create deliveries for customers, list them, and move
them between statuses.
"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.db.session import get_db
from backend.app.schemas.delivery import DeliveryCreate, DeliveryStatusUpdate, DeliveryResponse
from backend.app.core.guards import require_role
from backend.app.models.enums import UserRole
from backend.app.domain.delivery.delivery_service import DeliveryService
from backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/deliveries", tags=["Deliveries"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_delivery(
    delivery_data: DeliveryCreate,
    current_user: dict = Depends(require_role([UserRole.SALE])),
    db: AsyncSession = Depends(get_db)
):
    """Create a delivery owned by an existing user."""
    delivery = await DeliveryService.create_delivery(db, delivery_data.user_id, delivery_data.description)
    
    await log_event(
        db=db,
        action=AuditAction.DELIVERY_CREATED,
        actor_id=current_user["id"],
        target_id=delivery.id,
        metadata={"owner_id": str(delivery.user_id)}
    )
    
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=List[DeliveryResponse])
async def list_deliveries(
    current_user: dict = Depends(require_role([UserRole.SALE])),
    db: AsyncSession = Depends(get_db)
):
    """List every delivery with its owner's name and email."""
    deliveries = await DeliveryService.list_deliveries(db)
    return [DeliveryResponse.model_validate(d) for d in deliveries]


@router.patch("/{delivery_id}/status", response_class=Response)
async def update_delivery_status(
    delivery_id: uuid.UUID = Path(..., description="Delivery ID"),
    status_data: DeliveryStatusUpdate = ...,
    current_user: dict = Depends(require_role([UserRole.SALE])),
    db: AsyncSession = Depends(get_db)
):
    """
    Change a delivery's status.
    
    A "status changed to <status>" entry is appended to the delivery log.
    """
    await DeliveryService.update_status(db, delivery_id, status_data.status)
    
    await log_event(
        db=db,
        action=AuditAction.DELIVERY_STATUS_CHANGED,
        actor_id=current_user["id"],
        target_id=delivery_id,
        metadata={"status": status_data.status.value}
    )
    
    return Response(status_code=status.HTTP_200_OK)
