"""
Delivery Log API Endpoints.

Staff append progress entries; customers and staff read a delivery
with its log history.
"""

import uuid
from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.db.session import get_db
from backend.app.schemas.delivery import DeliveryLogCreate, DeliveryDetailResponse
from backend.app.core.guards import require_role
from backend.app.models.enums import UserRole
from backend.app.domain.delivery.delivery_log_service import DeliveryLogService
from backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/delivery-logs", tags=["Delivery Logs"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_delivery_log(
    log_data: DeliveryLogCreate,
    current_user: dict = Depends(require_role([UserRole.SALE])),
    db: AsyncSession = Depends(get_db)
):
    """
    Append a log entry to a delivery.
    
    Fails with 404 if the delivery does not exist and with 409 if it is
    delivered or still processing.
    """
    log = await DeliveryLogService.create_log(db, log_data.delivery_id, log_data.description)
    
    await log_event(
        db=db,
        action=AuditAction.DELIVERY_LOG_CREATED,
        actor_id=current_user["id"],
        target_id=log.delivery_id,
        metadata={"log_id": str(log.id)}
    )
    
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/{delivery_id}", response_model=DeliveryDetailResponse)
async def show_delivery_logs(
    delivery_id: uuid.UUID = Path(..., description="Delivery ID"),
    current_user: dict = Depends(require_role([UserRole.SALE, UserRole.CUSTOMER])),
    db: AsyncSession = Depends(get_db)
):
    """
    Get a delivery with its owner and log entries.
    
    Customers can only view deliveries they own.
    """
    delivery = await DeliveryLogService.get_delivery_with_logs(
        db, delivery_id, current_user["id"], current_user["role"]
    )
    
    if delivery is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "delivery not found"}
        )
    
    return DeliveryDetailResponse.model_validate(delivery)
