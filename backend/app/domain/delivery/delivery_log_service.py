"""
Delivery Log Service (Domain Logic).

Appends progress entries to deliveries and reads a delivery back with
its owner and log history, enforcing status and visibility rules.
"""

import logging
import uuid
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from backend.app.core.exceptions import (
    ConflictError,
    InsufficientPermissionsError,
    ResourceNotFoundError,
)
from backend.app.core.guards import can_view_delivery
from backend.app.domain.delivery.log_policy import can_append_log
from backend.app.models.delivery import Delivery
from backend.app.models.delivery_log import DeliveryLog
from backend.app.models.enums import UserRole

logger = logging.getLogger("deliveries.logs")


class DeliveryLogService:
    
    @staticmethod
    async def create_log(db: AsyncSession, delivery_id: uuid.UUID, description: str) -> DeliveryLog:
        """
        Append a log entry to a delivery.
        
        Raises:
            ResourceNotFoundError: delivery does not exist
            ConflictError: delivery status does not accept new entries
        """
        result = await db.execute(select(Delivery).where(Delivery.id == delivery_id))
        delivery = result.scalar_one_or_none()
        
        if not delivery:
            raise ResourceNotFoundError("delivery", delivery_id)
        
        decision = can_append_log(delivery.status)
        if not decision.allowed:
            logger.info(
                "Rejected log append for delivery %s in status %s",
                delivery_id, delivery.status.value
            )
            raise ConflictError(
                decision.reason,
                details={"delivery_id": str(delivery_id), "status": delivery.status.value}
            )
        
        log = DeliveryLog(delivery_id=delivery.id, description=description)
        db.add(log)
        await db.commit()
        await db.refresh(log)
        
        return log
    
    @staticmethod
    async def get_delivery_with_logs(
        db: AsyncSession,
        delivery_id: uuid.UUID,
        caller_id: uuid.UUID,
        caller_role: UserRole
    ) -> Optional[Delivery]:
        """
        Load a delivery with its owner and ordered logs.
        
        Returns None when the delivery does not exist so the caller can
        answer with a plain not-found body.
        
        Raises:
            InsufficientPermissionsError: a customer asked for someone else's delivery
        """
        result = await db.execute(
            select(Delivery)
            .options(selectinload(Delivery.user), selectinload(Delivery.logs))
            .where(Delivery.id == delivery_id)
        )
        delivery = result.scalar_one_or_none()
        
        if not delivery:
            return None
        
        if not can_view_delivery(caller_role, caller_id, delivery.user_id):
            raise InsufficientPermissionsError("the user can only view their deliveries")
        
        return delivery
