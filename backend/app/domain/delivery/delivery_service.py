"""
Delivery Service (Domain Logic).

Creates deliveries, lists them for staff, and moves them between statuses.
"""

import logging
import uuid
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from backend.app.core.exceptions import ResourceNotFoundError
from backend.app.models.delivery import Delivery
from backend.app.models.delivery_enums import DeliveryStatus
from backend.app.models.delivery_log import DeliveryLog
from backend.app.models.user import User

logger = logging.getLogger("deliveries.status")


class DeliveryService:
    
    @staticmethod
    async def create_delivery(db: AsyncSession, user_id: uuid.UUID, description: str) -> Delivery:
        """
        Create a delivery for an existing user.
        
        Raises:
            ResourceNotFoundError: owner does not exist
        """
        owner = await db.get(User, user_id)
        if not owner:
            raise ResourceNotFoundError("user", user_id)
        
        delivery = Delivery(user_id=owner.id, description=description)
        db.add(delivery)
        await db.commit()
        await db.refresh(delivery)
        
        return delivery
    
    @staticmethod
    async def list_deliveries(db: AsyncSession) -> List[Delivery]:
        result = await db.execute(
            select(Delivery)
            .options(selectinload(Delivery.user))
            .order_by(Delivery.created_at.desc())
        )
        return list(result.scalars().all())
    
    @staticmethod
    async def update_status(db: AsyncSession, delivery_id: uuid.UUID, status: DeliveryStatus) -> Delivery:
        """
        Move a delivery to a new status and record the change in its log.
        
        The status entry is written directly, without the append gate,
        since it documents the transition itself.
        
        Raises:
            ResourceNotFoundError: delivery does not exist
        """
        delivery = await db.get(Delivery, delivery_id)
        if not delivery:
            raise ResourceNotFoundError("delivery", delivery_id)
        
        previous = delivery.status
        delivery.status = status
        db.add(DeliveryLog(delivery_id=delivery.id, description=f"status changed to {status.value}"))
        
        await db.commit()
        await db.refresh(delivery)
        
        logger.info(
            "Delivery %s status %s -> %s",
            delivery_id, previous.value, status.value
        )
        return delivery
