"""
Delivery database model.

A delivery is a trackable shipment owned by exactly one user.
"""

import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backend.app.db.session import Base
from backend.app.models.delivery_enums import DeliveryStatus


class Delivery(Base):
    """
    Delivery model.
    
    Status is changed by staff through the status update endpoint and is
    read by the log service to decide whether a log entry may be appended.
    """
    __tablename__ = "deliveries"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    
    # Ownership
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    
    description = Column(String(500), nullable=False)
    status = Column(Enum(DeliveryStatus), default=DeliveryStatus.PROCESSING, nullable=False, index=True)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    user = relationship("User", back_populates="deliveries")
    logs = relationship(
        "DeliveryLog",
        back_populates="delivery",
        order_by="DeliveryLog.created_at",
    )
    
    def __repr__(self):
        return f"<Delivery(id={self.id}, user_id={self.user_id}, status='{self.status.value}')>"
