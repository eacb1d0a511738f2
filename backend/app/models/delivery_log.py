"""
Delivery Log database model.

Append-only progress notes attached to a delivery.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backend.app.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeliveryLog(Base):
    """
    Delivery log entry.
    
    created_at is set client-side with microsecond precision so that
    entries written in the same second keep their insertion order.
    """
    __tablename__ = "delivery_logs"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    delivery_id = Column(Uuid, ForeignKey("deliveries.id"), nullable=False, index=True)
    description = Column(String(1000), nullable=False)
    
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    delivery = relationship("Delivery", back_populates="logs")
    
    def __repr__(self):
        return f"<DeliveryLog(id={self.id}, delivery_id={self.delivery_id})>"
