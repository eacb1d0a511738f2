"""
Audit Log Database Model.

Tracks security-critical events and delivery changes for monitoring.
"""

from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from backend.app.db.session import Base


class AuditLog(Base):
    """
    Audit log model for tracking security events and staff actions.
    
    Events logged:
    - USER_CREATED
    - LOGIN_SUCCESS / LOGIN_FAILED
    - DELIVERY_CREATED / DELIVERY_STATUS_CHANGED
    - DELIVERY_LOG_CREATED
    """
    __tablename__ = "audit_logs"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # Who performed the action (None for anonymous attempts)
    actor_id = Column(String(36), index=True, nullable=True)
    
    action = Column(String(100), nullable=False, index=True)
    
    # What the action was applied to (user or delivery id)
    target_id = Column(String(36), index=True, nullable=True)
    
    meta_data = Column(JSON, nullable=True)
    ip_address = Column(String(50), nullable=True)
    
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    
    def __repr__(self):
        return f"<AuditLog(id={self.id}, action='{self.action}', actor={self.actor_id}, target={self.target_id})>"
