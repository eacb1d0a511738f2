"""
Audit logging service for tracking security events and delivery changes.

Provides centralized logging for compliance and security monitoring.
"""

from typing import Optional, Dict, Any, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from backend.app.models.audit_log import AuditLog


class AuditAction:
    """Standardized audit action constants."""
    USER_CREATED = "USER_CREATED"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAILED = "LOGIN_FAILED"
    
    DELIVERY_CREATED = "DELIVERY_CREATED"
    DELIVERY_STATUS_CHANGED = "DELIVERY_STATUS_CHANGED"
    DELIVERY_LOG_CREATED = "DELIVERY_LOG_CREATED"


async def log_event(
    db: AsyncSession,
    action: str,
    actor_id: Optional[Any] = None,
    target_id: Optional[Any] = None,
    metadata: Optional[Dict[str, Any]] = None,
    ip_address: Optional[str] = None
) -> AuditLog:
    """
    Log a security or staff event to the audit log.
    
    Args:
        db: Database session
        action: Action being performed (use AuditAction constants)
        actor_id: ID of user performing the action
        target_id: ID of the user or delivery acted upon
        metadata: Additional context as JSON
        ip_address: IP address of the request
        
    Returns:
        Created AuditLog instance
    """
    audit_log = AuditLog(
        actor_id=str(actor_id) if actor_id else None,
        action=action,
        target_id=str(target_id) if target_id else None,
        meta_data=metadata,
        ip_address=ip_address
    )
    
    db.add(audit_log)
    await db.commit()
    await db.refresh(audit_log)
    
    return audit_log


async def get_audit_logs(
    db: AsyncSession,
    action: Optional[str] = None,
    target_id: Optional[Any] = None,
    limit: int = 100
) -> List[AuditLog]:
    """
    Fetch the most recent audit entries, optionally filtered.
    """
    query = select(AuditLog)
    
    if action:
        query = query.where(AuditLog.action == action)
    if target_id:
        query = query.where(AuditLog.target_id == str(target_id))
    
    query = query.order_by(desc(AuditLog.timestamp), desc(AuditLog.id)).limit(limit)
    
    result = await db.execute(query)
    return list(result.scalars().all())
