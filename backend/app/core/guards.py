"""
Security guards for role-based and ownership-based access control.

Provides dependencies for protecting endpoints and the predicates they
are built on.
"""

import uuid
from typing import List
from fastapi import Depends, HTTPException, status
from backend.app.models.enums import UserRole
from backend.app.core.dependencies import get_current_user


def require_role(allowed_roles: List[UserRole]):
    """
    Dependency factory for role-based access control.
    
    Usage:
        @router.post("/deliveries")
        async def create_delivery(current_user: dict = Depends(require_role([UserRole.SALE]))):
            ...
    
    Args:
        allowed_roles: List of UserRole enums that are allowed to access the endpoint
        
    Returns:
        FastAPI dependency function that validates user role
        
    Raises:
        HTTPException 403 if user role is not in allowed_roles
    """
    async def role_checker(current_user: dict = Depends(get_current_user)) -> dict:
        if current_user["role"] not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Unauthorized"
            )
        return current_user
    
    return role_checker


def can_view_delivery(role: UserRole, caller_id: uuid.UUID, owner_id: uuid.UUID) -> bool:
    """
    Decide whether a caller may read a delivery.
    
    Customers only see deliveries they own; every other role sees all of them.
    """
    if role == UserRole.CUSTOMER:
        return caller_id == owner_id
    return True
