"""
User registration endpoint.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from backend.app.db.session import get_db
from backend.app.models.user import User
from backend.app.models.enums import UserRole
from backend.app.schemas.auth import UserCreate, UserResponse
from backend.app.core.security import get_password_hash
from backend.app.core.exceptions import ConflictError
from backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/users", tags=["Users"])

EMAIL_TAKEN = "User with same email already exists"


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new customer.
    
    Rejects an email that is already registered. The password is stored
    hashed and never returned.
    """
    result = await db.execute(select(User).where(User.email == user_data.email))
    if result.scalar_one_or_none():
        raise ConflictError(EMAIL_TAKEN)
    
    new_user = User(
        name=user_data.name,
        email=user_data.email,
        password=await run_in_threadpool(get_password_hash, user_data.password),
        role=UserRole.CUSTOMER
    )
    
    db.add(new_user)
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent registration took the email after the lookup above
        await db.rollback()
        raise ConflictError(EMAIL_TAKEN)
    await db.refresh(new_user)
    
    await log_event(
        db=db,
        action=AuditAction.USER_CREATED,
        actor_id=new_user.id,
        target_id=new_user.id,
        ip_address=request.client.host if request.client else None
    )
    
    return UserResponse.model_validate(new_user)
