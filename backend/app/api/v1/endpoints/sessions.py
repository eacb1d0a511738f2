"""
Session (login) endpoint.

Exchanges email and password for a signed session token.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from backend.app.db.session import get_db
from backend.app.models.user import User
from backend.app.models.enums import UserRole
from backend.app.schemas.auth import SessionCreate, SessionResponse, UserResponse
from backend.app.core.security import verify_password
from backend.app.core.jwt import create_access_token
from backend.app.core.exceptions import AuthenticationError
from backend.app.services.audit import log_event, AuditAction

router = APIRouter(prefix="/sessions", tags=["Authentication"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.post("", response_model=SessionResponse)
async def create_session(
    credentials: SessionCreate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """
    Login user and return a session token.
    
    Unknown emails and wrong passwords produce the same error so the
    response does not reveal which accounts exist.
    """
    ip_address = request.client.host if request.client else None
    
    result = await db.execute(select(User).where(User.email == credentials.email))
    user = result.scalar_one_or_none()
    
    password_ok = await run_in_threadpool(
        verify_password, credentials.password, user.password if user else None
    )
    if not user or not password_ok:
        await log_event(
            db=db,
            action=AuditAction.LOGIN_FAILED,
            actor_id=user.id if user else None,
            metadata={"email": credentials.email},
            ip_address=ip_address
        )
        raise AuthenticationError(INVALID_CREDENTIALS)
    
    role = user.role or UserRole.CUSTOMER
    token = create_access_token(subject=str(user.id), claims={"role": role.value})
    
    await log_event(
        db=db,
        action=AuditAction.LOGIN_SUCCESS,
        actor_id=user.id,
        ip_address=ip_address
    )
    
    return SessionResponse(token=token, user=UserResponse.model_validate(user))
