"""
Authentication Pydantic schemas.

Defines request and response schemas for registration and sessions.
"""

import uuid
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from datetime import datetime
from typing import Optional
from backend.app.models.enums import UserRole


class UserCreate(BaseModel):
    """
    Schema for user registration.
    
    Used by POST /users endpoint.
    """
    name: str = Field(..., min_length=2, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    
    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class SessionCreate(BaseModel):
    """Schema for POST /sessions."""
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserResponse(BaseModel):
    """
    Public view of a user. Never carries the password field.
    """
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    name: str
    email: str
    role: Optional[UserRole] = None
    created_at: datetime
    updated_at: datetime


class SessionResponse(BaseModel):
    """Returned by a successful login."""
    token: str
    user: UserResponse
