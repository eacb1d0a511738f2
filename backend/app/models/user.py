"""
User database model.

This module defines the User SQLAlchemy model for authentication.
"""

import uuid
from sqlalchemy import Column, String, DateTime, Enum, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backend.app.db.session import Base
from backend.app.models.enums import UserRole


class User(Base):
    """
    User model for authentication and delivery ownership.
    """
    __tablename__ = "users"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    
    # Unset roles are treated as CUSTOMER when issuing tokens
    role = Column(Enum(UserRole), default=UserRole.CUSTOMER, nullable=True)
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    deliveries = relationship("Delivery", back_populates="user")
    
    def __repr__(self):
        role = self.role.value if self.role else None
        return f"<User(id={self.id}, email='{self.email}', role='{role}')>"
