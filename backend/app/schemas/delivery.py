"""
Delivery Pydantic schemas.

Defines request and response models for delivery management and the
delivery log endpoints.
"""

import uuid
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List
from backend.app.models.delivery_enums import DeliveryStatus
from backend.app.schemas.auth import UserResponse


class DeliveryCreate(BaseModel):
    """Schema for creating a new delivery."""
    user_id: uuid.UUID = Field(..., description="Owner of the delivery")
    description: str = Field(..., min_length=1, max_length=500)


class DeliveryStatusUpdate(BaseModel):
    """Schema for PATCH /deliveries/{id}/status."""
    status: DeliveryStatus


class DeliveryLogCreate(BaseModel):
    """Schema for appending a log entry to a delivery."""
    delivery_id: uuid.UUID
    description: str = Field(..., min_length=1, max_length=1000)


class DeliveryOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    name: str
    email: str


class DeliveryLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    delivery_id: uuid.UUID
    description: str
    created_at: datetime
    updated_at: datetime


class DeliveryResponse(BaseModel):
    """Delivery row with its owner's public contact info."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    user_id: uuid.UUID
    description: str
    status: DeliveryStatus
    created_at: datetime
    updated_at: datetime
    user: DeliveryOwner


class DeliveryDetailResponse(BaseModel):
    """Delivery together with its owner and ordered log entries."""
    model_config = ConfigDict(from_attributes=True)
    
    id: uuid.UUID
    user_id: uuid.UUID
    description: str
    status: DeliveryStatus
    created_at: datetime
    updated_at: datetime
    user: UserResponse
    logs: List[DeliveryLogResponse] = []
