"""
Service-level tests for DeliveryLogService, run against a session
without going through HTTP.
"""

import uuid
import pytest

from backend.app.core.exceptions import ConflictError, InsufficientPermissionsError, ResourceNotFoundError
from backend.app.domain.delivery.delivery_log_service import DeliveryLogService
from backend.app.models.delivery_enums import DeliveryStatus
from backend.app.models.enums import UserRole


@pytest.mark.asyncio
async def test_create_log_persists_entry(db_session, customer, make_delivery):
    delivery = await make_delivery(customer, status=DeliveryStatus.PENDING)
    
    log = await DeliveryLogService.create_log(db_session, delivery.id, "label printed")
    
    assert log.delivery_id == delivery.id
    assert log.description == "label printed"
    assert log.created_at is not None


@pytest.mark.asyncio
async def test_create_log_conflict_carries_status(db_session, customer, make_delivery):
    delivery = await make_delivery(customer, status=DeliveryStatus.DELIVERED)
    
    with pytest.raises(ConflictError) as exc_info:
        await DeliveryLogService.create_log(db_session, delivery.id, "too late")
    
    assert exc_info.value.status_code == 409
    assert exc_info.value.details["status"] == "delivered"


@pytest.mark.asyncio
async def test_create_log_missing_delivery(db_session):
    with pytest.raises(ResourceNotFoundError):
        await DeliveryLogService.create_log(db_session, uuid.uuid4(), "ghost")


@pytest.mark.asyncio
async def test_get_missing_delivery_returns_none(db_session, customer):
    result = await DeliveryLogService.get_delivery_with_logs(
        db_session, uuid.uuid4(), customer.id, UserRole.CUSTOMER
    )
    assert result is None


@pytest.mark.asyncio
async def test_get_foreign_delivery_as_customer_raises(db_session, customer, other_customer, make_delivery):
    delivery = await make_delivery(customer)
    
    with pytest.raises(InsufficientPermissionsError):
        await DeliveryLogService.get_delivery_with_logs(
            db_session, delivery.id, other_customer.id, UserRole.CUSTOMER
        )
