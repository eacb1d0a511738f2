"""
Integration tests for delivery management (SALE role).
"""

import uuid
import pytest
from sqlalchemy import select

from backend.app.models.delivery import Delivery
from backend.app.models.delivery_enums import DeliveryStatus
from backend.app.models.delivery_log import DeliveryLog


@pytest.mark.asyncio
async def test_create_delivery(client, db_session, sale_user, customer, auth_headers):
    response = await client.post(
        "/deliveries",
        json={"user_id": str(customer.id), "description": "Mechanical keyboard"},
        headers=auth_headers(sale_user)
    )
    
    assert response.status_code == 201
    
    result = await db_session.execute(select(Delivery).where(Delivery.user_id == customer.id))
    delivery = result.scalar_one()
    assert delivery.description == "Mechanical keyboard"
    assert delivery.status == DeliveryStatus.PROCESSING


@pytest.mark.asyncio
async def test_create_delivery_for_unknown_user(client, sale_user, auth_headers):
    response = await client.post(
        "/deliveries",
        json={"user_id": str(uuid.uuid4()), "description": "Nobody's parcel"},
        headers=auth_headers(sale_user)
    )
    
    assert response.status_code == 404
    assert response.json()["message"] == "user not found"


@pytest.mark.asyncio
async def test_customer_cannot_manage_deliveries(client, customer, auth_headers):
    response = await client.post(
        "/deliveries",
        json={"user_id": str(customer.id), "description": "Self-service"},
        headers=auth_headers(customer)
    )
    assert response.status_code == 403
    
    response = await client.get("/deliveries", headers=auth_headers(customer))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_list_deliveries_includes_owner(client, sale_user, customer, other_customer, make_delivery, auth_headers):
    await make_delivery(customer, description="Book")
    await make_delivery(other_customer, description="Lamp")
    
    response = await client.get("/deliveries", headers=auth_headers(sale_user))
    
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    owners = {item["description"]: item["user"] for item in data}
    assert owners["Book"] == {"name": customer.name, "email": customer.email}
    assert owners["Lamp"] == {"name": other_customer.name, "email": other_customer.email}


@pytest.mark.asyncio
async def test_update_status_records_log(client, db_session, sale_user, customer, make_delivery, auth_headers):
    delivery = await make_delivery(customer, status=DeliveryStatus.PROCESSING)
    
    response = await client.patch(
        f"/deliveries/{delivery.id}/status",
        json={"status": "shipped"},
        headers=auth_headers(sale_user)
    )
    
    assert response.status_code == 200
    
    await db_session.refresh(delivery)
    assert delivery.status == DeliveryStatus.SHIPPED
    
    result = await db_session.execute(select(DeliveryLog).where(DeliveryLog.delivery_id == delivery.id))
    logs = result.scalars().all()
    assert [log.description for log in logs] == ["status changed to shipped"]


@pytest.mark.asyncio
async def test_shipping_unlocks_log_creation(client, sale_user, customer, make_delivery, auth_headers):
    delivery = await make_delivery(customer, status=DeliveryStatus.PROCESSING)
    payload = {"delivery_id": str(delivery.id), "description": "scanned at hub"}
    
    blocked = await client.post("/delivery-logs", json=payload, headers=auth_headers(sale_user))
    assert blocked.status_code == 409
    
    await client.patch(
        f"/deliveries/{delivery.id}/status",
        json={"status": "shipped"},
        headers=auth_headers(sale_user)
    )
    
    allowed = await client.post("/delivery-logs", json=payload, headers=auth_headers(sale_user))
    assert allowed.status_code == 201


@pytest.mark.asyncio
async def test_update_status_rejects_unknown_value(client, sale_user, customer, make_delivery, auth_headers):
    delivery = await make_delivery(customer)
    
    response = await client.patch(
        f"/deliveries/{delivery.id}/status",
        json={"status": "lost"},
        headers=auth_headers(sale_user)
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_status_unknown_delivery(client, sale_user, auth_headers):
    response = await client.patch(
        f"/deliveries/{uuid.uuid4()}/status",
        json={"status": "delivered"},
        headers=auth_headers(sale_user)
    )
    assert response.status_code == 404
    assert response.json()["message"] == "delivery not found"
