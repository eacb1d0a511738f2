"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from backend.app.api.v1.endpoints import users, sessions, deliveries, delivery_logs

router = APIRouter()

router.include_router(users.router)
router.include_router(sessions.router)
router.include_router(deliveries.router)
router.include_router(delivery_logs.router)
