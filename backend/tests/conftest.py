"""
Centralized Test Configuration.
"""

from contextlib import asynccontextmanager

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.pool import Pool

from backend.app.main import app
from backend.app.db.session import get_db, Base, build_engine, build_session_factory
from backend.app.core.jwt import create_access_token
from backend.app.core.security import get_password_hash
from backend.app.models.delivery import Delivery
from backend.app.models.delivery_enums import DeliveryStatus
from backend.app.models.enums import UserRole
from backend.app.models.user import User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "password123"


@event.listens_for(Pool, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints for SQLite."""
    if 'sqlite' in str(type(dbapi_conn)).lower():
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@asynccontextmanager
async def open_database(database_url: str):
    """Create the schema on a fresh engine and tear it down afterwards."""
    engine = build_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    try:
        yield build_session_factory(engine)
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@asynccontextmanager
async def app_client(session_factory):
    """ASGI client whose requests use sessions from the given factory."""
    async def override_get_db():
        async with session_factory() as session:
            yield session
    
    app.dependency_overrides[get_db] = override_get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def session_factory():
    """Fresh in-memory database per test."""
    async with open_database(TEST_DATABASE_URL) as factory:
        yield factory


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Async client for testing."""
    async with app_client(session_factory) as ac:
        yield ac


@pytest.fixture
async def file_client(tmp_path):
    """
    Client backed by an on-disk SQLite file.
    
    Each request gets its own connection, so concurrent requests really
    race against each other in the database.
    """
    database_url = f"sqlite+aiosqlite:///{tmp_path / 'deliveries.db'}"
    async with open_database(database_url) as factory:
        async with app_client(factory) as ac:
            yield ac


@pytest.fixture
def make_user(db_session):
    """Insert a user directly, bypassing registration (needed for SALE users)."""
    async def _make_user(email: str, role=UserRole.CUSTOMER, name: str = "Test User") -> User:
        user = User(
            name=name,
            email=email,
            password=get_password_hash(TEST_PASSWORD),
            role=role
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_delivery(db_session):
    async def _make_delivery(owner: User, status=DeliveryStatus.PROCESSING, description: str = "Keyboard") -> Delivery:
        delivery = Delivery(user_id=owner.id, description=description, status=status)
        db_session.add(delivery)
        await db_session.commit()
        await db_session.refresh(delivery)
        return delivery
    return _make_delivery


@pytest.fixture
def auth_headers():
    """Build a bearer header for a stored user."""
    def _auth_headers(user: User) -> dict:
        role = user.role or UserRole.CUSTOMER
        token = create_access_token(subject=str(user.id), claims={"role": role.value})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
async def sale_user(make_user):
    return await make_user("sale@test.com", role=UserRole.SALE, name="Sale Staff")


@pytest.fixture
async def customer(make_user):
    return await make_user("customer@test.com", role=UserRole.CUSTOMER, name="Customer One")


@pytest.fixture
async def other_customer(make_user):
    return await make_user("other@test.com", role=UserRole.CUSTOMER, name="Customer Two")
