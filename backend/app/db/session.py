"""
Database engine and session wiring for the delivery store.

Users, deliveries and delivery logs all go through the async engine
built here. Endpoints receive a session through the `get_db` dependency
rather than importing one.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from backend.app.core.config import settings

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.
    
    Pool sizing from settings applies to server databases only. SQLite
    gets a thread-tolerant connection, and in-memory SQLite is pinned to a
    single shared connection so every session sees the same tables.
    """
    url = make_url(database_url)
    
    if url.get_backend_name() != "sqlite":
        return create_async_engine(
            url,
            echo=echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_async_engine(url, echo=echo, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.database_url, echo=settings.db_echo)
AsyncSessionLocal = build_session_factory(engine)


async def get_db():
    """FastAPI dependency yielding one session per request."""
    async with AsyncSessionLocal() as session:
        yield session
