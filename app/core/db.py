"""Database connection and session management."""

import os
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger("app.core.db")

# Lazy database initialization - don't create engine at import time
engine: AsyncEngine | None = None
async_session_factory: async_sessionmaker[AsyncSession] | None = None


def normalize_database_url(database_url: str) -> str:
    """Convert a database URL to its async driver form."""
    if database_url.startswith("postgresql+psycopg2://"):
        return database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def _initialize_database() -> None:
    """Initialize database engine and session factory."""
    global engine, async_session_factory

    if engine is not None:
        return  # Already initialized

    if os.getenv("TESTING") == "true":
        # Keep as None for testing - will be overridden in test fixtures
        return

    database_url = normalize_database_url(settings.DATABASE_URL)
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=False)
    else:
        engine = create_async_engine(
            database_url,
            pool_size=settings.MAX_CONNECTIONS,
            max_overflow=0,
            pool_pre_ping=True,
            echo=False,
        )

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_engine() -> AsyncEngine:
    """Return the application engine, creating it on first use."""
    _initialize_database()
    if engine is None:
        raise RuntimeError("Database not initialized - cannot create engine")
    return engine


async def init_db() -> None:
    """Create all tables (safe to call multiple times)."""
    from app.database.base import Base
    from app.database import models  # noqa: F401  registers tables

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_initialized", tables=len(Base.metadata.tables))


async def dispose_db() -> None:
    """Release pooled connections."""
    global engine, async_session_factory

    if engine is not None:
        await engine.dispose()
    engine = None
    async_session_factory = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Yields:
        AsyncSession: Database session
    """
    # Initialize database on first use
    _initialize_database()

    if async_session_factory is None:
        raise RuntimeError("Database not initialized - cannot create session")

    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
