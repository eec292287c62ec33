"""
Database Configuration and Session Management

Async SQLAlchemy engine and session factory for the hostel database
(PostgreSQL, typically a managed instance that requires SSL).
"""

import ssl
from collections.abc import AsyncGenerator
from typing import Annotated
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hostelhub.config import Settings, get_settings
from hostelhub.models.orm.base import Base  # noqa: F401 - imported for Alembic


def _split_sslmode(url: str) -> tuple[str, dict]:
    """
    Move a libpq-style sslmode query parameter into asyncpg connect_args.

    asyncpg rejects sslmode in the URL, while managed Postgres providers hand
    out URLs that contain it.

    Args:
        url: PostgreSQL database URL

    Returns:
        Tuple of (URL without sslmode, connect_args)
    """
    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    connect_args: dict = {}

    sslmode = query.pop("sslmode", [None])[0]
    if sslmode == "require":
        # Encrypted but unverified, the usual managed-database setup
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = context
    elif sslmode in ("verify-ca", "verify-full"):
        context = ssl.create_default_context()
        if sslmode == "verify-ca":
            context.check_hostname = False
        connect_args["ssl"] = context
    elif sslmode == "prefer":
        connect_args["ssl"] = "prefer"

    cleaned = urlunparse(parsed._replace(query=urlencode(query, doseq=True)))
    return cleaned, connect_args


# Global engine and session factory (initialized on startup)
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """
    Get or create the async SQLAlchemy engine.

    Args:
        settings: Optional settings override (for testing)
    """
    global _engine

    if _engine is None:
        settings = settings or get_settings()
        db_url, connect_args = _split_sslmode(settings.database_url)
        _engine = create_async_engine(
            db_url,
            echo=settings.debug,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

    return _engine


def get_session_factory(settings: Settings | None = None) -> async_sessionmaker[AsyncSession]:
    """Get or create the async session factory."""
    global _async_session_factory

    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            get_engine(settings),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database sessions in FastAPI routes.

    Commits when the request handler returns, rolls back if it raises.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# Type alias for dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]


async def init_db() -> None:
    """
    Verify database connectivity.

    Called on application startup.
    """
    async with get_engine().begin() as conn:
        await conn.execute(text("SELECT 1"))


async def close_db() -> None:
    """
    Dispose of the engine.

    Called on application shutdown.
    """
    global _engine, _async_session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_factory = None
