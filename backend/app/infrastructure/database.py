"""Database Session Manager — async engine, session factory, lifecycle and health checks.

Invariants:
    - One manager per application, created in the lifespan and closed on shutdown
    - The manager lives on app.state; routes reach it only through get_db
    - Every session rolls back on exception and is always closed
    - SQLite connections enforce foreign keys (PRAGMA foreign_keys=ON)

Design Decisions:
    - No module-level singleton: tests and scripts construct their own manager
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only for server databases; SQLite uses SQLAlchemy's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from app.config import Settings
from app.db.base import Base

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FK constraints unless asked per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with rollback-on-error."""

    def __init__(self, database_url: str, echo: bool = False, **engine_kwargs):
        if not database_url.startswith("sqlite"):
            engine_kwargs.setdefault("pool_pre_ping", True)
            engine_kwargs.setdefault("pool_recycle", 3600)
        self.engine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            enable_sqlite_foreign_keys(self.engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create every table from the ORM metadata (tests and local SQLite runs)."""
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def create_db_manager(settings: Settings) -> DatabaseSessionManager:
    """Build the manager described by settings."""
    engine_kwargs = {}
    if not settings.database_url.startswith("sqlite"):
        engine_kwargs["pool_size"] = settings.database_pool_size
        engine_kwargs["max_overflow"] = settings.database_max_overflow
    return DatabaseSessionManager(
        settings.database_url, echo=settings.database_echo, **engine_kwargs,
    )


def get_db_manager(request: Request) -> DatabaseSessionManager:
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
