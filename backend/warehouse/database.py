"""
Warehouse Backend — Database Engine, Sessions and Schema Bootstrap
===================================================================

What:  Async SQLAlchemy engine, session factory, FastAPI dependency and the
       startup schema bootstrap.
How:   One async engine (and therefore one connection pool) per process.
       Each request gets its own session from the factory; the session
       commits on success and rolls back on error.
When:  Engine is created at module import; sessions are created per-request;
       ``init_schema`` runs once during application startup.

Connection Pooling:
    Pool sizing comes from settings (``db_pool_size``, ``db_max_overflow``).
    Requests beyond pool capacity queue inside the pool; the application
    layer adds no coordination of its own.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from warehouse.config import settings

logger = logging.getLogger(__name__)


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    **settings.engine_options(),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: returned ORM rows stay readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every table registered on ``Base.metadata`` is created by ``init_schema``.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On error: rolls back and re-raises for the global error handler
        4. Always: closes the session (returns connection to pool)

    Writes are committed by the services themselves, inside the request,
    so a failed commit becomes a DatabaseError before any response exists.
    Teardown of this dependency runs after the response has been sent.

    Example usage in a route:
        @router.get("/api/schedule")
        async def list_schedule(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_schema() -> None:
    """
    Create every table that does not exist yet.

    What:  Idempotent bootstrap; existing tables are left untouched
           (``CREATE TABLE`` is only issued for missing tables).
    When:  Called from the application lifespan before the server accepts
           connections. Safe to call on every restart.
    """
    # Register the models on Base.metadata
    from warehouse import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    logger.info(
        "Tables verified/created: %s", ", ".join(sorted(Base.metadata.tables))
    )


async def dispose_engine() -> None:
    """Close all pooled connections. Called during application shutdown."""
    await engine.dispose()
