"""
MyNotes Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and unit-of-work scope.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine, provides a session scope that
       auto-commits on success and auto-rolls-back on error.
Who:   Used by the note store dependency (mynotes.dependencies) per request.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    Server databases (PostgreSQL via asyncpg):
        pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600
    SQLite (aiosqlite):
        SQLAlchemy picks the pool class itself; sizing options are not
        accepted by every SQLite pool, so none are passed.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from mynotes.config import settings


def engine_options(database_url: str) -> Dict[str, Any]:
    """
    What:  Builds create_async_engine keyword arguments for a database URL.
    Why:   Pool sizing is only valid for server databases.
    """
    options: Dict[str, Any] = {
        # SQL echo is noisy; only useful while debugging
        "echo": settings.log_level == "DEBUG",
    }
    if database_url.startswith("sqlite"):
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    **engine_options(settings.database_url),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: returned ORM objects stay readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, used both by create_tables() and by
    Alembic's --autogenerate.
    """
    pass


# ── Session Scope ─────────────────────────────────────────────────────────
@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker = async_session_factory,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Unit-of-work around one session.

    How it works:
        1. Creates a new session from the factory
        2. Yields it for the duration of the request
        3. On success: commits anything still pending
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(bind: AsyncEngine = engine) -> None:
    """
    What:  Creates any missing tables registered on Base.metadata.
    When:  Application startup when DB_CREATE_TABLES is enabled, and tests.
    Why:   Lets a fresh SQLite file work without running Alembic first.
    """
    # Register models on Base.metadata before creating
    from mynotes.models import note  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
