"""
Pastoral Admin Backend — Database Engine, Sessions and Unit of Work
====================================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       unit-of-work context manager.
How:   create_app() builds one engine and one session factory at startup and
       injects the factory into every repository. Repositories open short
       transactions through unit_of_work(); multi-entity writes share one.
Who:   Used by repositories, the health route and Alembic.

Connection Pooling Strategy:
    pool_size:        Persistent connections for normal load
    max_overflow:     Temporary connections for traffic spikes
    pool_pre_ping:    Validates connections before use
    pool_recycle:     Recycles long-lived connections

Unit of Work:
    async with unit_of_work(session_factory) as session:
        ...                         # every statement runs in one transaction
    # block finished     → COMMIT
    # block raised       → ROLLBACK, exception re-raised
    # task cancelled     → ROLLBACK, CancelledError re-raised
    # COMMIT itself fails → exception propagates, nothing persisted
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pastoral_admin.config import Settings


# ── Engine Configuration ──────────────────────────────────────────────────
def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    SQLite (used by the test suite) gets the dialect's default pool;
    pool sizing only applies to server databases.
    """
    if settings.database_url.startswith("sqlite"):
        return create_async_engine(settings.database_url, echo=settings.log_level == "DEBUG")

    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=settings.db_pool_recycle,
        echo=settings.log_level == "DEBUG",
    )


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: entities stay readable after their session closes,
# so services can return them to routes.
def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the session factory shared by all repositories."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which Alembic reads for
    --autogenerate and the test suite uses for create_all().
    """
    pass


# ── Unit of Work ──────────────────────────────────────────────────────────
@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Run a block of statements inside a single database transaction.

    What:    Yields a session whose work is committed only if the whole block
             succeeds.
    Who:     BaseRepository for single-statement operations and ChurchService
             for the address + church creation.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (the caller issues statements)
        3. On success: commits the transaction
        4. On any exception, including BaseException subclasses such as
           asyncio.CancelledError: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)

    Raises:
        Whatever the block raised, or the commit failure. Callers classify it.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except BaseException:
            await session.rollback()
            raise


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
