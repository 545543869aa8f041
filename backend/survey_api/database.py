"""
Survey API Backend: Database Session Management
==================================================

What:  Async SQLAlchemy engine construction, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   The application factory builds one engine per app and stores it (and
       its session factory) on `app.state`. The `get_db_session` dependency
       pulls the factory from the request's app, so every handler receives
       its session explicitly instead of reaching for a module-global client.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at app construction; sessions are created per-request.

Connection Pooling Strategy (PostgreSQL):
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    SQLite (tests, local hacking) skips the pool arguments; aiosqlite
    picks its own pool class.
"""

from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from survey_api.config import Settings


# ── Document Column Type ──────────────────────────────────────────────────
# What: Column type for schema-less document content (survey bodies, answers)
# JSONB on PostgreSQL (indexable, binary); plain JSON everywhere else
DocumentJSON = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every collection model inherits from this so that Alembic and the test
    fixtures see a single metadata object.
    """
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def _engine_kwargs(settings: Settings) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {
        # Echo SQL queries only in DEBUG mode; SQL logging is noisy
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return kwargs


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    return create_async_engine(settings.database_url, **_engine_kwargs(settings))


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build the per-request session factory.

    expire_on_commit=False: documents are serialized after the commit in
    get_db_session has run, so attributes must stay loaded.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Looks up the session factory the application factory stored on app.state
        2. Yields a fresh session to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/surveys")
        async def list_surveys(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(engine: AsyncEngine) -> None:
    """
    Create every table registered on Base.metadata.

    Used by the test suite and local SQLite runs. Production schemas are
    managed by Alembic migrations.
    """
    # Import models so they register with Base before create_all runs
    from survey_api import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
