"""
QuickNotes Backend — Database Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from settings and apply to
    server databases only. SQLite URLs keep SQLAlchemy's own pool choice
    (StaticPool for in-memory databases rejects sizing arguments).
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from quicknotes.config import settings
from quicknotes.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **overrides: Any) -> AsyncEngine:
    """
    Create an async engine for `database_url` using the configured pool settings.

    Keyword overrides are passed straight to create_async_engine (tests use
    this to pin an in-memory SQLite database to a StaticPool).
    """
    options: Dict[str, Any] = {
        # SQL echo only in DEBUG; it is very noisy otherwise
        "echo": settings.log_level == "DEBUG",
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,  # Recycle after 1 hour to drop stale connections
        )
    options.update(overrides)
    return create_async_engine(database_url, **options)


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url)

# expire_on_commit=False: attributes stay readable after the commit in
# get_db_session, when the response model is serialized.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object used by Alembic autogenerate and by
    create_tables().
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Routes declare it with scope="function": the commit runs before the
    response is sent, and a failed commit reaches the exception handlers.

    Raises:
        DatabaseError: The commit failed (→ 500)

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session, scope="function")):
            return await note_store.list_all(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Database error on commit: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to save changes",
                context={"error_type": type(e).__name__},
            ) from e
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(target: AsyncEngine = engine) -> None:
    """
    Create every table registered on Base.metadata if it does not exist.

    When:  At startup if settings.db_create_tables is set, and in tests.
    """
    # Import models so they register with Base before create_all
    from quicknotes.models import note  # noqa: F401

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool (application shutdown)."""
    await engine.dispose()
