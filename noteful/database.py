"""
Noteful API — Database Engine & Session Management
===================================================

What:  Async SQLAlchemy engine factory, session factory, and FastAPI dependency.
How:   `create_app()` builds one engine and one session factory from the
       Settings object and stores them on `app.state`. `get_db_session`
       opens a session per request from that factory, commits on success
       and rolls back on error.
Who:   Route handlers receive sessions through FastAPI's Depends().

Connection Pooling:
    PostgreSQL (asyncpg): pool_size / max_overflow / pool_pre_ping from settings,
    connections recycled hourly.
    SQLite (aiosqlite, tests): a single shared connection via StaticPool so an
    in-memory database survives across sessions.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from noteful.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object between the models, Alembic and the
    test fixtures that create tables directly.
    """
    pass


# ── Engine Factory ────────────────────────────────────────────────────────
def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by `settings.database_url`."""
    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=settings.log_level == "DEBUG",
        )

    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=settings.log_level == "DEBUG",
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: records stay readable after the store commits
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
        1. Opens a session from the factory stored on app.state
        2. Yields it to the route handler
        3. On success: commits (a no-op when the store already committed)
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session, returning the connection to the pool
    """
    session_factory = request.app.state.session_factory
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
async def dispose_engine(engine: AsyncEngine) -> None:
    """Close every pooled connection. Called from the lifespan on shutdown."""
    await engine.dispose()
