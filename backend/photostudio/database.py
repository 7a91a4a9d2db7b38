"""
PhotoStudio Backend — Database Engine & Session Factory
=========================================================

What:  Async SQLAlchemy engine construction, session factory, and the
       declarative base shared by every ORM model.
How:   `build_engine()` creates one async engine (one connection pool) from
       settings. The Storage handle owns it for the lifetime of the process;
       nothing here is created at import time.
Who:   Used by `photostudio.storage.Storage` and by Alembic.

Connection Pooling Strategy:
    pool_size / max_overflow: taken from settings (PostgreSQL only)
    pool_pre_ping:    Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite (used in tests and local runs) manages its own pool, so the sizing
    arguments are left out for it.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from photostudio.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class so they register with a single
    metadata object (used by `Storage.create_all()` and by Alembic).
    """
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine that backs the single shared connection pool.

    Args:
        settings: Application settings (database URL and pool sizing).

    Returns:
        A configured AsyncEngine. The caller owns it and must dispose it.
    """
    kwargs: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False keeps loaded attributes readable after commit, so
    repositories can hand rows back once their session has closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
