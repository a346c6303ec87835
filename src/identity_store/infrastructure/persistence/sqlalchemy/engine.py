"""Async engine and session factory for the identity store."""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from identity_config import Settings, get_settings


def create_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create a new async engine from settings (not cached)."""
    settings = settings or get_settings()
    options: dict = {"echo": settings.database_echo}
    if not settings.is_sqlite:
        options["pool_pre_ping"] = settings.database_pool_pre_ping
    return create_async_engine(settings.database_url, **options)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session maker whose objects stay readable after commit."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused by every
    persistence context opened without an explicit session maker.
    """
    return create_engine(get_settings())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return create_session_maker(get_engine())
