"""Database initialization utilities."""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with IdentityBase.metadata
import identity_store.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from identity_config import get_settings
from identity_store.infrastructure.persistence.sqlalchemy.base import IdentityBase
from identity_store.infrastructure.persistence.sqlalchemy.engine import create_engine
from identity_store.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all identity tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring identity tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all identity tables (USE WITH CAUTION!)."""
    logger.warning("Dropping identity tables...")
    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)


async def _init_database() -> None:
    settings = get_settings()
    database_url = settings.database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    logger.info("Initializing identity database: %s", db_display)

    engine = create_engine(settings)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()

    logger.info("Identity database initialized successfully!")


def db_init() -> None:
    """Initialize database (create missing tables)."""
    configure_logging()
    asyncio.run(_init_database())
