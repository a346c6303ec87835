"""
In-memory SQLite fixtures for persistence and store tests.

Every test gets a fresh database: tables are created on a new engine and
the engine is disposed afterwards.

Usage:
    # In your conftest.py
    from tests.shared.fixtures.database import async_engine, db_context

    async def test_something(db_context):
        repo = RoleRepositorySQLAlchemy(db_context.session)
        await repo.add(role)
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from identity_config import Settings
from identity_store.infrastructure.persistence.sqlalchemy import (
    IdentityDbContext,
    create_session_maker,
    create_tables,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    """Async engine bound to a private in-memory SQLite database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # One connection, so the in-memory DB survives
    )
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(async_engine):
    return create_session_maker(async_engine)


@pytest_asyncio.fixture(scope="function")
async def db_context(session_maker):
    """Persistence context for one test; closed afterwards."""
    context = IdentityDbContext.open(session_maker)

    yield context

    await context.close()


@pytest.fixture
def db_session(db_context):
    return db_context.session


@pytest.fixture
def store_settings() -> Settings:
    """Settings with the default store behaviour, independent of env files."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        lockout_end_absent_as_now=True,
        cascade_user_delete=True,
    )
