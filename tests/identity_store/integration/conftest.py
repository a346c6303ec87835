"""
Pytest configuration for identity store persistence and store tests.

Tests run against a private in-memory SQLite database per test.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_context,
    db_session,
    session_maker,
    store_settings,
)

__all__ = [
    "async_engine",
    "db_context",
    "db_session",
    "session_maker",
    "store_settings",
]
