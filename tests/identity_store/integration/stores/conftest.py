"""Fixtures for stores sharing one in-memory persistence context."""

import pytest

from identity_store import RoleStore, UserStore


@pytest.fixture
def role_store(db_context) -> RoleStore:
    return RoleStore(db_context)


@pytest.fixture
def user_store(db_context, store_settings) -> UserStore:
    return UserStore(db_context, settings=store_settings)
