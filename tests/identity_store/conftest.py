"""
Pytest configuration for identity store tests.

Provides ready-made domain objects shared by unit and integration tests.
"""

import pytest

from identity_store import Claim, IdentityRole, IdentityUser, UserLoginInfo


@pytest.fixture
def alice() -> IdentityUser:
    return IdentityUser(id="u1", user_name="alice", email="alice@example.com")


@pytest.fixture
def bob() -> IdentityUser:
    return IdentityUser(id="u2", user_name="bob", email="bob@example.com")


@pytest.fixture
def admin_role() -> IdentityRole:
    return IdentityRole(id="r1", name="Admin")


@pytest.fixture
def google_login() -> UserLoginInfo:
    return UserLoginInfo(login_provider="google", provider_key="g123")


@pytest.fixture
def department_claim() -> Claim:
    return Claim(type="department", value="engineering")
