"""Identity store - SQL-backed user and role storage for authentication frameworks.

This package handles:
- User storage (profile, password hash, security stamp, lockout fields)
- Role storage and single-role membership
- Claims and external login bindings

Authentication itself (password verification, token issuance) is left to
the calling framework.
"""

from identity_store.application import NO_LOCKOUT, RoleStore, UserStore
from identity_store.domain import (
    Claim,
    IdentityRole,
    IdentityUser,
    UserLoginInfo,
)
from identity_store.exceptions import (
    ContextClosedError,
    IdentityStoreError,
    InvalidArgumentError,
)
from identity_store.infrastructure.persistence.sqlalchemy import IdentityDbContext

__all__ = [
    # Domain
    "Claim",
    "IdentityRole",
    "IdentityUser",
    "UserLoginInfo",
    # Exceptions
    "ContextClosedError",
    "IdentityStoreError",
    "InvalidArgumentError",
    # Persistence
    "IdentityDbContext",
    # Stores
    "NO_LOCKOUT",
    "RoleStore",
    "UserStore",
]
