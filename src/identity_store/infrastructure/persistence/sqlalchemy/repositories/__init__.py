# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for the identity store."""

from identity_store.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_claim_repository import (
    UserClaimRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_login_repository import (
    UserLoginRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_role_repository import (
    UserRoleRepositorySQLAlchemy,
)

__all__ = [
    "RoleRepositorySQLAlchemy",
    "UserClaimRepositorySQLAlchemy",
    "UserLoginRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "UserRoleRepositorySQLAlchemy",
]
