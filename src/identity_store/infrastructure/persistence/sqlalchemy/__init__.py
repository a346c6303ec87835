"""SQLAlchemy implementation of identity store persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel, RoleModel, UserClaimModel, UserLoginModel: row shapes
- IdentityDbContext: per-unit-of-work session owner
- *RepositorySQLAlchemy: single-table repository implementations
"""

from identity_store.infrastructure.persistence.sqlalchemy.base import IdentityBase
from identity_store.infrastructure.persistence.sqlalchemy.context import (
    IdentityDbContext,
)
from identity_store.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    create_session_maker,
    get_engine,
    get_session_maker,
)
from identity_store.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserClaimModel,
    UserLoginModel,
    UserModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories import (
    RoleRepositorySQLAlchemy,
    UserClaimRepositorySQLAlchemy,
    UserLoginRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "IdentityDbContext",
    "RoleModel",
    "RoleRepositorySQLAlchemy",
    "UserClaimModel",
    "UserClaimRepositorySQLAlchemy",
    "UserLoginModel",
    "UserLoginRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "UserRoleRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
    "get_engine",
    "get_session_maker",
]
