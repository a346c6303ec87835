# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models (row shapes) for the identity store."""

from identity_store.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_claim_model import (
    UserClaimModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_login_model import (
    UserLoginModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "RoleModel",
    "UserClaimModel",
    "UserLoginModel",
    "UserModel",
]
