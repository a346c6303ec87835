"""User repository interfaces."""

from identity_store.domain.user.repositories.user_claim_repository import (
    UserClaimRepository,
)
from identity_store.domain.user.repositories.user_login_repository import (
    UserLoginRepository,
)
from identity_store.domain.user.repositories.user_repository import UserRepository
from identity_store.domain.user.repositories.user_role_repository import (
    UserRoleRepository,
)

__all__ = [
    "UserClaimRepository",
    "UserLoginRepository",
    "UserRepository",
    "UserRoleRepository",
]
