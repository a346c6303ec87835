"""Domain layer: identity users, roles and repository interfaces."""

from identity_store.domain.role import IdentityRole, RoleRepository
from identity_store.domain.user import (
    Claim,
    IdentityUser,
    UserClaimRepository,
    UserLoginInfo,
    UserLoginRepository,
    UserRepository,
    UserRoleRepository,
)

__all__ = [
    "Claim",
    "IdentityRole",
    "IdentityUser",
    "RoleRepository",
    "UserClaimRepository",
    "UserLoginInfo",
    "UserLoginRepository",
    "UserRepository",
    "UserRoleRepository",
]
