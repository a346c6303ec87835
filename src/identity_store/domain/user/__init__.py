"""User domain: identity users, their claims and external logins."""

from identity_store.domain.user.aggregates import IdentityUser
from identity_store.domain.user.repositories import (
    UserClaimRepository,
    UserLoginRepository,
    UserRepository,
    UserRoleRepository,
)
from identity_store.domain.user.value_objects import Claim, UserLoginInfo

__all__ = [
    "Claim",
    "IdentityUser",
    "UserClaimRepository",
    "UserLoginInfo",
    "UserLoginRepository",
    "UserRepository",
    "UserRoleRepository",
]
