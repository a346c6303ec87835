"""Role domain: named roles users can be assigned to."""

from identity_store.domain.role.aggregates import IdentityRole
from identity_store.domain.role.repositories import RoleRepository

__all__ = [
    "IdentityRole",
    "RoleRepository",
]
