"""Role repository interface."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, Optional, TypeVar

from identity_store.domain.role.aggregates.role import IdentityRole

TRole = TypeVar("TRole", bound=IdentityRole)


class RoleRepository(ABC, Generic[TRole]):
    """Repository interface for roles."""

    @abstractmethod
    def iter_all(self) -> AsyncIterator[TRole]:
        """Lazily yield every stored role, order unspecified."""

    @abstractmethod
    async def list_all(self) -> list[TRole]:
        """List all roles."""

    @abstractmethod
    async def delete(self, role_id: str) -> None:
        """Delete a role by ID. Unknown or empty IDs are ignored."""

    @abstractmethod
    async def add(self, role: Optional[TRole]) -> None:
        """Insert a new role."""

    @abstractmethod
    async def get_name(self, role_id: str) -> str:
        """Return the role name, or an empty string if not found."""

    @abstractmethod
    async def get_id(self, role_name: str) -> str:
        """Return the role ID, or an empty string if not found."""

    @abstractmethod
    async def get_by_id(self, role_id: str) -> Optional[TRole]:
        """Find a role by its ID."""

    @abstractmethod
    async def get_by_name(self, role_name: str) -> Optional[TRole]:
        """Find a role by its name."""

    @abstractmethod
    async def update(self, role: Optional[TRole]) -> None:
        """Overwrite the stored name of an existing role."""
