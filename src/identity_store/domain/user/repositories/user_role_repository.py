"""User-to-role association interface (one role per user)."""

from abc import ABC, abstractmethod


class UserRoleRepository(ABC):
    """Manages the single role reference held by a user."""

    @abstractmethod
    async def get_role_name(self, user_id: str) -> str:
        """Return the name of the user's role, or an empty string."""

    @abstractmethod
    async def set_role(self, user_id: str, role_id: str) -> None:
        """Point the user at the given role."""

    @abstractmethod
    async def clear_role(self, user_id: str) -> None:
        """Remove the user's role reference."""
