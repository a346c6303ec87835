"""User logins repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from identity_store.domain.user.aggregates.user import IdentityUser
from identity_store.domain.user.value_objects.user_login_info import UserLoginInfo


class UserLoginRepository(ABC):
    """Repository interface for external login bindings."""

    @abstractmethod
    async def add(self, user: Optional[IdentityUser], login: Optional[UserLoginInfo]) -> None:
        """Bind an external login to the user."""

    @abstractmethod
    async def delete(self, user: IdentityUser, login: UserLoginInfo) -> None:
        """Remove the user's binding for the given login."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> None:
        """Remove every login binding of the user."""

    @abstractmethod
    async def find_user_id_by_login(self, login: Optional[UserLoginInfo]) -> str:
        """Resolve a login to its owning user ID, or an empty string."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[UserLoginInfo]:
        """List the user's login bindings."""
