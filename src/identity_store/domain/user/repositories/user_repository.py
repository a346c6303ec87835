"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, Optional, TypeVar, Union

from identity_store.domain.user.aggregates.user import IdentityUser

TUser = TypeVar("TUser", bound=IdentityUser)


class UserRepository(ABC, Generic[TUser]):
    """Repository interface for users."""

    @abstractmethod
    def iter_all(self) -> AsyncIterator[TUser]:
        """Lazily yield every stored user, order unspecified."""

    @abstractmethod
    async def list_all(self) -> list[TUser]:
        """List all users."""

    @abstractmethod
    async def get_user_name(self, user_id: str) -> str:
        """Return the user name for an ID, or an empty string."""

    @abstractmethod
    async def get_user_id(self, user_name: str) -> str:
        """Return the user ID for a user name, or an empty string."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[TUser]:
        """Find a user by their ID."""

    @abstractmethod
    async def get_by_name(self, user_name: str) -> Optional[TUser]:
        """Find a user by their user name (case-sensitive)."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[TUser]:
        """Find a user by their email address."""

    @abstractmethod
    async def get_password_hash(self, user_id: str) -> str:
        """Return the stored password hash, or an empty string."""

    @abstractmethod
    async def set_password_hash(self, user_id: str, password_hash: str) -> None:
        """Persist a new password hash for the user."""

    @abstractmethod
    async def get_security_stamp(self, user_id: str) -> str:
        """Return the stored security stamp, or an empty string."""

    @abstractmethod
    async def set_security_stamp(self, user_id: str, stamp: str) -> None:
        """Persist a new security stamp for the user."""

    @abstractmethod
    async def add(self, user: Optional[TUser]) -> None:
        """Insert a new user."""

    @abstractmethod
    async def update(self, user: Optional[TUser]) -> None:
        """Overwrite every mutable field of an existing user."""

    @abstractmethod
    async def delete(self, user: Union[TUser, str, None]) -> None:
        """Delete a user, given the user or its ID."""
