"""User claims repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from identity_store.domain.user.aggregates.user import IdentityUser
from identity_store.domain.user.value_objects.claim import Claim


class UserClaimRepository(ABC):
    """Repository interface for a user's claims."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Claim]:
        """List the user's claims in insertion order."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> None:
        """Remove every claim of the user."""

    @abstractmethod
    async def add(self, claim: Optional[Claim], user_id: str) -> None:
        """Attach a claim to the user. Duplicates are allowed."""

    @abstractmethod
    async def delete(self, user: Optional[IdentityUser], claim: Optional[Claim]) -> None:
        """Remove one claim row matching the exact type and value."""
