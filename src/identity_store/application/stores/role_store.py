"""Role management surface over RoleRepositorySQLAlchemy."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Generic, Optional

from identity_store.domain.role import IdentityRole
from identity_store.domain.role.repositories.role_repository import TRole
from identity_store.exceptions import require
from identity_store.infrastructure.persistence.sqlalchemy import (
    IdentityDbContext,
    RoleRepositorySQLAlchemy,
)


class RoleStore(Generic[TRole]):
    """
    Role store for an external authentication framework.

    The store owns its persistence context and releases it on ``close()``
    (or when leaving ``async with``). Not safe for concurrent use; open one
    store per unit of work.
    """

    def __init__(
        self,
        context: IdentityDbContext,
        role_factory: Callable[..., TRole] = IdentityRole,  # type: ignore[assignment]
    ):
        self._context: IdentityDbContext | None = context
        self._role_repository: RoleRepositorySQLAlchemy[TRole] = (
            RoleRepositorySQLAlchemy(context.session, role_factory)
        )

    def roles(self) -> AsyncIterator[TRole]:
        """Lazily iterate over all roles."""
        return self._role_repository.iter_all()

    async def list_roles(self) -> list[TRole]:
        return await self._role_repository.list_all()

    async def create(self, role: TRole) -> None:
        require(role, "role")
        await self._role_repository.add(role)

    async def delete(self, role: TRole) -> None:
        require(role, "role")
        await self._role_repository.delete(role.id)

    async def find_by_id(self, role_id: str) -> Optional[TRole]:
        return await self._role_repository.get_by_id(role_id)

    async def find_by_name(self, role_name: str) -> Optional[TRole]:
        return await self._role_repository.get_by_name(role_name)

    async def update(self, role: TRole) -> None:
        require(role, "role")
        await self._role_repository.update(role)

    async def close(self) -> None:
        """Release the persistence context. Repeated calls are no-ops."""
        if self._context is not None:
            context, self._context = self._context, None
            await context.close()

    async def __aenter__(self) -> RoleStore[TRole]:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
