"""SQLAlchemy implementation of RoleRepository."""

import logging
from collections.abc import AsyncIterator, Callable
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.role import IdentityRole, RoleRepository
from identity_store.domain.role.repositories.role_repository import TRole
from identity_store.infrastructure.persistence.sqlalchemy.models import RoleModel
from identity_store.infrastructure.persistence.sqlalchemy.repositories._utils import commit

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository[TRole]):
    """SQLAlchemy implementation of the RoleRepository interface.

    ``role_factory`` is called with ``id`` and ``name`` keyword arguments
    to build the caller's role type.
    """

    def __init__(
        self,
        session: AsyncSession,
        role_factory: Callable[..., TRole] = IdentityRole,  # type: ignore[assignment]
    ) -> None:
        self._session = session
        self._role_factory = role_factory

    async def iter_all(self) -> AsyncIterator[TRole]:
        result = await self._session.execute(select(RoleModel))
        for model in result.scalars():
            yield self._map_to_domain(model)

    async def list_all(self) -> list[TRole]:
        return [role async for role in self.iter_all()]

    async def delete(self, role_id: str) -> None:
        if not role_id:
            return

        model = await self._find_model_by_id(role_id)
        if model:
            await self._session.delete(model)
            await commit(self._session)
            logger.info("Deleted role: %s", role_id)

    async def add(self, role: Optional[TRole]) -> None:
        if role is None:
            return

        self._session.add(RoleModel(id=role.id, name=role.name))
        await commit(self._session)
        logger.info("Created role: %s (name: %s)", role.id, role.name)

    async def get_name(self, role_id: str) -> str:
        if role_id:
            model = await self._find_model_by_id(role_id)
            if model:
                return model.name
        return ""

    async def get_id(self, role_name: str) -> str:
        if role_name:
            stmt = select(RoleModel).where(RoleModel.name == role_name)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            if model:
                return model.id
        return ""

    async def get_by_id(self, role_id: str) -> Optional[TRole]:
        if role_id:
            role_name = await self.get_name(role_id)
            if role_name:
                return self._role_factory(id=role_id, name=role_name)
        return None

    async def get_by_name(self, role_name: str) -> Optional[TRole]:
        if role_name:
            role_id = await self.get_id(role_name)
            if role_id:
                return self._role_factory(id=role_id, name=role_name)
        return None

    async def update(self, role: Optional[TRole]) -> None:
        if role is None:
            return

        model = await self._find_model_by_id(role.id)
        if model:
            model.name = role.name
            await commit(self._session)
            logger.debug("Updated role: %s", role.id)

    async def _find_model_by_id(self, role_id: str) -> RoleModel | None:
        stmt = select(RoleModel).where(RoleModel.id == role_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: RoleModel) -> TRole:
        return self._role_factory(id=model.id, name=model.name)
