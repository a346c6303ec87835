"""SQLAlchemy implementation of UserRoleRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import UserRoleRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories._utils import commit

logger = logging.getLogger(__name__)


class UserRoleRepositorySQLAlchemy(UserRoleRepository):
    """Stores a user's single role as the nullable ``users.role_id`` column."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_role_name(self, user_id: str) -> str:
        if not user_id:
            return ""

        # Inner join: a missing user, an unset role_id and a role_id pointing
        # at a deleted role all resolve to no row.
        stmt = (
            select(RoleModel.name)
            .join(UserModel, UserModel.role_id == RoleModel.id)
            .where(UserModel.id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() or ""

    async def set_role(self, user_id: str, role_id: str) -> None:
        if not user_id or not role_id:
            return

        model = await self._find_user_model(user_id)
        if model:
            model.role_id = role_id
            await commit(self._session)
            logger.info("Assigned role %s to user %s", role_id, user_id)

    async def clear_role(self, user_id: str) -> None:
        if not user_id:
            return

        model = await self._find_user_model(user_id)
        if model:
            model.role_id = None
            await commit(self._session)
            logger.info("Cleared role of user %s", user_id)

    async def _find_user_model(self, user_id: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
