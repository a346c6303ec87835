"""SQLAlchemy implementation of UserLoginRepository."""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import IdentityUser, UserLoginInfo, UserLoginRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    UserLoginModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories._utils import (
    commit,
    rollback_on_error,
)

logger = logging.getLogger(__name__)


class UserLoginRepositorySQLAlchemy(UserLoginRepository):
    """SQLAlchemy implementation of UserLoginRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(
        self,
        user: Optional[IdentityUser],
        login: Optional[UserLoginInfo],
    ) -> None:
        if user is None or login is None:
            return

        self._session.add(
            UserLoginModel(
                user_id=user.id,
                login_provider=login.login_provider,
                provider_key=login.provider_key,
            )
        )
        await commit(self._session)
        logger.info("Added %s login for user %s", login.login_provider, user.id)

    async def delete(self, user: IdentityUser, login: UserLoginInfo) -> None:
        stmt = select(UserLoginModel).where(
            UserLoginModel.user_id == user.id,
            UserLoginModel.login_provider == login.login_provider,
            UserLoginModel.provider_key == login.provider_key,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            await self._session.delete(model)
            await commit(self._session)
            logger.info("Removed %s login from user %s", login.login_provider, user.id)

    async def delete_all_for_user(self, user_id: str) -> None:
        if not user_id:
            return

        stmt = delete(UserLoginModel).where(UserLoginModel.user_id == user_id)
        async with rollback_on_error(self._session):
            result = await self._session.execute(stmt)
            await self._session.commit()
        logger.debug("Deleted %d logins of user %s", result.rowcount, user_id)

    async def find_user_id_by_login(self, login: Optional[UserLoginInfo]) -> str:
        if login is None:
            return ""

        stmt = select(UserLoginModel.user_id).where(
            UserLoginModel.login_provider == login.login_provider,
            UserLoginModel.provider_key == login.provider_key,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() or ""

    async def list_for_user(self, user_id: str) -> list[UserLoginInfo]:
        if not user_id:
            return []

        stmt = select(UserLoginModel).where(UserLoginModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return [
            UserLoginInfo(
                login_provider=model.login_provider,
                provider_key=model.provider_key,
            )
            for model in result.scalars().all()
        ]
