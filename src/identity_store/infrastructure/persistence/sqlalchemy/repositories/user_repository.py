"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import AsyncIterator, Callable
from datetime import datetime
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.shared.clock import utc_now
from identity_store.domain.user import IdentityUser, UserRepository
from identity_store.domain.user.repositories.user_repository import TUser
from identity_store.infrastructure.persistence.sqlalchemy.models import UserModel
from identity_store.infrastructure.persistence.sqlalchemy.repositories._utils import (
    bool_to_int,
    commit,
    datetime_to_text,
    empty_to_none,
    int_to_bool,
    text_to_datetime,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository[TUser]):
    """SQLAlchemy implementation of the UserRepository interface.

    Parameters
    ----------
    session
        Session shared with the other repositories of the unit of work
    user_factory
        Zero-argument callable returning a fresh instance of the caller's
        user type; stored fields are copied onto it
    missing_lockout_end
        Produces the lockout end for rows that have none. Defaults to
        ``utc_now``, so a user that was never locked out reads back with a
        lockout end of "now". Pass ``lambda: None`` to keep absence explicit.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_factory: Callable[[], TUser] = IdentityUser,  # type: ignore[assignment]
        missing_lockout_end: Callable[[], Optional[datetime]] = utc_now,
    ) -> None:
        self._session = session
        self._user_factory = user_factory
        self._missing_lockout_end = missing_lockout_end

    async def iter_all(self) -> AsyncIterator[TUser]:
        result = await self._session.execute(select(UserModel))
        for model in result.scalars():
            yield self.materialize(model)

    async def list_all(self) -> list[TUser]:
        return [user async for user in self.iter_all()]

    async def get_user_name(self, user_id: str) -> str:
        if user_id:
            model = await self._find_model_by_id(user_id)
            if model:
                return model.user_name
        return ""

    async def get_user_id(self, user_name: str) -> str:
        if user_name:
            model = await self._find_model_by_name(user_name)
            if model:
                return model.id
        return ""

    async def get_by_id(self, user_id: str) -> Optional[TUser]:
        if not user_id:
            return None

        model = await self._find_model_by_id(user_id)
        return self.materialize(model) if model else None

    async def get_by_name(self, user_name: str) -> Optional[TUser]:
        if not user_name:
            return None

        model = await self._find_model_by_name(user_name)
        return self.materialize(model) if model else None

    async def get_by_email(self, email: str) -> Optional[TUser]:
        if not email:
            return None

        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.materialize(model) if model else None

    async def get_password_hash(self, user_id: str) -> str:
        if user_id:
            model = await self._find_model_by_id(user_id)
            if model:
                return model.password_hash or ""
        return ""

    async def set_password_hash(self, user_id: str, password_hash: str) -> None:
        if not user_id or not password_hash:
            return

        model = await self._find_model_by_id(user_id)
        if model:
            model.password_hash = password_hash
            await commit(self._session)
            logger.debug("Updated password hash for user: %s", user_id)

    async def get_security_stamp(self, user_id: str) -> str:
        if user_id:
            model = await self._find_model_by_id(user_id)
            if model:
                return model.security_stamp or ""
        return ""

    async def set_security_stamp(self, user_id: str, stamp: str) -> None:
        if not user_id or not stamp:
            return

        model = await self._find_model_by_id(user_id)
        if model:
            model.security_stamp = stamp
            await commit(self._session)
            logger.debug("Updated security stamp for user: %s", user_id)

    async def add(self, user: Optional[TUser]) -> None:
        if user is None:
            return

        self._session.add(self._map_to_model(user))
        await commit(self._session)
        logger.info("Created user: %s (user_name: %s)", user.id, user.user_name)

    async def update(self, user: Optional[TUser]) -> None:
        if user is None:
            return

        model = await self._find_model_by_id(user.id)
        if model:
            self._update_model(model, user)
            await commit(self._session)
            logger.debug("Updated user: %s", user.id)

    async def delete(self, user: Union[TUser, str, None]) -> None:
        user_id = user if isinstance(user, str) else getattr(user, "id", None)
        if not user_id:
            return

        model = await self._find_model_by_id(user_id)
        if model:
            await self._session.delete(model)
            await commit(self._session)
            logger.info("Deleted user: %s", user_id)

    def materialize(self, model: UserModel) -> TUser:
        """Build the caller's user type from a stored row."""
        user = self._user_factory()
        user.id = model.id
        user.role_id = model.role_id
        user.user_name = model.user_name
        user.email = empty_to_none(model.email)
        user.email_confirmed = int_to_bool(model.email_confirmed)
        user.password_hash = empty_to_none(model.password_hash)
        user.security_stamp = empty_to_none(model.security_stamp)
        user.phone_number = empty_to_none(model.phone_number)
        user.phone_number_confirmed = int_to_bool(model.phone_number_confirmed)
        user.two_factor_enabled = int_to_bool(model.two_factor_enabled)
        user.lockout_enabled = int_to_bool(model.lockout_enabled)
        user.lockout_end_date_utc = (
            text_to_datetime(model.lockout_end_date_utc) or self._missing_lockout_end()
        )
        user.access_failed_count = model.access_failed_count
        return user

    async def _find_model_by_id(self, user_id: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_model_by_name(self, user_name: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.user_name == user_name)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_model(self, user: IdentityUser) -> UserModel:
        return UserModel(
            id=user.id,
            role_id=user.role_id,
            user_name=user.user_name,
            password_hash=user.password_hash,
            security_stamp=user.security_stamp,
            email=user.email,
            email_confirmed=bool_to_int(user.email_confirmed),
            phone_number=user.phone_number,
            phone_number_confirmed=bool_to_int(user.phone_number_confirmed),
            access_failed_count=user.access_failed_count,
            lockout_enabled=bool_to_int(user.lockout_enabled),
            lockout_end_date_utc=datetime_to_text(user.lockout_end_date_utc),
            two_factor_enabled=bool_to_int(user.two_factor_enabled),
        )

    def _update_model(self, model: UserModel, user: IdentityUser) -> None:
        # role_id is owned by UserRoleRepositorySQLAlchemy
        model.user_name = user.user_name
        model.password_hash = user.password_hash
        model.security_stamp = user.security_stamp
        model.email = user.email
        model.email_confirmed = bool_to_int(user.email_confirmed)
        model.phone_number = user.phone_number
        model.phone_number_confirmed = bool_to_int(user.phone_number_confirmed)
        model.lockout_enabled = bool_to_int(user.lockout_enabled)
        model.lockout_end_date_utc = datetime_to_text(user.lockout_end_date_utc)
        model.access_failed_count = user.access_failed_count
        model.two_factor_enabled = bool_to_int(user.two_factor_enabled)
