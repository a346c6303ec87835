"""SQLAlchemy implementation of UserClaimRepository."""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.user import Claim, IdentityUser, UserClaimRepository
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    UserClaimModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories._utils import (
    commit,
    rollback_on_error,
)

logger = logging.getLogger(__name__)


class UserClaimRepositorySQLAlchemy(UserClaimRepository):
    """SQLAlchemy implementation of UserClaimRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_for_user(self, user_id: str) -> list[Claim]:
        if not user_id:
            return []

        stmt = (
            select(UserClaimModel)
            .where(UserClaimModel.user_id == user_id)
            .order_by(UserClaimModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_claim(model) for model in result.scalars().all()]

    async def delete_all_for_user(self, user_id: str) -> None:
        if not user_id:
            return

        stmt = delete(UserClaimModel).where(UserClaimModel.user_id == user_id)
        async with rollback_on_error(self._session):
            result = await self._session.execute(stmt)
            await self._session.commit()
        logger.debug("Deleted %d claims of user %s", result.rowcount, user_id)

    async def add(self, claim: Optional[Claim], user_id: str) -> None:
        if claim is None or not user_id:
            return

        self._session.add(
            UserClaimModel(
                user_id=user_id,
                claim_type=claim.type,
                claim_value=claim.value,
            )
        )
        await commit(self._session)
        logger.debug("Added claim %s to user %s", claim.type, user_id)

    async def delete(self, user: Optional[IdentityUser], claim: Optional[Claim]) -> None:
        if user is None or claim is None:
            return

        # Duplicates are allowed on insert; remove the oldest exact match only.
        stmt = (
            select(UserClaimModel)
            .where(
                UserClaimModel.user_id == user.id,
                UserClaimModel.claim_type == claim.type,
                UserClaimModel.claim_value == claim.value,
            )
            .order_by(UserClaimModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            await self._session.delete(model)
            await commit(self._session)
            logger.debug("Removed claim %s from user %s", claim.type, user.id)

    @staticmethod
    def _to_claim(model: UserClaimModel) -> Claim:
        return Claim(type=model.claim_type, value=model.claim_value)
