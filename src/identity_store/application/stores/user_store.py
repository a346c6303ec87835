"""User management surface composing the user, role, claim and login repositories.

Setters come in two kinds:

- staged: ``set_password_hash`` and ``set_security_stamp`` only change the
  in-memory user; callers persist with ``update``.
- committed: every other setter changes the in-memory user and immediately
  writes the full row back.

Use ``stage_change`` / ``commit_change`` to pick explicitly for any field.
Getters for email, phone, two-factor and lockout fields read the passed-in
object and never touch storage.

Role membership is single-valued: ``add_to_role`` replaces the user's role
and ``remove_from_role`` clears it whichever role name is given.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import fields
from datetime import datetime, timezone
from typing import Any, Generic, Optional

from identity_config import Settings, get_settings
from identity_store.domain.shared.clock import as_utc, utc_now
from identity_store.domain.user import Claim, IdentityUser, UserLoginInfo
from identity_store.domain.user.repositories.user_repository import TUser
from identity_store.exceptions import InvalidArgumentError, require, require_text
from identity_store.infrastructure.persistence.sqlalchemy import (
    IdentityDbContext,
    RoleRepositorySQLAlchemy,
    UserClaimRepositorySQLAlchemy,
    UserLoginRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Reported by get_lockout_end_date for users without a lockout end
NO_LOCKOUT = datetime.min.replace(tzinfo=timezone.utc)


class UserStore(Generic[TUser]):
    """
    User store for an external authentication framework.

    Parameters
    ----------
    context
        Persistence context owned by this store for its whole lifetime
    user_factory
        Zero-argument callable building the caller's user type
    settings
        Source of ``cascade_user_delete`` and ``lockout_end_absent_as_now``;
        defaults to the cached application settings
    """

    def __init__(
        self,
        context: IdentityDbContext,
        user_factory: Callable[[], TUser] = IdentityUser,  # type: ignore[assignment]
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        session = context.session

        self._context: IdentityDbContext | None = context
        self._cascade_delete = settings.cascade_user_delete
        self._user_repository: UserRepositorySQLAlchemy[TUser] = UserRepositorySQLAlchemy(
            session,
            user_factory,
            missing_lockout_end=(
                utc_now if settings.lockout_end_absent_as_now else lambda: None
            ),
        )
        self._role_repository: RoleRepositorySQLAlchemy = RoleRepositorySQLAlchemy(session)
        self._user_role_repository = UserRoleRepositorySQLAlchemy(session)
        self._user_claim_repository = UserClaimRepositorySQLAlchemy(session)
        self._user_login_repository = UserLoginRepositorySQLAlchemy(session)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def users(self) -> AsyncIterator[TUser]:
        """Lazily iterate over all users."""
        return self._user_repository.iter_all()

    async def list_users(self) -> list[TUser]:
        return await self._user_repository.list_all()

    async def create(self, user: TUser) -> None:
        require(user, "user")
        await self._user_repository.add(user)

    async def find_by_id(self, user_id: str) -> Optional[TUser]:
        require_text(user_id, "user_id")
        return await self._user_repository.get_by_id(user_id)

    async def find_by_name(self, user_name: str) -> Optional[TUser]:
        require_text(user_name, "user_name")
        return await self._user_repository.get_by_name(user_name)

    async def find_by_email(self, email: str) -> Optional[TUser]:
        require_text(email, "email")
        return await self._user_repository.get_by_email(email)

    async def update(self, user: TUser) -> None:
        require(user, "user")
        await self._user_repository.update(user)

    async def delete(self, user: TUser) -> None:
        """Delete the user; with cascading enabled its claims and logins go first."""
        require(user, "user")
        if self._cascade_delete:
            await self._user_claim_repository.delete_all_for_user(user.id)
            await self._user_login_repository.delete_all_for_user(user.id)
        await self._user_repository.delete(user)

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    async def add_claim(self, user: TUser, claim: Claim) -> None:
        require(user, "user")
        require(claim, "claim")
        await self._user_claim_repository.add(claim, user.id)

    async def get_claims(self, user: TUser) -> list[Claim]:
        require(user, "user")
        return await self._user_claim_repository.list_for_user(user.id)

    async def remove_claim(self, user: TUser, claim: Claim) -> None:
        require(user, "user")
        require(claim, "claim")
        await self._user_claim_repository.delete(user, claim)

    # ------------------------------------------------------------------
    # External logins
    # ------------------------------------------------------------------

    async def add_login(self, user: TUser, login: UserLoginInfo) -> None:
        require(user, "user")
        require(login, "login")
        await self._user_login_repository.add(user, login)

    async def find_by_login(self, login: UserLoginInfo) -> Optional[TUser]:
        require(login, "login")
        user_id = await self._user_login_repository.find_user_id_by_login(login)
        if not user_id:
            return None
        return await self._user_repository.get_by_id(user_id)

    async def get_logins(self, user: TUser) -> list[UserLoginInfo]:
        require(user, "user")
        return await self._user_login_repository.list_for_user(user.id)

    async def remove_login(self, user: TUser, login: UserLoginInfo) -> None:
        require(user, "user")
        require(login, "login")
        await self._user_login_repository.delete(user, login)

    # ------------------------------------------------------------------
    # Roles (at most one per user)
    # ------------------------------------------------------------------

    async def add_to_role(self, user: TUser, role_name: str) -> None:
        require(user, "user")
        require_text(role_name, "role_name")

        role_id = await self._role_repository.get_id(role_name)
        if not role_id:
            logger.warning("Role %r not found, user %s left unchanged", role_name, user.id)
            return

        await self._user_role_repository.set_role(user.id, role_id)
        user.role_id = role_id

    async def get_roles(self, user: TUser) -> list[str]:
        require(user, "user")
        role_name = await self._user_role_repository.get_role_name(user.id)
        return [role_name] if role_name else []

    async def is_in_role(self, user: TUser, role_name: str) -> bool:
        require(user, "user")
        require_text(role_name, "role_name")
        return await self._user_role_repository.get_role_name(user.id) == role_name

    async def remove_from_role(self, user: TUser, role_name: str) -> None:
        require(user, "user")
        require_text(role_name, "role_name")
        await self._user_role_repository.clear_role(user.id)
        user.role_id = None

    # ------------------------------------------------------------------
    # Password hash and security stamp (staged)
    # ------------------------------------------------------------------

    async def get_password_hash(self, user: TUser) -> str:
        require(user, "user")
        return await self._user_repository.get_password_hash(user.id)

    async def has_password(self, user: TUser) -> bool:
        require(user, "user")
        return bool(await self._user_repository.get_password_hash(user.id))

    async def set_password_hash(self, user: TUser, password_hash: str) -> None:
        require(user, "user")
        require_text(password_hash, "password_hash")
        self.stage_change(user, password_hash=password_hash)

    async def get_security_stamp(self, user: TUser) -> Optional[str]:
        require(user, "user")
        return user.security_stamp

    async def set_security_stamp(self, user: TUser, stamp: str) -> None:
        require(user, "user")
        require_text(stamp, "stamp")
        self.stage_change(user, security_stamp=stamp)

    # ------------------------------------------------------------------
    # Email and phone
    # ------------------------------------------------------------------

    async def set_email(self, user: TUser, email: str) -> None:
        require(user, "user")
        require_text(email, "email")
        await self.commit_change(user, email=email)

    async def get_email(self, user: TUser) -> Optional[str]:
        require(user, "user")
        return user.email

    async def get_email_confirmed(self, user: TUser) -> bool:
        require(user, "user")
        return user.email_confirmed

    async def set_email_confirmed(self, user: TUser, confirmed: bool) -> None:
        require(user, "user")
        await self.commit_change(user, email_confirmed=confirmed)

    async def set_phone_number(self, user: TUser, phone_number: str) -> None:
        require(user, "user")
        require_text(phone_number, "phone_number")
        await self.commit_change(user, phone_number=phone_number)

    async def get_phone_number(self, user: TUser) -> Optional[str]:
        require(user, "user")
        return user.phone_number

    async def get_phone_number_confirmed(self, user: TUser) -> bool:
        require(user, "user")
        return user.phone_number_confirmed

    async def set_phone_number_confirmed(self, user: TUser, confirmed: bool) -> None:
        require(user, "user")
        await self.commit_change(user, phone_number_confirmed=confirmed)

    # ------------------------------------------------------------------
    # Two-factor and lockout
    # ------------------------------------------------------------------

    async def set_two_factor_enabled(self, user: TUser, enabled: bool) -> None:
        require(user, "user")
        await self.commit_change(user, two_factor_enabled=enabled)

    async def get_two_factor_enabled(self, user: TUser) -> bool:
        require(user, "user")
        return user.two_factor_enabled

    async def get_lockout_end_date(self, user: TUser) -> datetime:
        """Return the lockout end in UTC, or ``NO_LOCKOUT`` when unset."""
        require(user, "user")
        if user.lockout_end_date_utc is None:
            return NO_LOCKOUT
        return as_utc(user.lockout_end_date_utc)

    async def set_lockout_end_date(self, user: TUser, lockout_end: Optional[datetime]) -> None:
        require(user, "user")
        if lockout_end is not None:
            lockout_end = as_utc(lockout_end)
        await self.commit_change(user, lockout_end_date_utc=lockout_end)

    async def increment_access_failed_count(self, user: TUser) -> int:
        require(user, "user")
        await self.commit_change(user, access_failed_count=user.access_failed_count + 1)
        return user.access_failed_count

    async def reset_access_failed_count(self, user: TUser) -> None:
        require(user, "user")
        await self.commit_change(user, access_failed_count=0)

    async def get_access_failed_count(self, user: TUser) -> int:
        require(user, "user")
        return user.access_failed_count

    async def get_lockout_enabled(self, user: TUser) -> bool:
        require(user, "user")
        return user.lockout_enabled

    async def set_lockout_enabled(self, user: TUser, enabled: bool) -> None:
        require(user, "user")
        await self.commit_change(user, lockout_enabled=enabled)

    # ------------------------------------------------------------------
    # Change kinds
    # ------------------------------------------------------------------

    def stage_change(self, user: TUser, **changes: Any) -> None:
        """Apply field changes to the in-memory user without persisting.

        Only dataclass fields of the user (subclass fields included) can be
        changed, and never ``id``.
        """
        require(user, "user")
        mutable_fields = {f.name for f in fields(user)} - {"id"}
        for field_name in changes:
            if field_name not in mutable_fields:
                raise InvalidArgumentError(
                    field_name,
                    f"Unknown or immutable user field: {field_name}",
                )
        for field_name, value in changes.items():
            setattr(user, field_name, value)

    async def commit_change(self, user: TUser, **changes: Any) -> None:
        """Apply field changes and write the full user row back."""
        self.stage_change(user, **changes)
        await self._user_repository.update(user)

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Release the persistence context. Repeated calls are no-ops."""
        if self._context is not None:
            context, self._context = self._context, None
            await context.close()

    async def __aenter__(self) -> UserStore[TUser]:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
