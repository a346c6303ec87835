"""SQLAlchemy model for external login bindings."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserLoginModel(IdentityBase):
    """SQLAlchemy model for the user_logins table.

    The (login_provider, provider_key) primary key makes a login resolve to
    at most one user.
    """

    __tablename__ = "user_logins"

    login_provider: Mapped[str] = mapped_column(String(128), primary_key=True)
    provider_key: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<UserLoginModel(login_provider={self.login_provider}, "
            f"user_id={self.user_id})>"
        )
