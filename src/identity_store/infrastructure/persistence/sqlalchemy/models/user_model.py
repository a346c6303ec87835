"""SQLAlchemy model for users."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserModel(IdentityBase):
    """SQLAlchemy model for the users table.

    Flags are stored as 0/1 integers and the lockout end as an ISO-8601
    string; the repository converts both at the boundary. A user holds at
    most one role through ``role_id``.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_name: Mapped[str] = mapped_column(
        String(256),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    security_stamp: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True, index=True)
    email_confirmed: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    phone_number_confirmed: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    two_factor_enabled: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    lockout_enabled: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    lockout_end_date_utc: Mapped[str | None] = mapped_column(String(64), nullable=True)
    access_failed_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    role_id: Mapped[str | None] = mapped_column(
        String(128),
        ForeignKey("roles.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, user_name={self.user_name}, role_id={self.role_id})>"
