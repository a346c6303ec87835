"""SQLAlchemy model for user claims."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserClaimModel(IdentityBase):
    """SQLAlchemy model for the user_claims table.

    Rows are not unique per (user, type, value); the surrogate key keeps
    insertion order and lets duplicates be removed one at a time.
    """

    __tablename__ = "user_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    claim_type: Mapped[str] = mapped_column(Text, nullable=False)
    claim_value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<UserClaimModel(user_id={self.user_id}, claim_type={self.claim_type})>"
