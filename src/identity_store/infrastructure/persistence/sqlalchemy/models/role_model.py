"""SQLAlchemy model for roles."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from identity_store.infrastructure.persistence.sqlalchemy.base import IdentityBase


class RoleModel(IdentityBase):
    """SQLAlchemy model for the roles table."""

    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(
        String(256),
        unique=True,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
