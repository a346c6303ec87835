"""User aggregate as seen by the authentication framework."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


def _new_id() -> str:
    return str(uuid4())


@dataclass(eq=False)
class IdentityUser:
    """
    User carrying every field of a stored user row.

    Subclass it to attach application-specific attributes. Subclasses must
    stay constructible without arguments (all fields defaulted) so that the
    repositories can build them through a zero-argument factory, which is
    the class itself by default.
    """

    id: str = field(default_factory=_new_id)
    user_name: str = ""
    password_hash: str | None = None
    security_stamp: str | None = None
    email: str | None = None
    email_confirmed: bool = False
    phone_number: str | None = None
    phone_number_confirmed: bool = False
    two_factor_enabled: bool = False
    lockout_enabled: bool = False
    lockout_end_date_utc: datetime | None = None
    access_failed_count: int = 0
    role_id: str | None = None

    @classmethod
    def create(cls, user_name: str, email: str | None = None) -> IdentityUser:
        return cls(user_name=user_name, email=email)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityUser):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, user_name={self.user_name!r})"
