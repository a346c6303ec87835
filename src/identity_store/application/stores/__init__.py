"""Store façades composing the SQLAlchemy repositories."""

from identity_store.application.stores.role_store import RoleStore
from identity_store.application.stores.user_store import NO_LOCKOUT, UserStore

__all__ = ["NO_LOCKOUT", "RoleStore", "UserStore"]
