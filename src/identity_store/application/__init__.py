"""Application layer: store façades consumed by authentication frameworks."""

from identity_store.application.stores import NO_LOCKOUT, RoleStore, UserStore

__all__ = ["NO_LOCKOUT", "RoleStore", "UserStore"]
