from identity_store.domain.role.aggregates.role import IdentityRole

__all__ = ["IdentityRole"]
