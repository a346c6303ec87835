from identity_store.domain.user.aggregates.user import IdentityUser

__all__ = ["IdentityUser"]
