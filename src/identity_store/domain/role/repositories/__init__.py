from identity_store.domain.role.repositories.role_repository import RoleRepository

__all__ = ["RoleRepository"]
