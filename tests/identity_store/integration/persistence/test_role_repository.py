"""Tests for RoleRepositorySQLAlchemy on in-memory SQLite."""

from dataclasses import dataclass

import pytest
from sqlalchemy.exc import IntegrityError

from identity_store import IdentityRole
from identity_store.infrastructure.persistence.sqlalchemy import (
    RoleRepositorySQLAlchemy,
)


@dataclass(eq=False)
class TenantRole(IdentityRole):
    tenant: str = "default"


@pytest.fixture
def role_repo(db_session):
    return RoleRepositorySQLAlchemy(db_session)


class TestRoleRepositorySQLAlchemy:
    """Tests for RoleRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_add_and_round_trip_name_and_id(self, role_repo, admin_role):
        """get_name and get_id map back to the inserted pair."""
        await role_repo.add(admin_role)

        assert await role_repo.get_name("r1") == "Admin"
        assert await role_repo.get_id("Admin") == "r1"

    @pytest.mark.asyncio
    async def test_round_trip_for_several_roles(self, role_repo):
        pairs = [("r1", "Admin"), ("r2", "Editor"), ("r3", "Viewer")]
        for role_id, name in pairs:
            await role_repo.add(IdentityRole(id=role_id, name=name))

        for role_id, name in pairs:
            assert await role_repo.get_id(await role_repo.get_name(role_id)) == role_id
            assert await role_repo.get_name(role_id) == name

    @pytest.mark.asyncio
    async def test_add_none_is_noop(self, role_repo):
        await role_repo.add(None)

        assert await role_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_add_duplicate_name_raises_storage_error(self, role_repo):
        """Constraint violations propagate unchanged."""
        await role_repo.add(IdentityRole(id="r1", name="Admin"))

        with pytest.raises(IntegrityError):
            await role_repo.add(IdentityRole(id="r2", name="Admin"))

        # The session was rolled back and stays usable
        assert await role_repo.get_id("Admin") == "r1"
        assert await role_repo.get_name("r2") == ""

    @pytest.mark.asyncio
    @pytest.mark.filterwarnings("ignore::sqlalchemy.exc.SAWarning")
    async def test_add_duplicate_id_raises_storage_error(self, role_repo):
        await role_repo.add(IdentityRole(id="r1", name="Admin"))

        with pytest.raises(IntegrityError):
            await role_repo.add(IdentityRole(id="r1", name="Other"))

        assert await role_repo.get_name("r1") == "Admin"
        assert await role_repo.get_id("Other") == ""
        await role_repo.add(IdentityRole(id="r2", name="Other"))
        assert len(await role_repo.list_all()) == 2

    @pytest.mark.asyncio
    async def test_lookups_return_empty_string_when_missing(self, role_repo):
        assert await role_repo.get_name("") == ""
        assert await role_repo.get_name("missing") == ""
        assert await role_repo.get_id("") == ""
        assert await role_repo.get_id("Missing") == ""

    @pytest.mark.asyncio
    async def test_get_by_id_and_name(self, role_repo, admin_role):
        await role_repo.add(admin_role)

        by_id = await role_repo.get_by_id("r1")
        by_name = await role_repo.get_by_name("Admin")

        assert by_id == admin_role
        assert by_id.name == "Admin"
        assert by_name.id == "r1"

    @pytest.mark.asyncio
    async def test_get_by_id_and_name_missing(self, role_repo):
        assert await role_repo.get_by_id("") is None
        assert await role_repo.get_by_id("missing") is None
        assert await role_repo.get_by_name("") is None
        assert await role_repo.get_by_name("Missing") is None

    @pytest.mark.asyncio
    async def test_update_overwrites_name(self, role_repo, admin_role):
        await role_repo.add(admin_role)

        await role_repo.update(IdentityRole(id="r1", name="Administrators"))

        assert await role_repo.get_name("r1") == "Administrators"
        assert await role_repo.get_id("Admin") == ""

    @pytest.mark.asyncio
    async def test_update_missing_or_none_is_noop(self, role_repo):
        await role_repo.update(None)
        await role_repo.update(IdentityRole(id="missing", name="Ghost"))

        assert await role_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_delete(self, role_repo, admin_role):
        await role_repo.add(admin_role)

        await role_repo.delete("r1")

        assert await role_repo.get_by_id("r1") is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_safe(self, role_repo):
        # Should not raise
        await role_repo.delete("")
        await role_repo.delete("missing")

    @pytest.mark.asyncio
    async def test_iter_all_is_lazy_sequence_of_roles(self, role_repo):
        await role_repo.add(IdentityRole(id="r1", name="Admin"))
        await role_repo.add(IdentityRole(id="r2", name="Editor"))

        names = {role.name async for role in role_repo.iter_all()}

        assert names == {"Admin", "Editor"}

    @pytest.mark.asyncio
    async def test_role_factory_builds_caller_type(self, db_session):
        repo = RoleRepositorySQLAlchemy(db_session, role_factory=TenantRole)
        await repo.add(TenantRole(id="r1", name="Admin", tenant="acme"))

        found = await repo.get_by_id("r1")
        listed = await repo.list_all()

        assert isinstance(found, TenantRole)
        assert found.tenant == "default"  # not persisted
        assert all(isinstance(role, TenantRole) for role in listed)
