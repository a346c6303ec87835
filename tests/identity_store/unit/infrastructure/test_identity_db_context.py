"""Unit tests for IdentityDbContext."""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.exc import IntegrityError

from identity_store import ContextClosedError, IdentityDbContext


class TestIdentityDbContext:
    """Tests for session ownership and close semantics."""

    def setup_method(self):
        """Set up test fixtures."""
        self.session = AsyncMock()
        self.context = IdentityDbContext(self.session)

    def test_open_uses_given_session_maker(self):
        session_maker = Mock(return_value=self.session)

        context = IdentityDbContext.open(session_maker)

        assert context.session is self.session
        session_maker.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_commit_delegates_to_session(self):
        await self.context.commit()

        self.session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_releases_session_once(self):
        await self.context.close()
        await self.context.close()

        self.session.close.assert_awaited_once()
        assert self.context.is_closed

    @pytest.mark.asyncio
    async def test_session_unavailable_after_close(self):
        await self.context.close()

        with pytest.raises(ContextClosedError):
            _ = self.context.session
        with pytest.raises(ContextClosedError):
            await self.context.commit()

    @pytest.mark.asyncio
    async def test_async_with_closes(self):
        async with self.context as context:
            assert not context.is_closed

        self.session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_rolls_back(self):
        error = IntegrityError("INSERT INTO users ...", {}, Exception("UNIQUE constraint failed"))
        self.session.commit.side_effect = error

        with pytest.raises(IntegrityError) as exc_info:
            await self.context.commit()

        assert exc_info.value is error
        self.session.rollback.assert_awaited_once()
        assert not self.context.is_closed

    @pytest.mark.asyncio
    async def test_rollback_delegates_to_session(self):
        await self.context.rollback()

        self.session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rollback_after_close_raises(self):
        await self.context.close()

        with pytest.raises(ContextClosedError):
            await self.context.rollback()
