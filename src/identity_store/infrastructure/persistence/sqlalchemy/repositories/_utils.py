"""Shared column encodings and commit handling for SQLAlchemy repositories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.domain.shared.clock import as_utc


@asynccontextmanager
async def rollback_on_error(session: AsyncSession) -> AsyncIterator[None]:
    """Roll the session back when a storage error escapes, then re-raise it.

    Keeps the shared session usable for the next repository call.
    """
    try:
        yield
    except SQLAlchemyError:
        await session.rollback()
        raise


async def commit(session: AsyncSession) -> None:
    async with rollback_on_error(session):
        await session.commit()


def bool_to_int(value: bool) -> int:
    return 1 if value else 0


def int_to_bool(value: int | None) -> bool:
    return value == 1


def empty_to_none(value: str | None) -> str | None:
    """Treat an empty stored string as unset."""
    return value or None


def datetime_to_text(value: datetime | None) -> str | None:
    """Encode an optional timestamp as ISO-8601 text in UTC."""
    if value is None:
        return None
    return as_utc(value).isoformat()


def text_to_datetime(value: str | None) -> datetime | None:
    """Decode ISO-8601 text; empty or missing text decodes to None."""
    if not value:
        return None
    return as_utc(datetime.fromisoformat(value))
