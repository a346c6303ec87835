"""Identity store exceptions.

Argument errors are raised before any storage access. Storage faults
(``sqlalchemy.exc.SQLAlchemyError``) are never wrapped and reach the caller
unchanged.
"""

from typing import Any


class IdentityStoreError(Exception):
    """Base exception for all identity store errors."""

    def __init__(self, message: str = "Identity store error"):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(IdentityStoreError, ValueError):
    """Raised when a required argument is missing, null or empty."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"Null or empty argument: {argument}")


class ContextClosedError(IdentityStoreError):
    """Raised when a persistence context is used after being closed."""

    def __init__(self, message: str = "Persistence context has been closed"):
        super().__init__(message)


def require(value: Any, argument: str) -> None:
    """Reject a missing object argument."""
    if value is None:
        raise InvalidArgumentError(argument)


def require_text(value: str | None, argument: str) -> None:
    """Reject a missing or empty string argument."""
    if not value:
        raise InvalidArgumentError(argument)
