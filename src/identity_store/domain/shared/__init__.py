"""Helpers shared across the identity domain."""

from identity_store.domain.shared.clock import as_utc, utc_now

__all__ = ["as_utc", "utc_now"]
