"""Role aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass(eq=False)
class IdentityRole:
    """Named role a user can be assigned to.

    Subclasses must accept ``id`` and ``name`` keyword arguments; the
    role repository rebuilds them that way.
    """

    name: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityRole):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
