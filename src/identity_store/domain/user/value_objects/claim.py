from dataclasses import dataclass


@dataclass(frozen=True)
class Claim:
    """A (type, value) attribute attached to a user."""

    type: str
    value: str
