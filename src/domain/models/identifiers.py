"""Identifier generation contract used by the domain."""

from typing import Protocol


class IdGenerator(Protocol):
    """Capability producing opaque, unique identifiers."""

    def next(self) -> str:
        """Return a new identifier."""


__all__ = ["IdGenerator"]
