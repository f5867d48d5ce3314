"""Identifier generation backed by random UUIDs."""

import uuid

from src.application.ports.id_generator import IdGeneratorPort


class UuidIdGenerator(IdGeneratorPort):
    """Return random UUID4 strings."""

    def next(self) -> str:
        return str(uuid.uuid4())


__all__ = ["UuidIdGenerator"]
