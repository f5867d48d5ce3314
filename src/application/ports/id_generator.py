"""Port for identifier generation."""

from src.domain.models.identifiers import IdGenerator

IdGeneratorPort = IdGenerator


__all__ = ["IdGeneratorPort"]
