"""Port for the singleton period template."""

from typing import Protocol

from src.domain.models import Template


class TemplateRepositoryPort(Protocol):
    """Port exposing read and write access to the template."""

    def load_template(self) -> Template:
        """Return the stored template, empty when none was saved."""

    def save_template(self, template: Template) -> None:
        """Replace the stored template."""


__all__ = ["TemplateRepositoryPort"]
