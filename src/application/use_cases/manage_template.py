"""Use case to edit the default template applied to new periods."""

from dataclasses import replace

from src.application.ports.id_generator import IdGeneratorPort
from src.application.ports.template_repository import TemplateRepositoryPort
from src.domain.models import Template, TemplateEntry, TemplateFixedExpense
from src.domain.services import (
    validate_amount,
    with_template_entry_updated,
    with_template_fixed_expense_updated,
)
from src.infrastructure.logging.logger import get_app_logger


class ManageTemplateUseCase:
    """Read and edit the singleton template."""

    def __init__(
        self,
        template_repository: TemplateRepositoryPort,
        id_generator: IdGeneratorPort,
        logger=None,
    ) -> None:
        self._template_repository = template_repository
        self._id_generator = id_generator
        self._logger = logger or get_app_logger()

    def get(self) -> Template:
        """Return the current template."""
        return self._template_repository.load_template()

    def add_entry(self, name: str, amount) -> TemplateEntry:
        """Add a default income entry."""
        template = self.get()
        entry = TemplateEntry(
            id=self._id_generator.next(),
            name=name.strip(),
            amount=validate_amount(amount),
        )
        self._template_repository.save_template(
            replace(template, entries=tuple(template.entries) + (entry,))
        )
        self._logger.info(f"Added template entry {entry.id}")
        return entry

    def add_fixed_expense(self, name: str, amount) -> TemplateFixedExpense:
        """Add a default fixed expense."""
        template = self.get()
        expense = TemplateFixedExpense(
            id=self._id_generator.next(),
            name=name.strip(),
            amount=validate_amount(amount),
        )
        self._template_repository.save_template(
            replace(
                template,
                fixed_expenses=tuple(template.fixed_expenses) + (expense,),
            )
        )
        self._logger.info(f"Added template fixed expense {expense.id}")
        return expense

    def update_entry(self, entry: TemplateEntry) -> Template:
        """Replace the default income entry sharing the same id."""
        normalized = replace(
            entry,
            name=entry.name.strip(),
            amount=validate_amount(entry.amount),
        )
        updated = with_template_entry_updated(self.get(), normalized)
        self._template_repository.save_template(updated)
        self._logger.info(f"Updated template entry {entry.id}")
        return updated

    def update_fixed_expense(self, expense: TemplateFixedExpense) -> Template:
        """Replace the default fixed expense sharing the same id."""
        normalized = replace(
            expense,
            name=expense.name.strip(),
            amount=validate_amount(expense.amount),
        )
        updated = with_template_fixed_expense_updated(self.get(), normalized)
        self._template_repository.save_template(updated)
        self._logger.info(f"Updated template fixed expense {expense.id}")
        return updated

    def remove_entry(self, entry_id: str) -> Template:
        """Remove a default income entry."""
        template = self.get()
        updated = replace(
            template,
            entries=tuple(e for e in template.entries if e.id != entry_id),
        )
        self._template_repository.save_template(updated)
        return updated

    def remove_fixed_expense(self, expense_id: str) -> Template:
        """Remove a default fixed expense."""
        template = self.get()
        updated = replace(
            template,
            fixed_expenses=tuple(
                e for e in template.fixed_expenses if e.id != expense_id
            ),
        )
        self._template_repository.save_template(updated)
        return updated


__all__ = ["ManageTemplateUseCase"]
