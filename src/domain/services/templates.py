"""Template application for newly created periods."""

from dataclasses import replace

from src.domain.models import (
    AccountingPeriod,
    Entry,
    FixedExpense,
    IdGenerator,
    Template,
    TemplateEntry,
    TemplateFixedExpense,
)


def apply_template(
    period: AccountingPeriod,
    template: Template,
    *,
    id_generator: IdGenerator,
) -> AccountingPeriod:
    """Return a copy of the period seeded with the template items.

    Template items are cloned with fresh identifiers and appended after the
    entries and fixed expenses already present on the period.

    Args:
        period: Newly constructed period.
        template: Default entries and fixed expenses.
        id_generator: Source of identifiers for the cloned items.

    Returns:
        AccountingPeriod: New period value; the inputs are left untouched.
    """
    entries = tuple(
        Entry(
            id=id_generator.next(),
            period_id=period.id,
            name=item.name,
            amount=item.amount,
        )
        for item in template.entries or ()
    )
    fixed_expenses = tuple(
        FixedExpense(
            id=id_generator.next(),
            period_id=period.id,
            name=item.name,
            amount=item.amount,
        )
        for item in template.fixed_expenses or ()
    )
    return replace(
        period,
        entries=tuple(period.entries or ()) + entries,
        fixed_expenses=tuple(period.fixed_expenses or ()) + fixed_expenses,
    )


def with_template_entry_updated(
    template: Template,
    entry: TemplateEntry,
) -> Template:
    """Replace the template entry sharing the same id."""
    return replace(
        template,
        entries=tuple(
            entry if item.id == entry.id else item
            for item in template.entries or ()
        ),
    )


def with_template_fixed_expense_updated(
    template: Template,
    expense: TemplateFixedExpense,
) -> Template:
    """Replace the template fixed expense sharing the same id."""
    return replace(
        template,
        fixed_expenses=tuple(
            expense if item.id == expense.id else item
            for item in template.fixed_expenses or ()
        ),
    )


__all__ = [
    "apply_template",
    "with_template_entry_updated",
    "with_template_fixed_expense_updated",
]
