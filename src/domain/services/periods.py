"""Pure mutation helpers returning updated period values."""

from dataclasses import replace
from logging import Logger

from src.domain.models import AccountingPeriod, Entry, FixedExpense
from src.domain.services.validation import clamp_investment_percentage


def _check_owner(period: AccountingPeriod, item) -> None:
    if item.period_id != period.id:
        raise ValueError(
            f"Item {item.id} belongs to period {item.period_id}, "
            f"not {period.id}"
        )


def _replace_item(items, updated) -> tuple:
    return tuple(updated if item.id == updated.id else item for item in items)


def with_entry_added(period: AccountingPeriod, entry: Entry) -> AccountingPeriod:
    """Append an entry to the period."""
    _check_owner(period, entry)
    return replace(period, entries=tuple(period.entries or ()) + (entry,))


def with_entry_updated(
    period: AccountingPeriod,
    entry: Entry,
) -> AccountingPeriod:
    """Replace the entry sharing the same id."""
    _check_owner(period, entry)
    return replace(period, entries=_replace_item(period.entries or (), entry))


def with_entry_removed(
    period: AccountingPeriod,
    entry_id: str,
) -> AccountingPeriod:
    """Drop the entry with the given id, if any."""
    return replace(
        period,
        entries=tuple(e for e in period.entries or () if e.id != entry_id),
    )


def with_fixed_expense_added(
    period: AccountingPeriod,
    expense: FixedExpense,
) -> AccountingPeriod:
    """Append a fixed expense to the period."""
    _check_owner(period, expense)
    return replace(
        period,
        fixed_expenses=tuple(period.fixed_expenses or ()) + (expense,),
    )


def with_fixed_expense_updated(
    period: AccountingPeriod,
    expense: FixedExpense,
) -> AccountingPeriod:
    """Replace the fixed expense sharing the same id."""
    _check_owner(period, expense)
    return replace(
        period,
        fixed_expenses=_replace_item(period.fixed_expenses or (), expense),
    )


def with_fixed_expense_removed(
    period: AccountingPeriod,
    expense_id: str,
) -> AccountingPeriod:
    """Drop the fixed expense with the given id, if any."""
    return replace(
        period,
        fixed_expenses=tuple(
            e for e in period.fixed_expenses or () if e.id != expense_id
        ),
    )


def with_name(period: AccountingPeriod, name: str) -> AccountingPeriod:
    """Rename the period."""
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Period name must not be empty")
    return replace(period, name=cleaned)


def with_investment_percentage(
    period: AccountingPeriod,
    value,
    logger: Logger | None = None,
) -> AccountingPeriod:
    """Set the investment percentage, clamped to [0, 100]."""
    return replace(
        period,
        investment_percentage=clamp_investment_percentage(value, logger),
    )


__all__ = [
    "with_entry_added",
    "with_entry_updated",
    "with_entry_removed",
    "with_fixed_expense_added",
    "with_fixed_expense_updated",
    "with_fixed_expense_removed",
    "with_name",
    "with_investment_percentage",
]
