"""Domain models for accounting periods and their items."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Entry:
    """Income item attached to a period."""

    id: str
    period_id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class FixedExpense:
    """Recurring cost attached to a period."""

    id: str
    period_id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class Transaction:
    """Dated variable expense recorded against a period.

    Attributes:
        id: Unique transaction identifier.
        period_id: Identifier of the owning period.
        amount: Spent amount (non-negative).
        description: Free-form label.
        date: Calendar day of the expense.
    """

    id: str
    period_id: str
    amount: Decimal
    description: str
    date: date


@dataclass(frozen=True)
class AccountingPeriod:
    """Bounded date range over which income and expenses are tracked.

    Attributes:
        id: Unique period identifier.
        name: Display name.
        start_date: First day of the period.
        end_date: Last day of the period (inclusive).
        investment_percentage: Share of income set aside, 0 to 100.
        fixed_expenses: Fixed expenses owned by the period.
        entries: Income entries owned by the period.
        is_open: Whether the period is still being tracked.
    """

    id: str
    name: str
    start_date: date
    end_date: date
    investment_percentage: Decimal = Decimal("0")
    fixed_expenses: tuple[FixedExpense, ...] = field(default_factory=tuple)
    entries: tuple[Entry, ...] = field(default_factory=tuple)
    is_open: bool = True


@dataclass(frozen=True)
class TemplateEntry:
    """Default income item copied into new periods."""

    id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class TemplateFixedExpense:
    """Default fixed expense copied into new periods."""

    id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class Template:
    """Default entries and fixed expenses applied on period creation."""

    entries: tuple[TemplateEntry, ...] = field(default_factory=tuple)
    fixed_expenses: tuple[TemplateFixedExpense, ...] = field(
        default_factory=tuple
    )


__all__ = [
    "AccountingPeriod",
    "Entry",
    "FixedExpense",
    "Transaction",
    "Template",
    "TemplateEntry",
    "TemplateFixedExpense",
]
