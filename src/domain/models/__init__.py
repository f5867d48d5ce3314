"""Domain models package."""

from .finance import DailyBudget, PeriodOverview, PeriodSummary
from .identifiers import IdGenerator
from .periods import (
    AccountingPeriod,
    Entry,
    FixedExpense,
    Template,
    TemplateEntry,
    TemplateFixedExpense,
    Transaction,
)

__all__ = [
    "AccountingPeriod",
    "Entry",
    "FixedExpense",
    "Transaction",
    "Template",
    "TemplateEntry",
    "TemplateFixedExpense",
    "PeriodSummary",
    "DailyBudget",
    "PeriodOverview",
    "IdGenerator",
]
