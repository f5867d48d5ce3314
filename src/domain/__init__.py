"""Domain package for period budgeting rules and core models."""

from .constants import MAX_INVESTMENT_PERCENTAGE, MIN_INVESTMENT_PERCENTAGE
from .models import (
    AccountingPeriod,
    DailyBudget,
    Entry,
    FixedExpense,
    IdGenerator,
    PeriodOverview,
    PeriodSummary,
    Template,
    TemplateEntry,
    TemplateFixedExpense,
    Transaction,
)
from .services import (
    apply_template,
    build_daily_budget,
    calculate_daily_budget,
    compute_period_summary,
    days_without_transactions,
    period_days_range,
    remaining_open_days,
)

__all__ = [
    "AccountingPeriod",
    "DailyBudget",
    "Entry",
    "FixedExpense",
    "IdGenerator",
    "PeriodOverview",
    "PeriodSummary",
    "Template",
    "TemplateEntry",
    "TemplateFixedExpense",
    "Transaction",
    "MIN_INVESTMENT_PERCENTAGE",
    "MAX_INVESTMENT_PERCENTAGE",
    "apply_template",
    "build_daily_budget",
    "calculate_daily_budget",
    "compute_period_summary",
    "days_without_transactions",
    "period_days_range",
    "remaining_open_days",
]
