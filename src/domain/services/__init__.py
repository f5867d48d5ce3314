"""Domain services package."""

from .daily_budget import (
    build_daily_budget,
    calculate_daily_budget,
    days_with_transactions,
    days_without_transactions,
    period_days_range,
    remaining_open_days,
)
from .periods import (
    with_entry_added,
    with_entry_removed,
    with_entry_updated,
    with_fixed_expense_added,
    with_fixed_expense_removed,
    with_fixed_expense_updated,
    with_investment_percentage,
    with_name,
)
from .summary import compute_period_summary
from .templates import (
    apply_template,
    with_template_entry_updated,
    with_template_fixed_expense_updated,
)
from .validation import clamp_investment_percentage, validate_amount

__all__ = [
    "compute_period_summary",
    "remaining_open_days",
    "calculate_daily_budget",
    "build_daily_budget",
    "period_days_range",
    "days_without_transactions",
    "days_with_transactions",
    "apply_template",
    "with_template_entry_updated",
    "with_template_fixed_expense_updated",
    "clamp_investment_percentage",
    "validate_amount",
    "with_entry_added",
    "with_entry_updated",
    "with_entry_removed",
    "with_fixed_expense_added",
    "with_fixed_expense_updated",
    "with_fixed_expense_removed",
    "with_name",
    "with_investment_percentage",
]
