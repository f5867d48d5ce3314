"""Domain models for derived period figures."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.periods import AccountingPeriod


@dataclass(frozen=True)
class PeriodSummary:
    """Totals computed for a period.

    Attributes:
        total_entries: Sum of income entries.
        fixed_expenses: Sum of fixed expenses.
        variable_expenses: Sum of recorded transactions.
        total_expenses: Fixed plus variable expenses.
        balance: Income minus total expenses.
        investment_amount: Income share set aside for investment.
        projected_variable_balance: Discretionary money available for the
            whole period.
        current_variable_balance: Discretionary money still available.
    """

    total_entries: Decimal
    fixed_expenses: Decimal
    variable_expenses: Decimal
    total_expenses: Decimal
    balance: Decimal
    investment_amount: Decimal
    projected_variable_balance: Decimal
    current_variable_balance: Decimal


@dataclass(frozen=True)
class DailyBudget:
    """Suggested spending per open day."""

    remaining_days: int
    amount: Decimal

    @property
    def is_overspent(self) -> bool:
        """Return True when the discretionary balance is already negative."""
        return self.amount < 0


@dataclass(frozen=True)
class PeriodOverview:
    """Summary, daily budget and logging gaps for UI rendering."""

    period: AccountingPeriod
    summary: PeriodSummary
    daily_budget: DailyBudget
    days_without_transactions: list[str] = field(default_factory=list)


__all__ = ["PeriodSummary", "DailyBudget", "PeriodOverview"]
