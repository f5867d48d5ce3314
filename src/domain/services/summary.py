"""Domain service computing period summaries."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models import AccountingPeriod, PeriodSummary, Transaction
from src.domain.services.validation import clamp_investment_percentage
from src.utils.decimal_utils import coerce_decimal


def compute_period_summary(
    period: AccountingPeriod,
    transactions: Iterable[Transaction],
    *,
    logger: Logger | None = None,
) -> PeriodSummary:
    """Compute income, expense and discretionary totals for a period.

    Args:
        period: Period holding entries, fixed expenses and the investment
            percentage.
        transactions: Variable expenses recorded for the period.
        logger: Optional logger used for warnings.

    Returns:
        PeriodSummary: Totals derived from the inputs.
    """
    total_entries = _sum_amounts(period.entries or ())
    fixed_expenses = _sum_amounts(period.fixed_expenses or ())
    variable_expenses = _sum_amounts(transactions or ())
    total_expenses = variable_expenses + fixed_expenses

    percentage = clamp_investment_percentage(
        period.investment_percentage,
        logger,
    )
    investment_amount = total_entries * percentage / Decimal("100")
    projected_variable_balance = (
        total_entries - investment_amount - fixed_expenses
    )

    return PeriodSummary(
        total_entries=total_entries,
        fixed_expenses=fixed_expenses,
        variable_expenses=variable_expenses,
        total_expenses=total_expenses,
        balance=total_entries - total_expenses,
        investment_amount=investment_amount,
        projected_variable_balance=projected_variable_balance,
        current_variable_balance=(
            projected_variable_balance - variable_expenses
        ),
    )


def _sum_amounts(items: Iterable) -> Decimal:
    return sum(
        (coerce_decimal(item.amount) for item in items),
        Decimal("0"),
    )


__all__ = ["compute_period_summary"]
