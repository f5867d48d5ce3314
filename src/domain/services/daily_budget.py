"""Daily spending allocation over the open days of a period.

A day is "closed" as soon as at least one transaction is recorded on it.
The remaining discretionary balance is spread evenly over the open days
from today through the end of the period.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import ZERO
from src.domain.models import DailyBudget, Transaction
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal

_ONE_DAY = timedelta(days=1)


def days_with_transactions(
    transactions: Iterable[Transaction],
) -> set[date]:
    """Return the distinct days that already have a transaction."""
    return {coerce_date(tx.date) for tx in transactions or ()}


def remaining_open_days(
    end_date: date | str,
    transactions: Iterable[Transaction] = (),
    today: date | str | None = None,
) -> int:
    """Count the days from today to end_date without any transaction.

    Args:
        end_date: Last day of the period (inclusive).
        transactions: Transactions recorded for the period.
        today: Reference day; defaults to the current date.

    Returns:
        int: Number of open days, 0 when the period is over.
    """
    end = coerce_date(end_date)
    current = coerce_date(today) if today is not None else date.today()
    if current > end:
        return 0

    used_days = days_with_transactions(transactions)
    open_days = 0
    while current <= end:
        if current not in used_days:
            open_days += 1
        current += _ONE_DAY
    return open_days


def calculate_daily_budget(
    current_variable_balance,
    end_date: date | str,
    transactions: Iterable[Transaction] = (),
    today: date | str | None = None,
) -> Decimal:
    """Spread the current variable balance over the remaining open days.

    Negative balances propagate; 0 is returned when no open day remains.
    """
    open_days = remaining_open_days(end_date, transactions, today)
    if open_days <= 0:
        return ZERO
    return coerce_decimal(current_variable_balance) / open_days


def build_daily_budget(
    current_variable_balance,
    end_date: date | str,
    transactions: Iterable[Transaction] = (),
    today: date | str | None = None,
) -> DailyBudget:
    """Return the open day count together with the suggested amount."""
    transactions = list(transactions or ())
    return DailyBudget(
        remaining_days=remaining_open_days(end_date, transactions, today),
        amount=calculate_daily_budget(
            current_variable_balance,
            end_date,
            transactions,
            today,
        ),
    )


def period_days_range(
    start_date: date | str,
    end_date: date | str,
) -> list[str]:
    """Return every day between two dates as YYYY-MM-DD strings.

    Args:
        start_date: First day (inclusive).
        end_date: Last day (inclusive).

    Returns:
        list[str]: Ordered ISO day strings, empty if start is after end.
    """
    current = coerce_date(start_date)
    end = coerce_date(end_date)
    days: list[str] = []
    while current <= end:
        days.append(current.isoformat())
        current += _ONE_DAY
    return days


def days_without_transactions(
    start_date: date | str,
    end_date: date | str,
    transactions: Iterable[Transaction],
    today: date | str | None = None,
) -> list[str]:
    """Return past days of the period (today included) with no transaction.

    Future days are never reported.
    """
    reference = coerce_date(today) if today is not None else date.today()
    used_days = {day.isoformat() for day in days_with_transactions(transactions)}
    return [
        day
        for day in period_days_range(start_date, end_date)
        if day <= reference.isoformat() and day not in used_days
    ]


__all__ = [
    "days_with_transactions",
    "remaining_open_days",
    "calculate_daily_budget",
    "build_daily_budget",
    "period_days_range",
    "days_without_transactions",
]
