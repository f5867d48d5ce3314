"""Use case to compute the summary and daily budget of a period."""

from datetime import date

from src.application.errors import PeriodNotFoundError
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import PeriodOverview
from src.domain.services import (
    build_daily_budget,
    compute_period_summary,
    days_without_transactions,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodOverviewUseCase:
    """Compute the figures shown on a period page."""

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            periods_repository: Port providing stored periods.
            transactions_repository: Port providing stored transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._periods_repository = periods_repository
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        period_id: str,
        today: date | None = None,
    ) -> PeriodOverview:
        """Return the overview of a period.

        Args:
            period_id: Identifier of the period to summarize.
            today: Reference day for the daily budget; defaults to today.

        Returns:
            PeriodOverview: Summary, daily budget and days missing logs.

        Raises:
            PeriodNotFoundError: If no period matches the id.
        """
        period = self._periods_repository.get_period(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)
        reference = today or date.today()
        transactions = self._transactions_repository.list_transactions(
            period_id
        )

        summary = compute_period_summary(
            period,
            transactions,
            logger=self._logger,
        )
        daily_budget = build_daily_budget(
            summary.current_variable_balance,
            period.end_date,
            transactions,
            reference,
        )
        missing_days = days_without_transactions(
            period.start_date,
            period.end_date,
            transactions,
            reference,
        )
        self._logger.info(
            f"Overview computed for period={period_id}: "
            f"balance={summary.current_variable_balance}, "
            f"open_days={daily_budget.remaining_days}, "
            f"daily={daily_budget.amount}"
        )
        return PeriodOverview(
            period=period,
            summary=summary,
            daily_budget=daily_budget,
            days_without_transactions=missing_days,
        )


__all__ = ["GetPeriodOverviewUseCase", "PeriodOverview"]
