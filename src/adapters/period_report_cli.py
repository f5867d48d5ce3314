"""CLI adapter printing the summary and daily budget of a period."""

from src.application.errors import PeriodNotFoundError
from src.application.use_cases.get_period_overview import (
    GetPeriodOverviewUseCase,
)
from src.application.use_cases.list_periods import ListPeriodsUseCase
from src.infrastructure.container import (
    build_database_adapter,
    build_periods_repository,
    build_transactions_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import MoneyFlowSettings


def main() -> None:
    """Print the overview of MONEYFLOW_PERIOD_ID or the latest period."""
    logger = get_app_logger()
    settings = MoneyFlowSettings.from_env()
    db_adapter = build_database_adapter(settings.db_url)
    periods_repository = build_periods_repository(db_adapter)

    period_id = settings.period_id
    if period_id is None:
        periods = ListPeriodsUseCase(periods_repository).execute()
        if not periods:
            logger.warning("No periods found. Create one first.")
            return
        period_id = periods[0].id

    use_case = GetPeriodOverviewUseCase(
        periods_repository=periods_repository,
        transactions_repository=build_transactions_repository(db_adapter),
        logger=logger,
    )
    try:
        overview = use_case.execute(period_id, today=settings.today)
    except PeriodNotFoundError as exc:
        logger.error(str(exc))
        return

    summary = overview.summary
    budget = overview.daily_budget
    print(
        f"Period {overview.period.name} "
        f"({overview.period.start_date} to {overview.period.end_date})"
    )
    print(
        f"Income={summary.total_entries:.2f}, "
        f"fixed={summary.fixed_expenses:.2f}, "
        f"variable={summary.variable_expenses:.2f}, "
        f"investment={summary.investment_amount:.2f}"
    )
    print(
        f"Balance={summary.balance:.2f}, "
        f"projected variable={summary.projected_variable_balance:.2f}, "
        f"current variable={summary.current_variable_balance:.2f}"
    )
    print(
        f"Daily budget={budget.amount:.2f} over "
        f"{budget.remaining_days} open days"
    )
    if budget.is_overspent:
        print("Warning: variable budget is overspent.")
    if overview.days_without_transactions:
        print(
            "Days without transactions: "
            + ", ".join(overview.days_without_transactions)
        )


if __name__ == "__main__":  # pragma: no cover
    main()
