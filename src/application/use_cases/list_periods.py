"""Use case to list stored periods for navigation."""

from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.domain.models import AccountingPeriod


class ListPeriodsUseCase:
    """Return periods ordered from the most recent start date."""

    def __init__(self, periods_repository: PeriodsRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._periods_repository = periods_repository

    def execute(self) -> list[AccountingPeriod]:
        """Return every period, newest first."""
        periods = self._periods_repository.list_periods()
        return sorted(
            periods,
            key=lambda period: (period.start_date, period.end_date),
            reverse=True,
        )


__all__ = ["ListPeriodsUseCase"]
