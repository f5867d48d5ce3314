"""Use case to delete a period together with its transactions."""

from dataclasses import dataclass

from src.application.errors import PeriodNotFoundError
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DeletePeriodResult:
    """Result of a period deletion.

    Attributes:
        period_id: Identifier of the deleted period.
        deleted_transactions: Number of transactions removed with it.
    """

    period_id: str
    deleted_transactions: int


class DeletePeriodUseCase:
    """Delete a period and cascade to its transactions."""

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._periods_repository = periods_repository
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()

    def execute(self, period_id: str) -> DeletePeriodResult:
        """Delete the period and return how many transactions went with it.

        Raises:
            PeriodNotFoundError: If no period matches the id.
        """
        if self._periods_repository.get_period(period_id) is None:
            raise PeriodNotFoundError(period_id)
        deleted = self._transactions_repository.delete_by_period(period_id)
        self._periods_repository.delete_period(period_id)
        self._logger.info(
            f"Deleted period {period_id} and {deleted} transactions"
        )
        return DeletePeriodResult(
            period_id=period_id,
            deleted_transactions=deleted,
        )


__all__ = ["DeletePeriodUseCase", "DeletePeriodResult"]
