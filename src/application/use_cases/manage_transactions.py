"""Use case to record and edit variable transactions."""

from dataclasses import replace
from datetime import date

from src.application.errors import PeriodNotFoundError
from src.application.ports.id_generator import IdGeneratorPort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import AccountingPeriod, Transaction
from src.domain.services import validate_amount
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import coerce_date


class ManageTransactionsUseCase:
    """Add, update, delete and list transactions of a period."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        periods_repository: PeriodsRepositoryPort,
        id_generator: IdGeneratorPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_repository: Port storing transactions.
            periods_repository: Port used to check the owning period exists.
            id_generator: Source of identifiers for new transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transactions_repository = transactions_repository
        self._periods_repository = periods_repository
        self._id_generator = id_generator
        self._logger = logger or get_app_logger()

    def add(
        self,
        period_id: str,
        amount,
        description: str,
        day: date | str,
    ) -> Transaction:
        """Record a transaction and return it.

        Raises:
            PeriodNotFoundError: If the period does not exist.
            ValueError: If the amount is negative or the date invalid.
        """
        period = self._load_period(period_id)
        transaction = Transaction(
            id=self._id_generator.next(),
            period_id=period_id,
            amount=validate_amount(amount),
            description=description.strip(),
            date=coerce_date(day),
        )
        self._warn_if_outside(period, transaction)
        self._transactions_repository.save_transaction(transaction)
        self._logger.info(
            f"Added transaction {transaction.id} to period {period_id}"
        )
        return transaction

    def update(self, transaction: Transaction) -> Transaction:
        """Replace an existing transaction and return the stored value.

        Raises:
            PeriodNotFoundError: If the owning period does not exist.
            ValueError: If the amount is negative or the date invalid.
        """
        period = self._load_period(transaction.period_id)
        normalized = replace(
            transaction,
            amount=validate_amount(transaction.amount),
            description=transaction.description.strip(),
            date=coerce_date(transaction.date),
        )
        self._warn_if_outside(period, normalized)
        self._transactions_repository.save_transaction(normalized)
        self._logger.info(f"Updated transaction {normalized.id}")
        return normalized

    def delete(self, transaction_id: str) -> None:
        """Delete a transaction."""
        self._transactions_repository.delete_transaction(transaction_id)
        self._logger.info(f"Deleted transaction {transaction_id}")

    def list_for_period(self, period_id: str) -> list[Transaction]:
        """Return the transactions of a period sorted by date."""
        transactions = self._transactions_repository.list_transactions(
            period_id
        )
        return sorted(transactions, key=lambda tx: (tx.date, tx.id))

    def _load_period(self, period_id: str) -> AccountingPeriod:
        period = self._periods_repository.get_period(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)
        return period

    def _warn_if_outside(
        self,
        period: AccountingPeriod,
        transaction: Transaction,
    ) -> None:
        if not period.start_date <= transaction.date <= period.end_date:
            self._logger.warning(
                f"Transaction {transaction.id} dated {transaction.date} "
                f"falls outside period {period.id}"
            )


__all__ = ["ManageTransactionsUseCase"]
