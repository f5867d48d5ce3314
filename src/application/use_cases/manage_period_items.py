"""Use case to edit the entries, fixed expenses and settings of a period."""

from src.application.errors import PeriodNotFoundError
from src.application.ports.id_generator import IdGeneratorPort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.domain.models import AccountingPeriod, Entry, FixedExpense
from src.domain.services import (
    validate_amount,
    with_entry_added,
    with_entry_removed,
    with_entry_updated,
    with_fixed_expense_added,
    with_fixed_expense_removed,
    with_fixed_expense_updated,
    with_investment_percentage,
    with_name,
)
from src.infrastructure.logging.logger import get_app_logger


class ManagePeriodItemsUseCase:
    """Apply item and settings mutations to a stored period.

    Every operation loads the period, applies a pure mutation helper and
    saves the resulting value.
    """

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        id_generator: IdGeneratorPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            periods_repository: Port storing periods.
            id_generator: Source of identifiers for new items.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._periods_repository = periods_repository
        self._id_generator = id_generator
        self._logger = logger or get_app_logger()

    def add_entry(self, period_id: str, name: str, amount) -> Entry:
        """Add an income entry and return it."""
        period = self._load(period_id)
        entry = Entry(
            id=self._id_generator.next(),
            period_id=period_id,
            name=name.strip(),
            amount=validate_amount(amount),
        )
        self._save(with_entry_added(period, entry))
        self._logger.info(f"Added entry {entry.id} to period {period_id}")
        return entry

    def update_entry(self, entry: Entry) -> AccountingPeriod:
        """Replace an existing entry."""
        validate_amount(entry.amount)
        period = self._load(entry.period_id)
        return self._save(with_entry_updated(period, entry))

    def remove_entry(self, period_id: str, entry_id: str) -> AccountingPeriod:
        """Remove an entry from the period."""
        period = self._load(period_id)
        return self._save(with_entry_removed(period, entry_id))

    def add_fixed_expense(
        self,
        period_id: str,
        name: str,
        amount,
    ) -> FixedExpense:
        """Add a fixed expense and return it."""
        period = self._load(period_id)
        expense = FixedExpense(
            id=self._id_generator.next(),
            period_id=period_id,
            name=name.strip(),
            amount=validate_amount(amount),
        )
        self._save(with_fixed_expense_added(period, expense))
        self._logger.info(
            f"Added fixed expense {expense.id} to period {period_id}"
        )
        return expense

    def update_fixed_expense(self, expense: FixedExpense) -> AccountingPeriod:
        """Replace an existing fixed expense."""
        validate_amount(expense.amount)
        period = self._load(expense.period_id)
        return self._save(with_fixed_expense_updated(period, expense))

    def remove_fixed_expense(
        self,
        period_id: str,
        expense_id: str,
    ) -> AccountingPeriod:
        """Remove a fixed expense from the period."""
        period = self._load(period_id)
        return self._save(with_fixed_expense_removed(period, expense_id))

    def rename(self, period_id: str, name: str) -> AccountingPeriod:
        """Rename the period."""
        period = self._load(period_id)
        return self._save(with_name(period, name))

    def set_investment_percentage(
        self,
        period_id: str,
        value,
    ) -> AccountingPeriod:
        """Set the investment percentage, clamped to [0, 100]."""
        period = self._load(period_id)
        return self._save(
            with_investment_percentage(period, value, self._logger)
        )

    def _load(self, period_id: str) -> AccountingPeriod:
        period = self._periods_repository.get_period(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)
        return period

    def _save(self, period: AccountingPeriod) -> AccountingPeriod:
        self._periods_repository.save_period(period)
        return period


__all__ = ["ManagePeriodItemsUseCase"]
