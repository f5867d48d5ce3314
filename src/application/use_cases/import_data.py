"""Use case to replace the store with the content of a backup."""

from collections import Counter
from dataclasses import dataclass

from src.application.errors import InvalidImportError
from src.application.ports.data_store import DataStorePort
from src.application.use_cases.export_data import DataExport
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ImportResult:
    """Result of an import run."""

    period_count: int
    transaction_count: int


class ImportDataUseCase:
    """Overwrite stored periods, transactions and template."""

    def __init__(
        self,
        data_store: DataStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            data_store: Port replacing the whole store atomically.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, data: DataExport) -> ImportResult:
        """Replace the stored data with the backup content.

        Raises:
            InvalidImportError: If the backup reuses an identifier.
        """
        self._check_unique_ids(data)
        known_ids = {period.id for period in data.periods}
        orphans = [
            tx for tx in data.transactions if tx.period_id not in known_ids
        ]
        if orphans:
            self._logger.warning(
                f"Import contains {len(orphans)} transactions "
                "without a matching period"
            )
        self._data_store.replace_all(
            list(data.periods),
            list(data.transactions),
            data.template,
        )
        result = ImportResult(
            period_count=len(data.periods),
            transaction_count=len(data.transactions),
        )
        self._logger.info(
            f"Imported {result.period_count} periods and "
            f"{result.transaction_count} transactions (version={data.version})"
        )
        return result

    @staticmethod
    def _check_unique_ids(data: DataExport) -> None:
        groups = {
            "period": [period.id for period in data.periods],
            "entry": [
                entry.id for period in data.periods for entry in period.entries
            ],
            "fixed expense": [
                expense.id
                for period in data.periods
                for expense in period.fixed_expenses
            ],
            "transaction": [tx.id for tx in data.transactions],
            "template entry": [item.id for item in data.template.entries],
            "template fixed expense": [
                item.id for item in data.template.fixed_expenses
            ],
        }
        for label, ids in groups.items():
            duplicates = sorted(
                item_id for item_id, seen in Counter(ids).items() if seen > 1
            )
            if duplicates:
                raise InvalidImportError(
                    f"Duplicate {label} ids in backup: {', '.join(duplicates)}"
                )


__all__ = ["ImportDataUseCase", "ImportResult"]
