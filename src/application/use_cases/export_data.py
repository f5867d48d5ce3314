"""Use case to snapshot every stored period, transaction and template."""

from dataclasses import dataclass
from datetime import datetime, timezone

from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.ports.template_repository import TemplateRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import AccountingPeriod, Template, Transaction
from src.infrastructure.logging.logger import get_app_logger

EXPORT_VERSION = "1.0"


@dataclass(frozen=True)
class DataExport:
    """Backup envelope content.

    Attributes:
        version: Envelope format version.
        exported_at: Moment the snapshot was taken.
        periods: Stored periods with their items.
        transactions: Flat transaction collection.
        template: Default template.
    """

    version: str
    exported_at: datetime
    periods: list[AccountingPeriod]
    transactions: list[Transaction]
    template: Template


class ExportDataUseCase:
    """Collect the whole store into a DataExport."""

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        template_repository: TemplateRepositoryPort,
        logger=None,
    ) -> None:
        self._periods_repository = periods_repository
        self._transactions_repository = transactions_repository
        self._template_repository = template_repository
        self._logger = logger or get_app_logger()

    def execute(self, exported_at: datetime | None = None) -> DataExport:
        """Return the snapshot.

        Args:
            exported_at: Optional timestamp override; defaults to now (UTC).
        """
        periods = self._periods_repository.list_periods()
        transactions = self._transactions_repository.list_transactions()
        template = self._template_repository.load_template()
        self._logger.info(
            f"Exporting {len(periods)} periods and "
            f"{len(transactions)} transactions"
        )
        return DataExport(
            version=EXPORT_VERSION,
            exported_at=exported_at or datetime.now(timezone.utc),
            periods=periods,
            transactions=transactions,
            template=template,
        )


__all__ = ["ExportDataUseCase", "DataExport", "EXPORT_VERSION"]
