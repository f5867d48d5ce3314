"""SQLAlchemy-backed bulk replacement of the MoneyFlow store."""

from src.application.ports.data_store import DataStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import AccountingPeriod, Template, Transaction
from src.infrastructure.periods_repository import (
    delete_all_periods,
    insert_period,
)
from src.infrastructure.tables import ensure_schema
from src.infrastructure.template_repository import write_template
from src.infrastructure.transactions_repository import (
    delete_all_transactions,
    insert_transactions,
)


class SqlAlchemyDataStore(DataStorePort):
    """Replace periods, transactions and template in one transaction.

    A failure while writing any collection rolls the whole replacement
    back, so the previous store content survives intact.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the data store.

        Args:
            db_port: Port providing access to the MoneyFlow engine.
        """
        self._db_port = db_port

    def replace_all(
        self,
        periods: list[AccountingPeriod],
        transactions: list[Transaction],
        template: Template,
    ) -> None:
        """Replace the stored periods, transactions and template."""
        engine = self._db_port.get_engine()
        ensure_schema(engine)
        with engine.begin() as conn:
            delete_all_transactions(conn)
            delete_all_periods(conn)
            for period in periods:
                insert_period(conn, period)
            insert_transactions(conn, transactions)
            write_template(conn, template)


__all__ = ["SqlAlchemyDataStore"]
