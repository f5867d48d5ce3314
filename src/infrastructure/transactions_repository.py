"""SQLAlchemy-backed repository for variable transactions."""

from sqlalchemy import delete, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import Transaction
from src.infrastructure.tables import ensure_schema, transactions_table
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for the transaction collection."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the MoneyFlow engine.
        """
        self._db_port = db_port
        self._schema_ready = False

    def list_transactions(
        self,
        period_id: str | None = None,
    ) -> list[Transaction]:
        """Return transactions, optionally restricted to one period."""
        query = select(transactions_table).order_by(
            transactions_table.c.date,
            transactions_table.c.id,
        )
        if period_id is not None:
            query = query.where(transactions_table.c.period_id == period_id)
        with self._engine().connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_transaction(row) for row in rows]

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        """Return the transaction with the given id, or None."""
        query = select(transactions_table).where(
            transactions_table.c.id == transaction_id
        )
        with self._engine().connect() as conn:
            row = conn.execute(query).first()
        return self._to_transaction(row) if row is not None else None

    def save_transaction(self, transaction: Transaction) -> None:
        """Insert or replace a transaction."""
        with self._engine().begin() as conn:
            conn.execute(
                delete(transactions_table).where(
                    transactions_table.c.id == transaction.id
                )
            )
            conn.execute(
                insert(transactions_table),
                _transaction_params(transaction),
            )

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a single transaction."""
        with self._engine().begin() as conn:
            conn.execute(
                delete(transactions_table).where(
                    transactions_table.c.id == transaction_id
                )
            )

    def delete_by_period(self, period_id: str) -> int:
        """Delete every transaction of a period and return the count."""
        with self._engine().begin() as conn:
            result = conn.execute(
                delete(transactions_table).where(
                    transactions_table.c.period_id == period_id
                )
            )
        return result.rowcount

    def _engine(self):
        engine = self._db_port.get_engine()
        if not self._schema_ready:
            ensure_schema(engine)
            self._schema_ready = True
        return engine

    @staticmethod
    def _to_transaction(row) -> Transaction:
        return Transaction(
            id=row.id,
            period_id=row.period_id,
            amount=coerce_decimal(row.amount),
            description=row.description,
            date=row.date,
        )


def _transaction_params(transaction: Transaction) -> dict:
    return {
        "id": transaction.id,
        "period_id": transaction.period_id,
        "amount": coerce_decimal(transaction.amount),
        "description": transaction.description,
        "date": transaction.date,
    }


def insert_transactions(conn, transactions: list[Transaction]) -> None:
    """Insert transaction rows in bulk."""
    payload = [_transaction_params(tx) for tx in transactions]
    if payload:
        conn.execute(insert(transactions_table), payload)


def delete_all_transactions(conn) -> None:
    """Delete every stored transaction."""
    conn.execute(delete(transactions_table))


__all__ = [
    "SqlAlchemyTransactionsRepository",
    "insert_transactions",
    "delete_all_transactions",
]
