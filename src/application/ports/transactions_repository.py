"""Port for reading and writing variable transactions."""

from typing import Protocol

from src.domain.models import Transaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing the flat transaction collection."""

    def list_transactions(
        self,
        period_id: str | None = None,
    ) -> list[Transaction]:
        """Return transactions, optionally restricted to one period."""

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        """Return the transaction with the given id, or None."""

    def save_transaction(self, transaction: Transaction) -> None:
        """Insert or replace a transaction."""

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a single transaction."""

    def delete_by_period(self, period_id: str) -> int:
        """Delete every transaction of a period and return the count."""


__all__ = ["TransactionsRepositoryPort"]
