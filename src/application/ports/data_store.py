"""Port for replacing the whole MoneyFlow store at once."""

from typing import Protocol

from src.domain.models import AccountingPeriod, Template, Transaction


class DataStorePort(Protocol):
    """Port exposing bulk replacement of periods, transactions and template.

    Implementations must apply the replacement atomically: either every
    collection is replaced or the store is left untouched.
    """

    def replace_all(
        self,
        periods: list[AccountingPeriod],
        transactions: list[Transaction],
        template: Template,
    ) -> None:
        """Replace the stored periods, transactions and template."""


__all__ = ["DataStorePort"]
