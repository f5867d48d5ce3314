"""Port for reading and writing accounting periods."""

from typing import Protocol

from src.domain.models import AccountingPeriod


class PeriodsRepositoryPort(Protocol):
    """Port exposing persistence of periods with their items."""

    def list_periods(self) -> list[AccountingPeriod]:
        """Return every stored period."""

    def get_period(self, period_id: str) -> AccountingPeriod | None:
        """Return the period with the given id, or None."""

    def save_period(self, period: AccountingPeriod) -> None:
        """Insert or replace a period together with its items."""

    def delete_period(self, period_id: str) -> None:
        """Delete a period and its items."""


__all__ = ["PeriodsRepositoryPort"]
