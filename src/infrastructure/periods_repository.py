"""SQLAlchemy-backed repository for accounting periods."""

from sqlalchemy import delete, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.domain.models import AccountingPeriod, Entry, FixedExpense
from src.infrastructure.tables import (
    ensure_schema,
    entries_table,
    fixed_expenses_table,
    periods_table,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyPeriodsRepository(PeriodsRepositoryPort):
    """Repository storing periods and their items in relational tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the MoneyFlow engine.
        """
        self._db_port = db_port
        self._schema_ready = False

    def list_periods(self) -> list[AccountingPeriod]:
        """Return every stored period with its entries and fixed expenses."""
        engine = self._engine()
        with engine.connect() as conn:
            period_rows = conn.execute(
                select(periods_table).order_by(periods_table.c.start_date)
            ).all()
            entry_rows = conn.execute(
                select(entries_table).order_by(entries_table.c.position)
            ).all()
            expense_rows = conn.execute(
                select(fixed_expenses_table).order_by(
                    fixed_expenses_table.c.position
                )
            ).all()
        return self._assemble(period_rows, entry_rows, expense_rows)

    def get_period(self, period_id: str) -> AccountingPeriod | None:
        """Return the period with the given id, or None."""
        engine = self._engine()
        with engine.connect() as conn:
            period_rows = conn.execute(
                select(periods_table).where(periods_table.c.id == period_id)
            ).all()
            if not period_rows:
                return None
            entry_rows = conn.execute(
                select(entries_table)
                .where(entries_table.c.period_id == period_id)
                .order_by(entries_table.c.position)
            ).all()
            expense_rows = conn.execute(
                select(fixed_expenses_table)
                .where(fixed_expenses_table.c.period_id == period_id)
                .order_by(fixed_expenses_table.c.position)
            ).all()
        return self._assemble(period_rows, entry_rows, expense_rows)[0]

    def save_period(self, period: AccountingPeriod) -> None:
        """Insert or replace a period together with its items."""
        engine = self._engine()
        with engine.begin() as conn:
            self._delete(conn, period.id)
            insert_period(conn, period)

    def delete_period(self, period_id: str) -> None:
        """Delete a period and its items."""
        engine = self._engine()
        with engine.begin() as conn:
            self._delete(conn, period_id)

    def _engine(self):
        engine = self._db_port.get_engine()
        if not self._schema_ready:
            ensure_schema(engine)
            self._schema_ready = True
        return engine

    @staticmethod
    def _delete(conn, period_id: str) -> None:
        conn.execute(
            delete(entries_table).where(entries_table.c.period_id == period_id)
        )
        conn.execute(
            delete(fixed_expenses_table).where(
                fixed_expenses_table.c.period_id == period_id
            )
        )
        conn.execute(
            delete(periods_table).where(periods_table.c.id == period_id)
        )

    @staticmethod
    def _assemble(period_rows, entry_rows, expense_rows) -> list[AccountingPeriod]:
        entries: dict[str, list[Entry]] = {}
        for row in entry_rows:
            entries.setdefault(row.period_id, []).append(
                Entry(
                    id=row.id,
                    period_id=row.period_id,
                    name=row.name,
                    amount=coerce_decimal(row.amount),
                )
            )
        expenses: dict[str, list[FixedExpense]] = {}
        for row in expense_rows:
            expenses.setdefault(row.period_id, []).append(
                FixedExpense(
                    id=row.id,
                    period_id=row.period_id,
                    name=row.name,
                    amount=coerce_decimal(row.amount),
                )
            )
        return [
            AccountingPeriod(
                id=row.id,
                name=row.name,
                start_date=row.start_date,
                end_date=row.end_date,
                investment_percentage=coerce_decimal(
                    row.investment_percentage
                ),
                fixed_expenses=tuple(expenses.get(row.id, ())),
                entries=tuple(entries.get(row.id, ())),
                is_open=bool(row.is_open),
            )
            for row in period_rows
        ]


def insert_period(conn, period: AccountingPeriod) -> None:
    """Insert a period row followed by its ordered item rows."""
    conn.execute(
        insert(periods_table),
        {
            "id": period.id,
            "name": period.name,
            "start_date": period.start_date,
            "end_date": period.end_date,
            "investment_percentage": coerce_decimal(
                period.investment_percentage
            ),
            "is_open": period.is_open,
        },
    )
    entries = [
        {
            "id": entry.id,
            "period_id": period.id,
            "position": position,
            "name": entry.name,
            "amount": coerce_decimal(entry.amount),
        }
        for position, entry in enumerate(period.entries or ())
    ]
    if entries:
        conn.execute(insert(entries_table), entries)
    expenses = [
        {
            "id": expense.id,
            "period_id": period.id,
            "position": position,
            "name": expense.name,
            "amount": coerce_decimal(expense.amount),
        }
        for position, expense in enumerate(period.fixed_expenses or ())
    ]
    if expenses:
        conn.execute(insert(fixed_expenses_table), expenses)


def delete_all_periods(conn) -> None:
    """Delete every period together with its items."""
    conn.execute(delete(entries_table))
    conn.execute(delete(fixed_expenses_table))
    conn.execute(delete(periods_table))


__all__ = [
    "SqlAlchemyPeriodsRepository",
    "insert_period",
    "delete_all_periods",
]
