"""SQLAlchemy-backed repository for the period template."""

from sqlalchemy import delete, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.template_repository import TemplateRepositoryPort
from src.domain.models import Template, TemplateEntry, TemplateFixedExpense
from src.infrastructure.tables import (
    ensure_schema,
    template_entries_table,
    template_fixed_expenses_table,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyTemplateRepository(TemplateRepositoryPort):
    """Repository storing the singleton template."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port
        self._schema_ready = False

    def load_template(self) -> Template:
        """Return the stored template, empty when nothing was saved."""
        with self._engine().connect() as conn:
            entry_rows = conn.execute(
                select(template_entries_table).order_by(
                    template_entries_table.c.position
                )
            ).all()
            expense_rows = conn.execute(
                select(template_fixed_expenses_table).order_by(
                    template_fixed_expenses_table.c.position
                )
            ).all()
        return Template(
            entries=tuple(
                TemplateEntry(
                    id=row.id,
                    name=row.name,
                    amount=coerce_decimal(row.amount),
                )
                for row in entry_rows
            ),
            fixed_expenses=tuple(
                TemplateFixedExpense(
                    id=row.id,
                    name=row.name,
                    amount=coerce_decimal(row.amount),
                )
                for row in expense_rows
            ),
        )

    def save_template(self, template: Template) -> None:
        """Replace the stored template."""
        with self._engine().begin() as conn:
            write_template(conn, template)

    def _engine(self):
        engine = self._db_port.get_engine()
        if not self._schema_ready:
            ensure_schema(engine)
            self._schema_ready = True
        return engine


def _item_params(items) -> list[dict]:
    return [
        {
            "id": item.id,
            "position": position,
            "name": item.name,
            "amount": coerce_decimal(item.amount),
        }
        for position, item in enumerate(items or ())
    ]


def write_template(conn, template: Template) -> None:
    """Overwrite the template rows on an open connection."""
    entries = _item_params(template.entries)
    expenses = _item_params(template.fixed_expenses)
    conn.execute(delete(template_entries_table))
    conn.execute(delete(template_fixed_expenses_table))
    if entries:
        conn.execute(insert(template_entries_table), entries)
    if expenses:
        conn.execute(insert(template_fixed_expenses_table), expenses)


__all__ = ["SqlAlchemyTemplateRepository", "write_template"]
