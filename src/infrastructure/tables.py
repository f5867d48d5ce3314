"""SQLAlchemy Core table definitions for the MoneyFlow store."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

metadata = MetaData()

AMOUNT = Numeric(14, 2, asdecimal=True)

periods_table = Table(
    "periods",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("investment_percentage", Numeric(5, 2), nullable=False),
    Column("is_open", Boolean, nullable=False, default=True),
)

entries_table = Table(
    "entries",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "period_id",
        String(64),
        ForeignKey("periods.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("position", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("amount", AMOUNT, nullable=False),
)

fixed_expenses_table = Table(
    "fixed_expenses",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "period_id",
        String(64),
        ForeignKey("periods.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("position", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("amount", AMOUNT, nullable=False),
)

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("period_id", String(64), nullable=False, index=True),
    Column("amount", AMOUNT, nullable=False),
    Column("description", String(255), nullable=False, default=""),
    Column("date", Date, nullable=False),
)

template_entries_table = Table(
    "template_entries",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("position", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("amount", AMOUNT, nullable=False),
)

template_fixed_expenses_table = Table(
    "template_fixed_expenses",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("position", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("amount", AMOUNT, nullable=False),
)


def ensure_schema(engine) -> None:
    """Create the MoneyFlow tables when they do not exist yet."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "periods_table",
    "entries_table",
    "fixed_expenses_table",
    "transactions_table",
    "template_entries_table",
    "template_fixed_expenses_table",
    "ensure_schema",
]
