"""Composition root for wiring infrastructure adapters."""

from src.application.ports.data_store import DataStorePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.id_generator import IdGeneratorPort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.ports.template_repository import TemplateRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.infrastructure.data_store import SqlAlchemyDataStore
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.id_generator import UuidIdGenerator
from src.infrastructure.periods_repository import SqlAlchemyPeriodsRepository
from src.infrastructure.template_repository import (
    SqlAlchemyTemplateRepository,
)
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance.

    Args:
        db_url: Optional database URL; the configured default is used
            when omitted.
    """
    return SqlAlchemyDatabaseEngineAdapter(db_url=db_url)


def build_periods_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PeriodsRepositoryPort:
    """Return the periods repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPeriodsRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_template_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TemplateRepositoryPort:
    """Return the template repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTemplateRepository(resolved_db)


def build_data_store(
    db_port: DatabaseEnginePort | None = None,
) -> DataStorePort:
    """Return the data store used for bulk replacement."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyDataStore(resolved_db)


def build_id_generator() -> IdGeneratorPort:
    """Return the identifier generator."""
    return UuidIdGenerator()


__all__ = [
    "build_database_adapter",
    "build_periods_repository",
    "build_transactions_repository",
    "build_template_repository",
    "build_data_store",
    "build_id_generator",
]
