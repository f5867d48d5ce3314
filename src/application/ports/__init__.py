"""Application ports package."""

from .data_store import DataStorePort
from .database import DatabaseEnginePort
from .id_generator import IdGeneratorPort
from .periods_repository import PeriodsRepositoryPort
from .template_repository import TemplateRepositoryPort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "DataStorePort",
    "DatabaseEnginePort",
    "IdGeneratorPort",
    "PeriodsRepositoryPort",
    "TemplateRepositoryPort",
    "TransactionsRepositoryPort",
]
