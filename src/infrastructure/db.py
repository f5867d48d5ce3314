"""Database infrastructure for the MoneyFlow store.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine holding periods, transactions and the template. It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.utils.utils import get_project_root

DB_URL_ENV = "MONEYFLOW_DB_URL"


def _get_db_url() -> str:
    """Return the configured database URL.

    The value is read from MONEYFLOW_DB_URL (after loading a .env file) and
    falls back to a SQLite file under the project data directory.

    Returns:
        str: SQLAlchemy database URL.
    """
    dotenv.load_dotenv()
    value = os.getenv(DB_URL_ENV)
    if value:
        return value
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'moneyflow.db'}"


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine. Server databases get a small connection
        pool with health checks; SQLite keeps the driver defaults.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the MoneyFlow database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_db_url())
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases depend only on the protocol.
    """

    def __init__(
        self,
        engine: Engine | None = None,
        db_url: str | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional ready-made engine.
            db_url: Optional database URL used to build a dedicated engine.
        """
        self._engine = engine
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the MoneyFlow database.

        Returns:
            Engine: The injected engine, an engine for the configured URL,
            or the process-wide singleton.
        """
        if self._engine is None and self._db_url:
            self._engine = _create_engine(self._db_url)
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter", "DB_URL_ENV"]
