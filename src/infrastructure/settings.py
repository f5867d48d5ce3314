"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MoneyFlowSettings:
    """Settings read from the environment.

    Attributes:
        db_url: Optional database URL override.
        export_path: Optional destination of the backup file.
        import_path: Optional backup file to import.
        period_id: Optional period selected for reports.
        today: Optional reference day for daily budgets.
    """

    db_url: Optional[str] = None
    export_path: Optional[Path] = None
    import_path: Optional[Path] = None
    period_id: Optional[str] = None
    today: Optional[date] = None

    @classmethod
    def from_env(cls) -> "MoneyFlowSettings":
        """Build settings from environment variables.

        Returns:
            MoneyFlowSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            db_url=cls._clean(os.getenv("MONEYFLOW_DB_URL")),
            export_path=cls._normalize_path(
                os.getenv("MONEYFLOW_EXPORT_PATH")
            ),
            import_path=cls._normalize_path(
                os.getenv("MONEYFLOW_IMPORT_PATH")
            ),
            period_id=cls._clean(os.getenv("MONEYFLOW_PERIOD_ID")),
            today=cls._parse_date(os.getenv("MONEYFLOW_TODAY"), logger),
        )

    @staticmethod
    def _clean(value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = value.strip()
        return cleaned or None

    @staticmethod
    def _normalize_path(raw_path: str | None) -> Path | None:
        """Expand and resolve a filesystem path.

        Args:
            raw_path: Raw file path string.

        Returns:
            Path | None: Resolved path, or None when unset.
        """
        if not raw_path or not raw_path.strip():
            return None
        return Path(raw_path.strip()).expanduser().resolve()

    @staticmethod
    def _parse_date(value: str | None, logger) -> date | None:
        """Parse an ISO date string into a date.

        Args:
            value: Date string in YYYY-MM-DD format.
            logger: Logger used for warnings.

        Returns:
            date | None: Parsed date or None when invalid.
        """
        if not value:
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            logger.warning(
                f"Invalid date '{value}'. Expected format YYYY-MM-DD."
            )
            return None


__all__ = ["MoneyFlowSettings"]
