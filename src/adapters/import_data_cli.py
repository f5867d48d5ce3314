"""CLI adapter replacing the MoneyFlow store with a JSON backup."""

from src.application.errors import InvalidImportError
from src.application.use_cases.import_data import ImportDataUseCase
from src.infrastructure.container import (
    build_data_store,
    build_database_adapter,
)
from src.infrastructure.data_export import read_export
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import MoneyFlowSettings


def main() -> None:
    """Import the backup named by MONEYFLOW_IMPORT_PATH."""
    logger = get_app_logger()
    settings = MoneyFlowSettings.from_env()
    if settings.import_path is None:
        logger.warning("MONEYFLOW_IMPORT_PATH is required to import data.")
        return
    if not settings.import_path.exists():
        logger.error(f"Backup file does not exist at {settings.import_path}")
        return

    try:
        data = read_export(settings.import_path)
        use_case = ImportDataUseCase(
            data_store=build_data_store(
                build_database_adapter(settings.db_url)
            ),
            logger=logger,
        )
        result = use_case.execute(data)
    except InvalidImportError as exc:
        logger.error(str(exc))
        return

    print(
        f"Imported {result.period_count} periods and "
        f"{result.transaction_count} transactions."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
