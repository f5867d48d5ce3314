"""CLI adapter writing a JSON backup of the MoneyFlow store."""

from pathlib import Path

from src.application.use_cases.export_data import ExportDataUseCase
from src.infrastructure.container import (
    build_database_adapter,
    build_periods_repository,
    build_template_repository,
    build_transactions_repository,
)
from src.infrastructure.data_export import (
    default_export_filename,
    write_export,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import MoneyFlowSettings


def main() -> None:
    """Export every period, transaction and the template to a file."""
    logger = get_app_logger()
    settings = MoneyFlowSettings.from_env()
    db_adapter = build_database_adapter(settings.db_url)
    use_case = ExportDataUseCase(
        periods_repository=build_periods_repository(db_adapter),
        transactions_repository=build_transactions_repository(db_adapter),
        template_repository=build_template_repository(db_adapter),
        logger=logger,
    )

    export = use_case.execute()
    path = settings.export_path or Path.cwd() / default_export_filename(export)
    write_export(path, export)

    print(
        f"Exported {len(export.periods)} periods and "
        f"{len(export.transactions)} transactions to {path}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
