"""Application use cases package."""

from .create_period import CreatePeriodUseCase
from .delete_period import DeletePeriodResult, DeletePeriodUseCase
from .export_data import EXPORT_VERSION, DataExport, ExportDataUseCase
from .get_period_overview import GetPeriodOverviewUseCase, PeriodOverview
from .import_data import ImportDataUseCase, ImportResult
from .list_periods import ListPeriodsUseCase
from .manage_period_items import ManagePeriodItemsUseCase
from .manage_template import ManageTemplateUseCase
from .manage_transactions import ManageTransactionsUseCase

__all__ = [
    "CreatePeriodUseCase",
    "DeletePeriodUseCase",
    "DeletePeriodResult",
    "ExportDataUseCase",
    "DataExport",
    "EXPORT_VERSION",
    "GetPeriodOverviewUseCase",
    "PeriodOverview",
    "ImportDataUseCase",
    "ImportResult",
    "ListPeriodsUseCase",
    "ManagePeriodItemsUseCase",
    "ManageTemplateUseCase",
    "ManageTransactionsUseCase",
]
