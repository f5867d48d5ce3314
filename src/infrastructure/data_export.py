"""JSON codec for the backup envelope.

The envelope keeps the field names of the browser version of MoneyFlow::

    {"version", "exportedAt", "periods", "transactions", "template"}

Amounts are written as JSON numbers and dates as YYYY-MM-DD strings.
"""

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from src.application.errors import InvalidImportError
from src.application.use_cases.export_data import DataExport
from src.domain.models import (
    AccountingPeriod,
    Entry,
    FixedExpense,
    Template,
    TemplateEntry,
    TemplateFixedExpense,
    Transaction,
)
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


def default_export_filename(export: DataExport) -> str:
    """Return the conventional backup file name for an export."""
    return f"moneyflow-backup-{export.exported_at.date().isoformat()}.json"


def export_to_dict(export: DataExport) -> dict[str, Any]:
    """Convert a DataExport to the JSON-ready envelope."""
    return {
        "version": export.version,
        "exportedAt": export.exported_at.isoformat(),
        "periods": [_period_to_dict(period) for period in export.periods],
        "transactions": [
            {
                "id": tx.id,
                "periodId": tx.period_id,
                "amount": _number(tx.amount),
                "description": tx.description,
                "date": tx.date.isoformat(),
            }
            for tx in export.transactions
        ],
        "template": {
            "entries": [_item_to_dict(item) for item in export.template.entries],
            "fixedExpenses": [
                _item_to_dict(item) for item in export.template.fixed_expenses
            ],
        },
    }


def export_from_dict(payload: Any) -> DataExport:
    """Parse an envelope into a DataExport.

    Raises:
        InvalidImportError: If the envelope is malformed.
    """
    if not isinstance(payload, dict):
        raise InvalidImportError("Backup content must be a JSON object")
    if (
        not payload.get("version")
        or not isinstance(payload.get("periods"), list)
        or not isinstance(payload.get("transactions"), list)
        or not payload.get("template")
    ):
        raise InvalidImportError("Invalid backup file format")
    try:
        template_payload = payload["template"]
        return DataExport(
            version=str(payload["version"]),
            exported_at=_parse_timestamp(payload.get("exportedAt")),
            periods=[_period_from_dict(item) for item in payload["periods"]],
            transactions=[
                Transaction(
                    id=item["id"],
                    period_id=item["periodId"],
                    amount=coerce_decimal(item.get("amount")),
                    description=item.get("description", ""),
                    date=coerce_date(item["date"]),
                )
                for item in payload["transactions"]
            ],
            template=Template(
                entries=tuple(
                    TemplateEntry(**_item_from_dict(item))
                    for item in template_payload.get("entries", [])
                ),
                fixed_expenses=tuple(
                    TemplateFixedExpense(**_item_from_dict(item))
                    for item in template_payload.get("fixedExpenses", [])
                ),
            ),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise InvalidImportError(f"Invalid backup file format: {exc}") from exc


def write_export(path: Path, export: DataExport) -> Path:
    """Write the envelope as indented JSON and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(export_to_dict(export), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def read_export(path: Path) -> DataExport:
    """Read and parse a backup file.

    Raises:
        InvalidImportError: If the file is not valid JSON or not an envelope.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidImportError(f"Backup file is not valid JSON: {exc}") from exc
    return export_from_dict(payload)


def _number(value: Decimal) -> int | float:
    value = coerce_decimal(value)
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _item_to_dict(item) -> dict[str, Any]:
    return {"id": item.id, "name": item.name, "amount": _number(item.amount)}


def _item_from_dict(item: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": item["id"],
        "name": item["name"],
        "amount": coerce_decimal(item.get("amount")),
    }


def _period_to_dict(period: AccountingPeriod) -> dict[str, Any]:
    return {
        "id": period.id,
        "name": period.name,
        "startDate": period.start_date.isoformat(),
        "endDate": period.end_date.isoformat(),
        "isOpen": period.is_open,
        "investmentPercentage": _number(period.investment_percentage),
        "fixedExpenses": [
            {**_item_to_dict(item), "periodId": item.period_id}
            for item in period.fixed_expenses
        ],
        "entries": [
            {**_item_to_dict(item), "periodId": item.period_id}
            for item in period.entries
        ],
    }


def _period_from_dict(item: dict[str, Any]) -> AccountingPeriod:
    period_id = item["id"]
    return AccountingPeriod(
        id=period_id,
        name=item["name"],
        start_date=coerce_date(item["startDate"]),
        end_date=coerce_date(item["endDate"]),
        investment_percentage=coerce_decimal(
            item.get("investmentPercentage")
        ),
        fixed_expenses=tuple(
            FixedExpense(
                period_id=child.get("periodId", period_id),
                **_item_from_dict(child),
            )
            for child in item.get("fixedExpenses") or []
        ),
        entries=tuple(
            Entry(
                period_id=child.get("periodId", period_id),
                **_item_from_dict(child),
            )
            for child in item.get("entries") or []
        ),
        is_open=bool(item.get("isOpen", True)),
    )


def _parse_timestamp(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


__all__ = [
    "default_export_filename",
    "export_to_dict",
    "export_from_dict",
    "write_export",
    "read_export",
]
