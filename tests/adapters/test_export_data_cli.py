"""Tests for the export_data_cli adapter."""

import json
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import export_data_cli
from src.application.use_cases.export_data import DataExport
from src.domain.models import Template


def _patch_wiring(monkeypatch, settings, fake_use_case, fake_logger):
    dummy_adapter = object()
    monkeypatch.setattr(export_data_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        export_data_cli,
        "MoneyFlowSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(
        export_data_cli,
        "build_database_adapter",
        lambda db_url: dummy_adapter if db_url == settings.db_url else None,
    )
    for name in (
        "build_periods_repository",
        "build_transactions_repository",
        "build_template_repository",
    ):
        monkeypatch.setattr(export_data_cli, name, lambda db: db)

    def _fake_use_case(**kwargs):
        assert kwargs["logger"] is fake_logger
        assert kwargs["periods_repository"] is dummy_adapter
        return fake_use_case

    monkeypatch.setattr(export_data_cli, "ExportDataUseCase", _fake_use_case)


def test_main_writes_backup_to_configured_path(monkeypatch, capsys, tmp_path):
    """The CLI should write the envelope and print a summary."""
    target = tmp_path / "out" / "backup.json"
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = DataExport(
        version="1.0",
        exported_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        periods=[],
        transactions=[],
        template=Template(),
    )
    _patch_wiring(
        monkeypatch,
        SimpleNamespace(export_path=target, db_url="sqlite://"),
        fake_use_case,
        MagicMock(),
    )

    export_data_cli.main()

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["version"] == "1.0"
    assert payload["periods"] == []
    captured = capsys.readouterr()
    assert "0 periods" in captured.out
    assert str(target) in captured.out


def test_main_defaults_to_dated_file_name(monkeypatch, capsys, tmp_path):
    """Without a configured path the backup lands in the working dir."""
    monkeypatch.chdir(tmp_path)
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = DataExport(
        version="1.0",
        exported_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        periods=[],
        transactions=[],
        template=Template(),
    )
    _patch_wiring(
        monkeypatch,
        SimpleNamespace(export_path=None, db_url=None),
        fake_use_case,
        MagicMock(),
    )

    export_data_cli.main()

    assert (tmp_path / "moneyflow-backup-2024-03-01.json").exists()
