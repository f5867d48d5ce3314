"""Tests for the import_data_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import import_data_cli
from src.application.errors import InvalidImportError


def _patch_common(monkeypatch, settings, fake_logger):
    monkeypatch.setattr(import_data_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        import_data_cli,
        "MoneyFlowSettings",
        SimpleNamespace(from_env=lambda: settings),
    )


def _settings(import_path):
    return SimpleNamespace(import_path=import_path, db_url="sqlite://")


def _patch_wiring(monkeypatch, fake_use_case, parsed):
    monkeypatch.setattr(import_data_cli, "read_export", lambda path: parsed)
    monkeypatch.setattr(
        import_data_cli,
        "build_database_adapter",
        lambda db_url: ("adapter", db_url),
    )
    monkeypatch.setattr(
        import_data_cli,
        "build_data_store",
        lambda adapter: ("store", adapter),
    )

    def _fake_use_case(data_store, logger):
        assert data_store == ("store", ("adapter", "sqlite://"))
        return fake_use_case

    monkeypatch.setattr(import_data_cli, "ImportDataUseCase", _fake_use_case)


def test_main_warns_without_import_path(monkeypatch):
    """The CLI should stop when no backup path is configured."""
    fake_logger = MagicMock()
    _patch_common(monkeypatch, _settings(None), fake_logger)
    monkeypatch.setattr(
        import_data_cli,
        "ImportDataUseCase",
        MagicMock(side_effect=AssertionError("should not run")),
    )

    import_data_cli.main()

    fake_logger.warning.assert_called_once()


def test_main_logs_missing_file(monkeypatch, tmp_path):
    """A missing backup file should be reported as an error."""
    fake_logger = MagicMock()
    _patch_common(monkeypatch, _settings(tmp_path / "missing.json"), fake_logger)

    import_data_cli.main()

    fake_logger.error.assert_called_once()


def test_main_logs_invalid_backup(monkeypatch, tmp_path):
    """Malformed backups should be reported without touching the store."""
    fake_logger = MagicMock()
    path = tmp_path / "broken.json"
    path.write_text('{"version": "1.0"}', encoding="utf-8")
    _patch_common(monkeypatch, _settings(path), fake_logger)
    monkeypatch.setattr(
        import_data_cli,
        "build_database_adapter",
        MagicMock(side_effect=AssertionError("should not connect")),
    )

    import_data_cli.main()

    fake_logger.error.assert_called_once()
    assert "Invalid backup" in fake_logger.error.call_args[0][0]


def test_main_logs_rejected_import(monkeypatch, capsys, tmp_path):
    """Errors raised while importing are logged instead of escaping."""
    fake_logger = MagicMock()
    path = tmp_path / "backup.json"
    path.write_text("{}", encoding="utf-8")
    fake_use_case = MagicMock()
    fake_use_case.execute.side_effect = InvalidImportError(
        "Duplicate transaction ids in backup: dup"
    )
    _patch_common(monkeypatch, _settings(path), fake_logger)
    _patch_wiring(monkeypatch, fake_use_case, object())

    import_data_cli.main()

    fake_logger.error.assert_called_once_with(
        "Duplicate transaction ids in backup: dup"
    )
    assert capsys.readouterr().out == ""


def test_main_runs_use_case_and_prints_result(monkeypatch, capsys, tmp_path):
    """The CLI should import the parsed backup and print counts."""
    fake_logger = MagicMock()
    path = tmp_path / "backup.json"
    path.write_text("{}", encoding="utf-8")
    parsed = object()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = SimpleNamespace(
        period_count=2,
        transaction_count=7,
    )
    _patch_common(monkeypatch, _settings(path), fake_logger)
    _patch_wiring(monkeypatch, fake_use_case, parsed)

    import_data_cli.main()

    fake_use_case.execute.assert_called_once_with(parsed)
    captured = capsys.readouterr()
    assert "Imported 2 periods and 7 transactions." in captured.out
