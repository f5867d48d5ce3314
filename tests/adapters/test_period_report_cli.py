"""Tests for the period_report_cli adapter."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import period_report_cli
from src.application.errors import PeriodNotFoundError
from src.domain.models import (
    AccountingPeriod,
    DailyBudget,
    PeriodOverview,
    PeriodSummary,
)


def _overview() -> PeriodOverview:
    return PeriodOverview(
        period=AccountingPeriod(
            id="jan",
            name="January",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
        ),
        summary=PeriodSummary(
            total_entries=Decimal("5000"),
            fixed_expenses=Decimal("1000"),
            variable_expenses=Decimal("500"),
            total_expenses=Decimal("1500"),
            investment_amount=Decimal("1000"),
            balance=Decimal("2500"),
            projected_variable_balance=Decimal("3000"),
            current_variable_balance=Decimal("2500"),
        ),
        daily_budget=DailyBudget(remaining_days=10, amount=Decimal("250")),
        days_without_transactions=["2024-01-02"],
    )


def _patch_common(monkeypatch, settings, fake_logger):
    monkeypatch.setattr(period_report_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        period_report_cli,
        "MoneyFlowSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(
        period_report_cli,
        "build_database_adapter",
        lambda db_url: ("adapter", db_url),
    )
    monkeypatch.setattr(
        period_report_cli,
        "build_periods_repository",
        lambda db: "periods",
    )
    monkeypatch.setattr(
        period_report_cli,
        "build_transactions_repository",
        lambda db: "transactions",
    )


def test_main_prints_overview_of_configured_period(monkeypatch, capsys):
    """The CLI should print summary lines for the selected period."""
    fake_logger = MagicMock()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = _overview()
    settings = SimpleNamespace(
        period_id="jan",
        today=date(2024, 1, 22),
        db_url=None,
    )
    _patch_common(monkeypatch, settings, fake_logger)
    monkeypatch.setattr(
        period_report_cli,
        "GetPeriodOverviewUseCase",
        lambda **kwargs: fake_use_case,
    )

    period_report_cli.main()

    fake_use_case.execute.assert_called_once_with(
        "jan",
        today=date(2024, 1, 22),
    )
    out = capsys.readouterr().out
    assert "Period January" in out
    assert "Daily budget=250.00 over 10 open days" in out
    assert "2024-01-02" in out
    assert "overspent" not in out


def test_main_uses_latest_period_when_none_selected(monkeypatch, capsys):
    """Without a period id the newest listed period is reported."""
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = _overview()
    _patch_common(
        monkeypatch,
        SimpleNamespace(period_id=None, today=None, db_url=None),
        MagicMock(),
    )
    monkeypatch.setattr(
        period_report_cli,
        "ListPeriodsUseCase",
        lambda repository: SimpleNamespace(
            execute=lambda: [SimpleNamespace(id="feb"), SimpleNamespace(id="jan")]
        ),
    )
    monkeypatch.setattr(
        period_report_cli,
        "GetPeriodOverviewUseCase",
        lambda **kwargs: fake_use_case,
    )

    period_report_cli.main()

    assert fake_use_case.execute.call_args[0][0] == "feb"
    assert "Balance=2500.00" in capsys.readouterr().out


def test_main_warns_when_no_periods(monkeypatch):
    """An empty store should only log a warning."""
    fake_logger = MagicMock()
    _patch_common(
        monkeypatch,
        SimpleNamespace(period_id=None, today=None, db_url=None),
        fake_logger,
    )
    monkeypatch.setattr(
        period_report_cli,
        "ListPeriodsUseCase",
        lambda repository: SimpleNamespace(execute=lambda: []),
    )

    period_report_cli.main()

    fake_logger.warning.assert_called_once()


def test_main_logs_unknown_period(monkeypatch):
    """Unknown ids should be reported as errors."""
    fake_logger = MagicMock()
    fake_use_case = MagicMock()
    fake_use_case.execute.side_effect = PeriodNotFoundError("nope")
    _patch_common(
        monkeypatch,
        SimpleNamespace(period_id="nope", today=None, db_url=None),
        fake_logger,
    )
    monkeypatch.setattr(
        period_report_cli,
        "GetPeriodOverviewUseCase",
        lambda **kwargs: fake_use_case,
    )

    period_report_cli.main()

    fake_logger.error.assert_called_once()
