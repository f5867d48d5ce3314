"""Tests for the DeletePeriodUseCase."""

import pytest

from src.application.errors import PeriodNotFoundError
from src.application.use_cases.delete_period import DeletePeriodUseCase


def test_execute_cascades_to_transactions(
    periods_repository,
    transactions_repository,
    logger,
) -> None:
    """Deleting a period removes its transactions too."""
    use_case = DeletePeriodUseCase(
        periods_repository=periods_repository,
        transactions_repository=transactions_repository,
        logger=logger,
    )

    result = use_case.execute("jan")

    assert result.period_id == "jan"
    assert result.deleted_transactions == 2
    assert periods_repository.get_period("jan") is None
    assert transactions_repository.list_transactions("jan") == []


def test_execute_raises_for_unknown_period(
    periods_repository,
    transactions_repository,
    logger,
) -> None:
    """Nothing is deleted when the period does not exist."""
    use_case = DeletePeriodUseCase(
        periods_repository,
        transactions_repository,
        logger=logger,
    )

    with pytest.raises(PeriodNotFoundError):
        use_case.execute("missing")
    assert len(transactions_repository.list_transactions()) == 2
