"""Tests for the ManagePeriodItemsUseCase."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.application.errors import PeriodNotFoundError
from src.application.use_cases.manage_period_items import (
    ManagePeriodItemsUseCase,
)


@pytest.fixture
def use_case(periods_repository, id_generator, logger):
    return ManagePeriodItemsUseCase(
        periods_repository=periods_repository,
        id_generator=id_generator,
        logger=logger,
    )


def test_add_entry_persists_new_item(use_case, periods_repository) -> None:
    """Added entries get a generated id and are stored."""
    entry = use_case.add_entry("jan", "Freelance", "250.50")

    stored = periods_repository.get_period("jan")
    assert entry.id == "id-1"
    assert entry.amount == Decimal("250.50")
    assert [e.id for e in stored.entries] == ["e1", "id-1"]


def test_add_entry_rejects_negative_amount(use_case, periods_repository) -> None:
    """Negative income is refused before anything is stored."""
    with pytest.raises(ValueError):
        use_case.add_entry("jan", "Refund", -10)
    assert len(periods_repository.get_period("jan").entries) == 1


def test_update_and_remove_entry(use_case, january) -> None:
    """Entries can be replaced and removed."""
    updated = use_case.update_entry(
        replace(january.entries[0], amount=Decimal("5500"))
    )
    assert updated.entries[0].amount == Decimal("5500")

    removed = use_case.remove_entry("jan", "e1")
    assert removed.entries == ()


def test_fixed_expense_lifecycle(use_case, periods_repository) -> None:
    """Fixed expenses can be added, updated and removed."""
    expense = use_case.add_fixed_expense("jan", "Internet", 100)
    use_case.update_fixed_expense(replace(expense, amount=Decimal("120")))
    stored = periods_repository.get_period("jan")
    assert stored.fixed_expenses[-1].amount == Decimal("120")

    use_case.remove_fixed_expense("jan", "f1")
    stored = periods_repository.get_period("jan")
    assert [e.name for e in stored.fixed_expenses] == ["Internet"]


def test_settings_mutations(use_case, periods_repository) -> None:
    """Rename and investment percentage updates are persisted."""
    use_case.rename("jan", "Janeiro")
    use_case.set_investment_percentage("jan", 140)

    stored = periods_repository.get_period("jan")
    assert stored.name == "Janeiro"
    assert stored.investment_percentage == Decimal("100")


def test_unknown_period_raises(use_case) -> None:
    """Mutations of missing periods raise PeriodNotFoundError."""
    with pytest.raises(PeriodNotFoundError):
        use_case.add_entry("missing", "X", 1)
