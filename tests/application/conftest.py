"""In-memory collaborators shared by the use case tests."""

from datetime import date
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    AccountingPeriod,
    Entry,
    FixedExpense,
    Template,
    Transaction,
)


class InMemoryPeriodsRepository:
    def __init__(self, periods=()) -> None:
        self.periods = {period.id: period for period in periods}

    def list_periods(self):
        return list(self.periods.values())

    def get_period(self, period_id):
        return self.periods.get(period_id)

    def save_period(self, period):
        self.periods[period.id] = period

    def delete_period(self, period_id):
        self.periods.pop(period_id, None)


class InMemoryTransactionsRepository:
    def __init__(self, transactions=()) -> None:
        self.transactions = {tx.id: tx for tx in transactions}

    def list_transactions(self, period_id=None):
        return [
            tx
            for tx in self.transactions.values()
            if period_id is None or tx.period_id == period_id
        ]

    def get_transaction(self, transaction_id):
        return self.transactions.get(transaction_id)

    def save_transaction(self, transaction):
        self.transactions[transaction.id] = transaction

    def delete_transaction(self, transaction_id):
        self.transactions.pop(transaction_id, None)

    def delete_by_period(self, period_id):
        doomed = [
            tx.id for tx in self.transactions.values()
            if tx.period_id == period_id
        ]
        for tx_id in doomed:
            del self.transactions[tx_id]
        return len(doomed)


class InMemoryTemplateRepository:
    def __init__(self, template=None) -> None:
        self.template = template or Template()

    def load_template(self):
        return self.template

    def save_template(self, template):
        self.template = template


class InMemoryDataStore:
    def __init__(self, periods, transactions, template) -> None:
        self.periods_repository = periods
        self.transactions_repository = transactions
        self.template_repository = template

    def replace_all(self, periods, transactions, template):
        self.periods_repository.periods = {p.id: p for p in periods}
        self.transactions_repository.transactions = {
            tx.id: tx for tx in transactions
        }
        self.template_repository.template = template

class SequentialIds:
    def __init__(self) -> None:
        self._counter = count(1)

    def next(self) -> str:
        return f"id-{next(self._counter)}"


@pytest.fixture
def january() -> AccountingPeriod:
    return AccountingPeriod(
        id="jan",
        name="January",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        investment_percentage=Decimal("20"),
        entries=(
            Entry(id="e1", period_id="jan", name="Salary", amount=Decimal("5000")),
        ),
        fixed_expenses=(
            FixedExpense(id="f1", period_id="jan", name="Rent", amount=Decimal("1000")),
        ),
    )


@pytest.fixture
def january_transactions() -> list[Transaction]:
    return [
        Transaction(
            id="t1",
            period_id="jan",
            amount=Decimal("300"),
            description="Market",
            date=date(2024, 1, 20),
        ),
        Transaction(
            id="t2",
            period_id="jan",
            amount=Decimal("200"),
            description="Fuel",
            date=date(2024, 1, 21),
        ),
    ]


@pytest.fixture
def periods_repository(january):
    return InMemoryPeriodsRepository([january])


@pytest.fixture
def transactions_repository(january_transactions):
    return InMemoryTransactionsRepository(january_transactions)


@pytest.fixture
def template_repository():
    return InMemoryTemplateRepository()


@pytest.fixture
def id_generator():
    return SequentialIds()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def empty_data_store():
    return InMemoryDataStore(
        InMemoryPeriodsRepository(),
        InMemoryTransactionsRepository(),
        InMemoryTemplateRepository(),
    )
