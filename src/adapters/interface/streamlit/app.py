"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.errors import InvalidPeriodError
from src.application.use_cases.create_period import CreatePeriodUseCase
from src.application.use_cases.delete_period import (
    DeletePeriodResult,
    DeletePeriodUseCase,
)
from src.application.use_cases.get_period_overview import (
    GetPeriodOverviewUseCase,
    PeriodOverview,
)
from src.application.use_cases.list_periods import ListPeriodsUseCase
from src.application.use_cases.manage_period_items import (
    ManagePeriodItemsUseCase,
)
from src.application.use_cases.manage_template import ManageTemplateUseCase
from src.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from src.domain.models import AccountingPeriod, Template, Transaction
from src.domain.services import period_days_range
from src.infrastructure.container import (
    build_database_adapter,
    build_id_generator,
    build_periods_repository,
    build_template_repository,
    build_transactions_repository,
)
from src.infrastructure.logging.logger import get_usage_logger


def _fetch_periods() -> Sequence[AccountingPeriod]:
    """Fetch periods, newest first."""
    repository = build_periods_repository(build_database_adapter())
    return ListPeriodsUseCase(repository).execute()


def _fetch_overview(period_id: str, today: date) -> PeriodOverview:
    """Fetch the overview of a period for the given day."""
    adapter = build_database_adapter()
    use_case = GetPeriodOverviewUseCase(
        periods_repository=build_periods_repository(adapter),
        transactions_repository=build_transactions_repository(adapter),
    )
    return use_case.execute(period_id, today=today)


def _fetch_transactions(period_id: str) -> Sequence[Transaction]:
    """Fetch the transactions of a period sorted by date."""
    return _build_transactions_use_case().list_for_period(period_id)


def _build_transactions_use_case() -> ManageTransactionsUseCase:
    adapter = build_database_adapter()
    return ManageTransactionsUseCase(
        transactions_repository=build_transactions_repository(adapter),
        periods_repository=build_periods_repository(adapter),
        id_generator=build_id_generator(),
    )


def _create_period(
    name: str,
    start_date: date,
    end_date: date,
    investment_percentage: float,
) -> AccountingPeriod:
    """Create a period seeded from the template."""
    adapter = build_database_adapter()
    use_case = CreatePeriodUseCase(
        periods_repository=build_periods_repository(adapter),
        template_repository=build_template_repository(adapter),
        id_generator=build_id_generator(),
    )
    return use_case.execute(
        name,
        start_date,
        end_date,
        investment_percentage=investment_percentage,
    )


def _build_period_items_use_case() -> ManagePeriodItemsUseCase:
    return ManagePeriodItemsUseCase(
        periods_repository=build_periods_repository(build_database_adapter()),
        id_generator=build_id_generator(),
    )


def _build_template_use_case() -> ManageTemplateUseCase:
    return ManageTemplateUseCase(
        template_repository=build_template_repository(
            build_database_adapter()
        ),
        id_generator=build_id_generator(),
    )


def _add_period_item(
    period_id: str,
    kind: str,
    name: str,
    amount: Decimal,
) -> None:
    """Add an income entry or a fixed expense to a period.

    Args:
        period_id: Period receiving the item.
        kind: Either "entry" or "fixed_expense".
        name: Item label.
        amount: Non-negative amount.
    """
    use_case = _build_period_items_use_case()
    if kind == "entry":
        use_case.add_entry(period_id, name, amount)
    else:
        use_case.add_fixed_expense(period_id, name, amount)


def _remove_period_item(period_id: str, kind: str, item_id: str) -> None:
    """Remove an income entry or a fixed expense from a period."""
    use_case = _build_period_items_use_case()
    if kind == "entry":
        use_case.remove_entry(period_id, item_id)
    else:
        use_case.remove_fixed_expense(period_id, item_id)


def _update_period_settings(
    period_id: str,
    name: str,
    investment_percentage: float,
) -> AccountingPeriod:
    """Rename a period and set its investment percentage."""
    use_case = _build_period_items_use_case()
    use_case.rename(period_id, name)
    return use_case.set_investment_percentage(period_id, investment_percentage)


def _delete_period(period_id: str) -> DeletePeriodResult:
    """Delete a period together with its transactions."""
    adapter = build_database_adapter()
    use_case = DeletePeriodUseCase(
        periods_repository=build_periods_repository(adapter),
        transactions_repository=build_transactions_repository(adapter),
    )
    return use_case.execute(period_id)


def _load_template() -> Template:
    return _build_template_use_case().get()


def _add_template_item(kind: str, name: str, amount: Decimal) -> None:
    """Add a default income entry or fixed expense to the template."""
    use_case = _build_template_use_case()
    if kind == "entry":
        use_case.add_entry(name, amount)
    else:
        use_case.add_fixed_expense(name, amount)


def _remove_template_item(kind: str, item_id: str) -> None:
    use_case = _build_template_use_case()
    if kind == "entry":
        use_case.remove_entry(item_id)
    else:
        use_case.remove_fixed_expense(item_id)


def _format_currency(value: Decimal, symbol: str = "R$") -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {abs(value):,.2f}"


def _prepare_daily_spending_data(
    period: AccountingPeriod,
    transactions: Sequence[Transaction],
) -> list[dict[str, str | float]]:
    """Aggregate transaction amounts per day of the period.

    Args:
        period: Period whose days form the x axis.
        transactions: Transactions of the period.

    Returns:
        Altair-ready rows, one per calendar day.
    """
    totals: dict[str, Decimal] = {}
    for tx in transactions:
        key = tx.date.isoformat()
        totals[key] = totals.get(key, Decimal("0")) + tx.amount
    return [
        {"day": day, "amount": float(totals.get(day, Decimal("0")))}
        for day in period_days_range(period.start_date, period.end_date)
    ]


def _render_summary(overview: PeriodOverview) -> None:
    """Render metric cards for the period summary and daily budget."""
    summary = overview.summary
    budget = overview.daily_budget
    income_col, fixed_col, variable_col, invest_col = st.columns(4)
    income_col.metric("Income", _format_currency(summary.total_entries))
    fixed_col.metric("Fixed expenses", _format_currency(summary.fixed_expenses))
    variable_col.metric(
        "Variable expenses",
        _format_currency(summary.variable_expenses),
    )
    invest_col.metric("Investment", _format_currency(summary.investment_amount))

    balance_col, available_col, daily_col = st.columns(3)
    balance_col.metric("Balance", _format_currency(summary.balance))
    available_col.metric(
        "Available to spend",
        _format_currency(summary.current_variable_balance),
        f"of {_format_currency(summary.projected_variable_balance)}",
        delta_color="off",
    )
    daily_col.metric(
        "Daily budget",
        _format_currency(budget.amount),
        f"{budget.remaining_days} open days",
        delta_color="off",
    )
    if budget.is_overspent:
        st.error("Variable spending is above the planned budget.")


def _render_daily_chart(
    period: AccountingPeriod,
    transactions: Sequence[Transaction],
) -> None:
    """Render a bar chart of spending per day."""
    data = _prepare_daily_spending_data(period, transactions)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color="#1b9aaa",
    ).encode(
        x=alt.X("day:O", title=None),
        y=alt.Y("amount:Q", title="Spent"),
        tooltip=[alt.Tooltip("day:O"), alt.Tooltip("amount:Q", format=",.2f")],
    )
    st.subheader("Spending per day")
    st.altair_chart(chart, width="stretch")


def _render_transactions(transactions: Sequence[Transaction]) -> None:
    """Render the transaction table."""
    st.subheader("Transactions")
    if not transactions:
        st.info("No transactions recorded for this period yet.")
        return
    data = [
        {
            "Date": tx.date.isoformat(),
            "Description": tx.description,
            "Amount": _format_currency(tx.amount),
        }
        for tx in transactions
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_transaction_form(period: AccountingPeriod, today: date) -> None:
    """Render the form used to record a transaction."""
    with st.sidebar.form("add_transaction", clear_on_submit=True):
        st.markdown("**New transaction**")
        description = st.text_input("Description")
        amount = st.number_input("Amount", min_value=0.0, step=1.0)
        day = st.date_input(
            "Date",
            value=min(max(today, period.start_date), period.end_date),
        )
        if st.form_submit_button("Add"):
            _build_transactions_use_case().add(
                period.id,
                Decimal(str(amount)),
                description,
                day,
            )
            get_usage_logger().info(f"Transaction added to {period.id}")
            st.rerun()


def _render_period_form(today: date) -> None:
    """Render the form used to create a period."""
    with st.sidebar.expander("New period"):
        name = st.text_input("Name", value=today.strftime("%B %Y"))
        start_date = st.date_input(
            "Start",
            value=date(today.year, today.month, 1),
        )
        end_date = st.date_input("End", value=today)
        percentage = st.slider("Investment %", 0, 100, 0)
        if st.button("Create period"):
            try:
                _create_period(name, start_date, end_date, percentage)
            except InvalidPeriodError as exc:
                st.warning(str(exc))
                return
            get_usage_logger().info(f"Period created: {name}")
            st.rerun()


def _render_item_list(
    title: str,
    items,
    key_prefix: str,
    on_remove,
) -> None:
    """Render labelled amounts, each with a remove button."""
    st.markdown(f"**{title}**")
    if not items:
        st.caption("Nothing here yet.")
        return
    for item in items:
        label_col, button_col = st.columns([4, 1])
        label_col.write(f"{item.name}: {_format_currency(item.amount)}")
        if button_col.button("Remove", key=f"{key_prefix}-{item.id}"):
            on_remove(item.id)
            st.rerun()


def _render_item_form(form_key: str, on_submit) -> None:
    """Render a name and amount form calling on_submit when sent."""
    with st.form(form_key, clear_on_submit=True):
        name = st.text_input("Name")
        amount = st.number_input("Amount", min_value=0.0, step=1.0)
        if st.form_submit_button("Add") and name.strip():
            on_submit(name, Decimal(str(amount)))
            st.rerun()


def _render_period_items(period: AccountingPeriod) -> None:
    """Render the income entries and fixed expenses of a period."""
    st.subheader("Income and fixed expenses")
    entries_col, expenses_col = st.columns(2)
    with entries_col:
        _render_item_list(
            "Income",
            period.entries,
            f"entry-{period.id}",
            lambda item_id: _remove_period_item(period.id, "entry", item_id),
        )
        _render_item_form(
            f"add-entry-{period.id}",
            lambda name, amount: _add_period_item(
                period.id, "entry", name, amount
            ),
        )
    with expenses_col:
        _render_item_list(
            "Fixed expenses",
            period.fixed_expenses,
            f"fixed-{period.id}",
            lambda item_id: _remove_period_item(
                period.id, "fixed_expense", item_id
            ),
        )
        _render_item_form(
            f"add-fixed-{period.id}",
            lambda name, amount: _add_period_item(
                period.id, "fixed_expense", name, amount
            ),
        )


def _render_period_settings(period: AccountingPeriod) -> None:
    """Render rename, investment share and deletion controls."""
    with st.sidebar.expander("Period settings"):
        with st.form(f"settings-{period.id}"):
            name = st.text_input("Name", value=period.name)
            percentage = st.slider(
                "Investment %",
                0,
                100,
                int(period.investment_percentage),
            )
            if st.form_submit_button("Save"):
                try:
                    _update_period_settings(period.id, name, percentage)
                except ValueError as exc:
                    st.warning(str(exc))
                    return
                get_usage_logger().info(f"Period updated: {period.id}")
                st.rerun()
        confirmed = st.checkbox(
            "Also delete its transactions",
            key=f"confirm-delete-{period.id}",
        )
        if st.button("Delete period", disabled=not confirmed):
            result = _delete_period(period.id)
            get_usage_logger().info(
                f"Period deleted: {result.period_id} "
                f"({result.deleted_transactions} transactions)"
            )
            st.rerun()


def _render_template_editor() -> None:
    """Render the default items copied into new periods."""
    template = _load_template()
    with st.sidebar.expander("Template"):
        _render_item_list(
            "Income",
            template.entries,
            "template-entry",
            lambda item_id: _remove_template_item("entry", item_id),
        )
        _render_item_form(
            "template-add-entry",
            lambda name, amount: _add_template_item("entry", name, amount),
        )
        _render_item_list(
            "Fixed expenses",
            template.fixed_expenses,
            "template-fixed",
            lambda item_id: _remove_template_item("fixed_expense", item_id),
        )
        _render_item_form(
            "template-add-fixed",
            lambda name, amount: _add_template_item(
                "fixed_expense", name, amount
            ),
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="MoneyFlow", layout="wide")
    st.title("MoneyFlow")

    today = date.today()
    periods = _fetch_periods()
    _render_period_form(today)
    _render_template_editor()
    if not periods:
        st.warning("No periods found. Create one from the sidebar.")
        return

    names = {period.id: period.name for period in periods}
    period_id = st.sidebar.selectbox(
        "Period",
        options=list(names),
        format_func=lambda key: names[key],
    )
    overview = _fetch_overview(period_id, today)
    transactions = _fetch_transactions(period_id)

    st.caption(
        f"{overview.period.start_date} to {overview.period.end_date}"
    )
    _render_summary(overview)
    _render_period_items(overview.period)
    _render_daily_chart(overview.period, transactions)
    _render_transactions(transactions)
    if overview.days_without_transactions:
        st.caption(
            "Days without transactions: "
            + ", ".join(overview.days_without_transactions)
        )
    _render_transaction_form(overview.period, today)
    _render_period_settings(overview.period)


if __name__ == "__main__":  # pragma: no cover
    main()
