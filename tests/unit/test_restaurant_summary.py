"""Unit tests for restaurant profit and loss, trend and dashboard"""

import pytest
from datetime import date, datetime
from finboard.domain.models import Employee, Transaction
from finboard.domain.aggregation import (
    build_dashboard,
    monthly_trend,
    recent_transactions,
    summarize_restaurant,
    total_active_salaries,
)

MARCH = date(2024, 3, 1)


def _txn(
    transaction_id: str,
    amount: float,
    occurred_at: date,
    category: str,
    kind: str,
    created_at: datetime | None = None,
) -> Transaction:
    return Transaction(
        transaction_id=transaction_id,
        amount=amount,
        occurred_at=occurred_at,
        category=category,
        kind=kind,
        created_at=created_at,
    )


def test_summarize_restaurant_profit_scenario(roster):
    """Test net profit and margin with active-only salaries"""
    revenues = [_txn("r1", 1000, date(2024, 3, 5), "Dine-in", "revenue")]
    expenses = [_txn("x1", 200, date(2024, 3, 6), "Rent", "expense")]
    purchases = [_txn("p1", 300, date(2024, 3, 7), "Seafood", "purchase")]

    summary = summarize_restaurant(expenses, purchases, revenues, roster, MARCH)

    assert summary.total_salaries == 250
    assert summary.revenue.total == 1000
    assert summary.expenses.total == 200
    assert summary.purchases.total == 300
    assert summary.net_profit == 250  # 1000 - (200 + 300 + 250)
    assert summary.profit_margin == pytest.approx(25)


def test_summarize_restaurant_no_revenue_margin_is_zero(roster):
    expenses = [_txn("x1", 80, date(2024, 3, 6), "Utilities", "expense")]

    summary = summarize_restaurant(expenses, [], [], roster, MARCH)

    assert summary.net_profit == -330
    assert summary.profit_margin == 0


def test_summarize_restaurant_filters_each_collection_by_month(roster):
    revenues = [
        _txn("r1", 400, date(2024, 3, 1), "Takeaway", "revenue"),
        _txn("r2", 600, date(2024, 3, 31), "Delivery", "revenue"),
        _txn("r3", 9999, date(2024, 4, 1), "Delivery", "revenue"),
    ]
    expenses = [_txn("x1", 50, date(2024, 2, 29), "Rent", "expense")]

    summary = summarize_restaurant(expenses, [], revenues, roster, MARCH)

    assert summary.revenue.total == 1000
    assert summary.expenses.total == 0
    assert [c.category for c in summary.revenue.category_breakdown] == ["Delivery", "Takeaway"]
    assert len(summary.revenue.daily_series) == 31
    assert summary.revenue.daily_series[30].amount == 600


def test_salaries_ignore_target_month(roster):
    """Test payroll reflects the current roster for any month"""
    past = summarize_restaurant([], [], [], roster, date(2020, 1, 1))
    current = summarize_restaurant([], [], [], roster, MARCH)

    assert past.total_salaries == current.total_salaries == 250


def test_total_active_salaries_excludes_on_leave():
    employees = [
        Employee("e1", "Amina", 100, "active"),
        Employee("e2", "Ravi", 70, "on-leave"),
        Employee("e3", "Lena", 30, "inactive"),
    ]

    assert total_active_salaries(employees) == 100
    assert total_active_salaries([]) == 0


def test_recent_transactions_orders_by_creation_time():
    expenses = [
        _txn(f"x{i}", 10, date(2024, 3, i + 1), "Rent", "expense", datetime(2024, 3, i + 1, 9)) for i in range(7)
    ]
    revenues = [_txn("r1", 500, date(2024, 3, 2), "Dine-in", "revenue", datetime(2024, 3, 20, 9))]
    purchases = [
        _txn("p1", 30, date(2024, 3, 3), "Dairy", "purchase", datetime(2024, 3, 3, 12)),
        _txn("p_old", 30, date(2024, 2, 3), "Dairy", "purchase", datetime(2024, 3, 21, 12)),  # other month
    ]

    recent = recent_transactions(expenses, revenues, purchases, MARCH)

    ids = [t.transaction_id for t in recent]
    assert ids[0] == "r1"
    assert "p_old" not in ids
    # Only the five latest expenses are considered
    assert {"x0", "x1"}.isdisjoint(ids)
    assert len(recent) == 7


def test_recent_transactions_respects_limit_and_missing_timestamps():
    expenses = [_txn(f"x{i}", 10, date(2024, 3, 1), "Rent", "expense") for i in range(5)]
    revenues = [_txn("r1", 10, date(2024, 3, 1), "Dine-in", "revenue", datetime(2024, 3, 1, 8))]

    recent = recent_transactions(expenses, revenues, [], MARCH, limit=3)

    assert len(recent) == 3
    assert recent[0].transaction_id == "r1"


def test_monthly_trend_covers_window_oldest_first(roster):
    revenues = [
        _txn("r1", 1000, date(2024, 3, 5), "Dine-in", "revenue"),
        _txn("r2", 800, date(2024, 1, 5), "Dine-in", "revenue"),
        _txn("r3", 700, date(2023, 12, 5), "Dine-in", "revenue"),
    ]
    purchases = [_txn("p1", 300, date(2024, 1, 7), "Seafood", "purchase")]

    trend = monthly_trend([], purchases, revenues, roster, MARCH, months=4)

    assert [p.month_start for p in trend] == [
        date(2023, 12, 1),
        date(2024, 1, 1),
        date(2024, 2, 1),
        date(2024, 3, 1),
    ]
    january = trend[1]
    assert january.revenue == 800
    assert january.expenses == 550  # purchases + salaries
    assert january.profit == 250
    assert all(p.revenue - p.expenses == pytest.approx(p.profit) for p in trend)


def test_build_dashboard(roster):
    revenues = [_txn("r1", 1000, date(2024, 3, 5), "Dine-in", "revenue", datetime(2024, 3, 5, 10))]
    expenses = [_txn("x1", 200, date(2024, 3, 6), "Rent", "expense", datetime(2024, 3, 6, 10))]
    purchases = [_txn("p1", 300, date(2024, 3, 7), "Seafood", "purchase", datetime(2024, 3, 7, 10))]

    dashboard = build_dashboard(expenses, purchases, revenues, roster, MARCH)

    assert dashboard.employee_count == 2
    assert dashboard.summary.net_profit == 250
    assert [t.transaction_id for t in dashboard.recent_transactions] == ["p1", "x1", "r1"]
    assert len(dashboard.monthly_trend) == 6
    assert dashboard.monthly_trend[-1].month_start == MARCH
    assert dashboard.monthly_trend[-1].profit == 250
