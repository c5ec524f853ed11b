"""Monthly aggregation engine - core business logic for budget and restaurant dashboards"""

from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence

from finboard.domain.models import (
    CategoryTotal,
    DailyAmount,
    DashboardKPIs,
    Employee,
    LedgerSummary,
    MonthlySummary,
    RestaurantSummary,
    Transaction,
    TrendPoint,
)
from finboard.utils.date_utils import (
    days_in_month,
    generate_date_range,
    month_end,
    month_start,
    shift_months,
)

ACTIVE_STATUS = "active"


def filter_to_month(transactions: Iterable[Transaction], target_month: date) -> List[Transaction]:
    """Keep transactions whose date falls in target_month's year and month"""
    return [
        t for t in transactions
        if t.occurred_at.year == target_month.year and t.occurred_at.month == target_month.month
    ]


def _total(transactions: Iterable[Transaction]) -> float:
    return sum((t.amount for t in transactions), 0.0)


def category_breakdown(transactions: Sequence[Transaction]) -> List[CategoryTotal]:
    """
    Group by exact category label, largest first.

    Categories are free text: a label seen for the first time simply becomes
    a new group. Equal amounts keep first-seen order.
    """
    total = _total(transactions)
    totals: Dict[str, float] = {}
    for t in transactions:
        totals[t.category] = totals.get(t.category, 0.0) + t.amount

    breakdown = [
        CategoryTotal(
            category=category,
            amount=amount,
            percentage=(amount / total) * 100 if total > 0 else 0.0,
        )
        for category, amount in totals.items()
    ]
    return sorted(breakdown, key=lambda c: c.amount, reverse=True)


def daily_series(transactions: Iterable[Transaction], target_month: date) -> List[DailyAmount]:
    """One zero-filled entry per calendar day of target_month, in day order"""
    start = month_start(target_month)
    by_day: Dict[date, float] = {}
    for t in transactions:
        by_day[t.occurred_at] = by_day.get(t.occurred_at, 0.0) + t.amount

    return [
        DailyAmount(day=day, amount=by_day.get(day, 0.0))
        for day in generate_date_range(start, month_end(start))
    ]


def days_elapsed(target_month: date, today: date) -> int:
    """
    Days of target_month that have passed as of today.

    - Current month: today's day of month
    - Past month: every day of the month
    - Future month: 0
    """
    selected = month_start(target_month)
    current = month_start(today)
    if selected == current:
        return today.day
    elif selected < current:
        return days_in_month(selected)
    else:
        return 0


def summarize_ledger(transactions: Iterable[Transaction], target_month: date) -> LedgerSummary:
    """Total, category breakdown and daily series for one collection"""
    relevant = filter_to_month(transactions, target_month)
    return LedgerSummary(
        total=_total(relevant),
        category_breakdown=category_breakdown(relevant),
        daily_series=daily_series(relevant, target_month),
    )


def calculate_financials(
    transactions: Iterable[Transaction],
    budget_cap: float,
    target_month: date,
    today: Optional[date] = None,
) -> MonthlySummary:
    """
    Main entry point for the budget tracker: derive a month's spending summary.

    Only the year and month of target_month matter. `today` decides how much of
    the month has elapsed and defaults to the current date. Degenerate inputs
    (no transactions, zero cap, future month) yield zeros instead of errors.
    """
    if today is None:
        today = date.today()

    selected = month_start(target_month)
    ledger = summarize_ledger(transactions, selected)
    total = ledger.total

    month_days = days_in_month(selected)
    elapsed = days_elapsed(selected, today)
    remaining_days = month_days - elapsed

    avg_daily_spend = total / elapsed if elapsed > 0 else 0.0
    remaining_budget = budget_cap - total  # may go negative
    daily_allowance = (
        remaining_budget / remaining_days
        if remaining_days > 0 and remaining_budget > 0
        else 0.0
    )
    # Not clamped to 100; callers clamp for display
    progress = (total / budget_cap) * 100 if budget_cap > 0 else 0.0

    return MonthlySummary(
        month_start=selected,
        budget_cap=budget_cap,
        total_amount=total,
        remaining_budget=remaining_budget,
        category_breakdown=ledger.category_breakdown,
        daily_series=ledger.daily_series,
        days_in_month=month_days,
        days_elapsed=elapsed,
        days_remaining=remaining_days,
        avg_daily_spend=avg_daily_spend,
        projected_total=avg_daily_spend * month_days,
        daily_allowance=daily_allowance,
        progress_percent=progress,
    )


def total_active_salaries(employees: Iterable[Employee]) -> float:
    """Monthly payroll of the current roster; not tied to any month"""
    return sum((e.salary_monthly for e in employees if e.status == ACTIVE_STATUS), 0.0)


def summarize_restaurant(
    expenses: Sequence[Transaction],
    purchases: Sequence[Transaction],
    revenues: Sequence[Transaction],
    employees: Sequence[Employee],
    target_month: date,
) -> RestaurantSummary:
    """
    Profit and loss for a month.

    net_profit = revenue - (expenses + purchases + active salaries)
    profit_margin = net_profit / revenue * 100, or 0 without revenue
    """
    selected = month_start(target_month)
    revenue = summarize_ledger(revenues, selected)
    expense = summarize_ledger(expenses, selected)
    purchase = summarize_ledger(purchases, selected)
    salaries = total_active_salaries(employees)

    net_profit = revenue.total - (expense.total + purchase.total + salaries)
    profit_margin = (net_profit / revenue.total) * 100 if revenue.total > 0 else 0.0

    return RestaurantSummary(
        month_start=selected,
        revenue=revenue,
        expenses=expense,
        purchases=purchase,
        total_salaries=salaries,
        net_profit=net_profit,
        profit_margin=profit_margin,
    )


def _newest_first(transactions: Iterable[Transaction]) -> List[Transaction]:
    return sorted(transactions, key=lambda t: t.occurred_at, reverse=True)


def recent_transactions(
    expenses: Sequence[Transaction],
    revenues: Sequence[Transaction],
    purchases: Sequence[Transaction],
    target_month: date,
    per_kind: int = 5,
    limit: int = 10,
) -> List[Transaction]:
    """Latest entries of the month across all three collections, newest recorded first"""
    candidates: List[Transaction] = []
    for collection in (expenses, revenues, purchases):
        candidates.extend(_newest_first(filter_to_month(collection, target_month))[:per_kind])

    # Records without a creation time sort last
    candidates.sort(
        key=lambda t: (t.created_at is not None, t.created_at or datetime.min),
        reverse=True,
    )
    return candidates[:limit]


def monthly_trend(
    expenses: Sequence[Transaction],
    purchases: Sequence[Transaction],
    revenues: Sequence[Transaction],
    employees: Sequence[Employee],
    target_month: date,
    months: int = 6,
) -> List[TrendPoint]:
    """
    Revenue, total outgoings and profit for the `months` months ending at
    target_month, oldest first. Outgoings include the current payroll.
    """
    points = []
    for offset in range(months - 1, -1, -1):
        summary = summarize_restaurant(
            expenses, purchases, revenues, employees, shift_months(target_month, -offset)
        )
        outgoings = summary.expenses.total + summary.purchases.total + summary.total_salaries
        points.append(
            TrendPoint(
                month_start=summary.month_start,
                revenue=summary.revenue.total,
                expenses=outgoings,
                profit=summary.net_profit,
            )
        )
    return points


def build_dashboard(
    expenses: Sequence[Transaction],
    purchases: Sequence[Transaction],
    revenues: Sequence[Transaction],
    employees: Sequence[Employee],
    target_month: date,
    trend_months: int = 6,
    recent_limit: int = 10,
) -> DashboardKPIs:
    """Month summary plus headcount, recent activity and trend"""
    return DashboardKPIs(
        summary=summarize_restaurant(expenses, purchases, revenues, employees, target_month),
        employee_count=sum(1 for e in employees if e.status == ACTIVE_STATUS),
        recent_transactions=recent_transactions(
            expenses, revenues, purchases, target_month, limit=recent_limit
        ),
        monthly_trend=monthly_trend(
            expenses, purchases, revenues, employees, target_month, months=trend_months
        ),
    )
