"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional


@dataclass(frozen=True)
class Transaction:
    """Dated, categorized money movement (expense, revenue line or purchase)"""

    transaction_id: str
    amount: float
    occurred_at: date
    category: str  # free text, grouped by exact match
    description: str = ""
    kind: str = "expense"  # "expense", "revenue" or "purchase"
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Employee:
    """Roster entry; only active employees are paid"""

    employee_id: str
    name: str
    salary_monthly: float
    status: str  # "active", "inactive" or "on-leave"


@dataclass
class CategoryTotal:
    category: str
    amount: float
    percentage: float


@dataclass
class DailyAmount:
    day: date
    amount: float


@dataclass
class LedgerSummary:
    """Totals for one transaction collection within a month"""

    total: float
    category_breakdown: List[CategoryTotal]
    daily_series: List[DailyAmount]


@dataclass
class MonthlySummary:
    """Budget tracker view of a month"""

    month_start: date
    budget_cap: float
    total_amount: float
    remaining_budget: float
    category_breakdown: List[CategoryTotal]
    daily_series: List[DailyAmount]
    days_in_month: int
    days_elapsed: int
    days_remaining: int
    avg_daily_spend: float
    projected_total: float
    daily_allowance: float
    progress_percent: float


@dataclass
class RestaurantSummary:
    """Restaurant profit and loss for a month"""

    month_start: date
    revenue: LedgerSummary
    expenses: LedgerSummary
    purchases: LedgerSummary
    total_salaries: float
    net_profit: float
    profit_margin: float


@dataclass
class TrendPoint:
    month_start: date
    revenue: float
    expenses: float
    profit: float


@dataclass
class DashboardKPIs:
    """Restaurant dashboard: month summary plus activity and trend"""

    summary: RestaurantSummary
    employee_count: int
    recent_transactions: List[Transaction] = field(default_factory=list)
    monthly_trend: List[TrendPoint] = field(default_factory=list)
