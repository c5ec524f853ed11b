"""GET /v1/reports/* - Restaurant profit and loss views"""

import time
from datetime import date
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from finboard.api.dependencies import get_request_id, get_target_month, get_user_id
from finboard.api.v1.schemas import DashboardResponse, RestaurantSummaryResponse
from finboard.config import settings
from finboard.domain.aggregation import build_dashboard, summarize_restaurant
from finboard.infrastructure.database.repositories import (
    EmployeeRepository,
    ExpenseRepository,
    PurchaseRepository,
    RevenueRepository,
    employee_to_domain,
    expense_to_transaction,
    purchase_to_transaction,
    revenue_to_transaction,
)
from finboard.infrastructure.database.session import get_db
from finboard.infrastructure.observability.logging import log_summary
from finboard.infrastructure.observability.metrics import record_summary
from finboard.utils.date_utils import month_id, next_month, shift_months

router = APIRouter()


def _load_snapshot(db: Session, user_id: str, start: date, end: date):
    """Domain snapshot of the user's records dated in [start, end) plus the full roster"""
    expenses = [expense_to_transaction(r) for r in ExpenseRepository(db).list(user_id, start, end)]
    purchases = [purchase_to_transaction(r) for r in PurchaseRepository(db).list(user_id, start, end)]
    revenues = [revenue_to_transaction(r) for r in RevenueRepository(db).list(user_id, start, end)]
    employees = [employee_to_domain(r) for r in EmployeeRepository(db).list(user_id)]
    return expenses, purchases, revenues, employees


@router.get("/reports/summary", response_model=RestaurantSummaryResponse)
def get_restaurant_summary(
    request: Request,
    target_month: date = Depends(get_target_month),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Monthly profit and loss.

    Salaries always reflect the current active roster, whatever the month.
    """
    start_time = time.time()
    expenses, purchases, revenues, employees = _load_snapshot(
        db, user_id, target_month, next_month(target_month)
    )
    summary = summarize_restaurant(expenses, purchases, revenues, employees, target_month)

    duration_ms = (time.time() - start_time) * 1000
    record_summary("restaurant")
    log_summary(get_request_id(request), user_id, "restaurant", month_id(target_month), summary.net_profit, duration_ms)

    return RestaurantSummaryResponse.model_validate(summary)


@router.get("/reports/dashboard", response_model=DashboardResponse)
def get_dashboard(
    request: Request,
    target_month: date = Depends(get_target_month),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """Monthly summary with headcount, recent activity and multi-month trend"""
    start_time = time.time()
    window_start = shift_months(target_month, -(settings.trend_months - 1))
    expenses, purchases, revenues, employees = _load_snapshot(
        db, user_id, window_start, next_month(target_month)
    )
    dashboard = build_dashboard(
        expenses,
        purchases,
        revenues,
        employees,
        target_month,
        trend_months=settings.trend_months,
        recent_limit=settings.recent_transactions_limit,
    )

    duration_ms = (time.time() - start_time) * 1000
    record_summary("dashboard")
    log_summary(
        get_request_id(request), user_id, "dashboard", month_id(target_month), dashboard.summary.net_profit, duration_ms
    )

    return DashboardResponse.model_validate(dashboard)
