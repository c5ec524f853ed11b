"""Personal budget tracker: monthly cap, expenses and summary"""

import logging
import time
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from finboard.api.dependencies import clamp_to_current_month, get_request_id, get_target_month, get_user_id
from finboard.api.v1.records import build_crud_router
from finboard.api.v1.schemas import (
    BudgetCapRequest,
    BudgetCapResponse,
    BudgetExpenseCreate,
    BudgetExpenseResponse,
    BudgetExpenseUpdate,
    MonthlySummaryResponse,
)
from finboard.domain.aggregation import calculate_financials
from finboard.infrastructure.database.repositories import (
    BudgetExpenseRepository,
    BudgetRepository,
    budget_expense_to_transaction,
)
from finboard.infrastructure.database.session import get_db
from finboard.infrastructure.observability.logging import log_mutation, log_summary
from finboard.infrastructure.observability.metrics import record_mutation, record_summary
from finboard.utils.date_utils import month_id, next_month

router = APIRouter()
router.include_router(
    build_crud_router(
        "/budget/expenses",
        BudgetExpenseRepository,
        BudgetExpenseCreate,
        BudgetExpenseUpdate,
        BudgetExpenseResponse,
    )
)


def _budget_month(target_month: date = Depends(get_target_month)) -> date:
    return clamp_to_current_month(target_month)


@router.get("/budget/cap", response_model=BudgetCapResponse)
def get_budget_cap(
    target_month: date = Depends(_budget_month),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    month = month_id(target_month)
    return BudgetCapResponse(month=month, budget_cap=BudgetRepository(db).get_cap(user_id, month))


@router.put("/budget/cap", response_model=BudgetCapResponse)
def set_budget_cap(
    request_body: BudgetCapRequest,
    request: Request,
    target_month: date = Depends(_budget_month),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """Set the spending ceiling for a month (current month by default)"""
    month = month_id(target_month)
    try:
        period = BudgetRepository(db).set_cap(user_id, month, request_body.budget_cap)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to set budget cap: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_mutation("budget_period", "update")
    log_mutation(get_request_id(request), user_id, "budget_period", "update", month)
    return BudgetCapResponse(month=month, budget_cap=period.budget_cap)


@router.get("/budget/summary", response_model=MonthlySummaryResponse)
def get_budget_summary(
    request: Request,
    target_month: date = Depends(_budget_month),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Spending summary for a month.

    Returns:
        Totals, category breakdown, daily series, projection and allowance
    """
    start_time = time.time()
    month = month_id(target_month)

    budget_cap = BudgetRepository(db).get_cap(user_id, month)
    rows = BudgetExpenseRepository(db).list(user_id, start=target_month, end=next_month(target_month))
    summary = calculate_financials(
        [budget_expense_to_transaction(r) for r in rows],
        budget_cap,
        target_month,
    )

    duration_ms = (time.time() - start_time) * 1000
    record_summary("budget")
    log_summary(get_request_id(request), user_id, "budget", month, summary.total_amount, duration_ms)

    return MonthlySummaryResponse.model_validate(summary)
