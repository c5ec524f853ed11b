"""Data access layer for budget and restaurant records"""

from datetime import date
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from finboard.infrastructure.database import models
from finboard.domain import models as domain
from finboard.domain.exceptions import RecordNotFoundError

DEFAULT_PURCHASE_CATEGORY = "Other"


class RecordRepository:
    """
    CRUD for one user-scoped record type.

    Subclasses set `model`, `record_type` and `date_column` (None for
    undated records). Writes flush only; the caller commits.
    """

    model: Any = None
    record_type: str = ""
    date_column: Optional[str] = None

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, fields: Dict[str, Any]) -> Any:
        record = self.model(user_id=user_id, **self._prepare(fields))
        self.db.add(record)
        self.db.flush()  # Assign ID without committing
        return record

    def get(self, user_id: str, record_id: str) -> Any:
        """
        Fetch a single record owned by user_id.

        Raises:
            RecordNotFoundError: If no such record exists for this user
        """
        record = (
            self.db.query(self.model)
            .filter(self.model.id == record_id, self.model.user_id == user_id)
            .first()
        )
        if record is None:
            raise RecordNotFoundError(self.record_type, record_id)
        return record

    def update(self, user_id: str, record_id: str, changes: Dict[str, Any]) -> Any:
        """Apply a partial update; fields absent from `changes` are left alone"""
        record = self.get(user_id, record_id)
        for name, value in changes.items():
            setattr(record, name, value)
        self._after_update(record)
        self.db.flush()
        return record

    def delete(self, user_id: str, record_id: str) -> None:
        self.db.delete(self.get(user_id, record_id))
        self.db.flush()

    def list(self, user_id: str, start: Optional[date] = None, end: Optional[date] = None) -> List[Any]:
        """List records newest first, optionally limited to dates in [start, end)"""
        query = self.db.query(self.model).filter(self.model.user_id == user_id)
        if self.date_column is None:
            return query.order_by(self.model.created_at.desc()).all()

        column = getattr(self.model, self.date_column)
        if start is not None:
            query = query.filter(column >= start)
        if end is not None:
            query = query.filter(column < end)
        return query.order_by(column.desc(), self.model.created_at.desc()).all()

    def _prepare(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return dict(fields)

    def _after_update(self, record: Any) -> None:
        pass


class BudgetExpenseRepository(RecordRepository):
    model = models.BudgetExpense
    record_type = "budget_expense"
    date_column = "expense_date"


class EmployeeRepository(RecordRepository):
    model = models.Employee
    record_type = "employee"


class ExpenseRepository(RecordRepository):
    model = models.Expense
    record_type = "expense"
    date_column = "expense_date"


class PurchaseRepository(RecordRepository):
    model = models.Purchase
    record_type = "purchase"
    date_column = "purchase_date"

    def _prepare(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        prepared = dict(fields)
        prepared["total_cost"] = prepared["quantity"] * prepared["unit_cost"]
        return prepared

    def _after_update(self, record: models.Purchase) -> None:
        record.total_cost = record.quantity * record.unit_cost


class RevenueRepository(RecordRepository):
    model = models.Revenue
    record_type = "revenue"
    date_column = "revenue_date"


class BudgetRepository:
    """Repository for per-month budget caps"""

    def __init__(self, db: Session):
        self.db = db

    def get_cap(self, user_id: str, month_id: str) -> float:
        """Cap for the month, 0 when never set"""
        period = self._get_period(user_id, month_id)
        return period.budget_cap if period else 0.0

    def set_cap(self, user_id: str, month_id: str, budget_cap: float) -> models.BudgetPeriod:
        period = self._get_period(user_id, month_id)
        if period is None:
            period = models.BudgetPeriod(user_id=user_id, month_id=month_id)
            self.db.add(period)
        period.budget_cap = budget_cap
        self.db.flush()
        return period

    def _get_period(self, user_id: str, month_id: str) -> Optional[models.BudgetPeriod]:
        return (
            self.db.query(models.BudgetPeriod)
            .filter(models.BudgetPeriod.user_id == user_id, models.BudgetPeriod.month_id == month_id)
            .first()
        )


# Row -> domain snapshot converters

def budget_expense_to_transaction(row: models.BudgetExpense) -> domain.Transaction:
    return domain.Transaction(
        transaction_id=row.id,
        amount=row.amount,
        occurred_at=row.expense_date,
        category=row.category,
        description=row.description,
        kind="expense",
        created_at=row.created_at,
    )


def expense_to_transaction(row: models.Expense) -> domain.Transaction:
    return domain.Transaction(
        transaction_id=row.id,
        amount=row.amount,
        occurred_at=row.expense_date,
        category=row.category,
        description=row.title,
        kind="expense",
        created_at=row.created_at,
    )


def purchase_to_transaction(row: models.Purchase) -> domain.Transaction:
    return domain.Transaction(
        transaction_id=row.id,
        amount=row.total_cost,
        occurred_at=row.purchase_date,
        category=row.item_category or DEFAULT_PURCHASE_CATEGORY,
        description=row.item_name,
        kind="purchase",
        created_at=row.created_at,
    )


def revenue_to_transaction(row: models.Revenue) -> domain.Transaction:
    return domain.Transaction(
        transaction_id=row.id,
        amount=row.amount,
        occurred_at=row.revenue_date,
        category=row.category,
        description=row.description,
        kind="revenue",
        created_at=row.created_at,
    )


def employee_to_domain(row: models.Employee) -> domain.Employee:
    return domain.Employee(
        employee_id=row.id,
        name=row.name,
        salary_monthly=row.salary_monthly,
        status=row.status,
    )
