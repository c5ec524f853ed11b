"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

EmployeeStatus = Literal["active", "inactive", "on-leave"]
PaymentMethod = Literal["cash", "bank", "card", "other"]
PurchaseUnit = Literal["kg", "g", "liter", "ml", "pcs", "dozen", "box", "pack", "bag"]


class ReadModel(BaseModel):
    """Response built from ORM rows or domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


# Budget tracker

class BudgetCapRequest(BaseModel):
    """Request body for PUT /v1/budget/cap"""

    budget_cap: float = Field(..., ge=0, description="Spending ceiling for the month")


class BudgetCapResponse(BaseModel):
    month: str
    budget_cap: float


class BudgetExpenseCreate(BaseModel):
    amount: float = Field(..., ge=0)
    expense_date: date
    category: str = Field(..., min_length=1)
    description: str = ""


class BudgetExpenseUpdate(BaseModel):
    amount: Optional[float] = Field(None, ge=0)
    expense_date: Optional[date] = None
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class BudgetExpenseResponse(ReadModel):
    id: str
    amount: float
    expense_date: date
    category: str
    description: str


class CategoryTotalSchema(ReadModel):
    category: str
    amount: float
    percentage: float


class DailyAmountSchema(ReadModel):
    day: date
    amount: float


class MonthlySummaryResponse(ReadModel):
    """Response for GET /v1/budget/summary"""

    month_start: date
    budget_cap: float
    total_amount: float
    remaining_budget: float
    category_breakdown: List[CategoryTotalSchema]
    daily_series: List[DailyAmountSchema]
    days_in_month: int
    days_elapsed: int
    days_remaining: int
    avg_daily_spend: float
    projected_total: float
    daily_allowance: float
    progress_percent: float


# Restaurant records

class EmployeeCreate(BaseModel):
    name: str = Field(..., min_length=1)
    designation: str = Field(..., min_length=1)
    salary_monthly: float = Field(..., ge=0)
    phone: Optional[str] = None
    email: Optional[str] = None
    joining_date: Optional[date] = None
    status: EmployeeStatus = "active"


class EmployeeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    designation: Optional[str] = Field(None, min_length=1)
    salary_monthly: Optional[float] = Field(None, ge=0)
    phone: Optional[str] = None
    email: Optional[str] = None
    joining_date: Optional[date] = None
    status: Optional[EmployeeStatus] = None


class EmployeeResponse(ReadModel):
    id: str
    name: str
    designation: str
    salary_monthly: float
    phone: Optional[str] = None
    email: Optional[str] = None
    joining_date: Optional[date] = None
    status: str
    created_at: datetime


class ExpenseCreate(BaseModel):
    category: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    expense_date: date
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class ExpenseUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    expense_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class ExpenseResponse(ReadModel):
    id: str
    category: str
    title: str
    amount: float
    expense_date: date
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime


class PurchaseCreate(BaseModel):
    supplier_name: Optional[str] = None
    item_name: str = Field(..., min_length=1)
    item_category: Optional[str] = None
    quantity: float = Field(..., ge=0)
    unit: PurchaseUnit
    unit_cost: float = Field(..., ge=0)
    purchase_date: date
    notes: Optional[str] = None


class PurchaseUpdate(BaseModel):
    supplier_name: Optional[str] = None
    item_name: Optional[str] = Field(None, min_length=1)
    item_category: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[PurchaseUnit] = None
    unit_cost: Optional[float] = Field(None, ge=0)
    purchase_date: Optional[date] = None
    notes: Optional[str] = None


class PurchaseResponse(ReadModel):
    id: str
    supplier_name: Optional[str] = None
    item_name: str
    item_category: Optional[str] = None
    quantity: float
    unit: str
    unit_cost: float
    total_cost: float
    purchase_date: date
    notes: Optional[str] = None
    created_at: datetime


class RevenueCreate(BaseModel):
    category: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    revenue_date: date
    payment_method: Optional[PaymentMethod] = None
    customer_name: Optional[str] = None
    table_number: Optional[str] = None
    order_number: Optional[str] = None
    notes: Optional[str] = None


class RevenueUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    revenue_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    customer_name: Optional[str] = None
    table_number: Optional[str] = None
    order_number: Optional[str] = None
    notes: Optional[str] = None


class RevenueResponse(ReadModel):
    id: str
    category: str
    description: str
    amount: float
    revenue_date: date
    payment_method: Optional[str] = None
    customer_name: Optional[str] = None
    table_number: Optional[str] = None
    order_number: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime


# Restaurant reports

class LedgerSummarySchema(ReadModel):
    total: float
    category_breakdown: List[CategoryTotalSchema]
    daily_series: List[DailyAmountSchema]


class RestaurantSummaryResponse(ReadModel):
    """Response for GET /v1/reports/summary"""

    month_start: date
    revenue: LedgerSummarySchema
    expenses: LedgerSummarySchema
    purchases: LedgerSummarySchema
    total_salaries: float
    net_profit: float
    profit_margin: float


class TransactionSchema(ReadModel):
    transaction_id: str
    kind: str
    amount: float
    occurred_at: date
    category: str
    description: str
    created_at: Optional[datetime] = None


class TrendPointSchema(ReadModel):
    month_start: date
    revenue: float
    expenses: float
    profit: float


class DashboardResponse(ReadModel):
    """Response for GET /v1/reports/dashboard"""

    summary: RestaurantSummaryResponse
    employee_count: int
    recent_transactions: List[TransactionSchema]
    monthly_trend: List[TrendPointSchema]
