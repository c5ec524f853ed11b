"""SQLAlchemy ORM models for budget and restaurant records"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, DateTime, Date, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class BudgetPeriod(TimestampMixin, Base):
    """Spending cap a user set for one month"""

    __tablename__ = "budget_period"
    __table_args__ = (UniqueConstraint("user_id", "month_id", name="uq_budget_period_user_month"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, index=True)
    month_id = Column(String(7), nullable=False)  # YYYY-MM
    budget_cap = Column(Float, nullable=False, default=0.0)


class BudgetExpense(TimestampMixin, Base):
    """Personal expense tracked against a monthly budget"""

    __tablename__ = "budget_expense"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Float, nullable=False)
    expense_date = Column(Date, nullable=False, index=True)
    category = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")


class Employee(TimestampMixin, Base):
    """Restaurant staff member"""

    __tablename__ = "employee"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    designation = Column(Text, nullable=False)
    salary_monthly = Column(Float, nullable=False)
    phone = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    joining_date = Column(Date, nullable=True)
    status = Column(String(16), nullable=False, default="active")


class Expense(TimestampMixin, Base):
    """Restaurant operating expense"""

    __tablename__ = "expense"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, index=True)
    category = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    expense_date = Column(Date, nullable=False, index=True)
    payment_method = Column(String(16), nullable=True)
    notes = Column(Text, nullable=True)


class Purchase(TimestampMixin, Base):
    """Inventory purchase; total_cost = quantity * unit_cost"""

    __tablename__ = "purchase"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, index=True)
    supplier_name = Column(Text, nullable=True)
    item_name = Column(Text, nullable=False)
    item_category = Column(Text, nullable=True)
    quantity = Column(Float, nullable=False)
    unit = Column(String(16), nullable=False)
    unit_cost = Column(Float, nullable=False)
    total_cost = Column(Float, nullable=False)
    purchase_date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)


class Revenue(TimestampMixin, Base):
    """Restaurant earnings entry"""

    __tablename__ = "revenue"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(Text, nullable=False, index=True)
    category = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    revenue_date = Column(Date, nullable=False, index=True)
    payment_method = Column(String(16), nullable=True)
    customer_name = Column(Text, nullable=True)
    table_number = Column(Text, nullable=True)
    order_number = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
