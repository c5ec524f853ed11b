"""Restaurant records: employees, operating expenses, purchases and revenue"""

from fastapi import APIRouter

from finboard.api.v1.records import build_crud_router
from finboard.api.v1.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    ExpenseCreate,
    ExpenseResponse,
    ExpenseUpdate,
    PurchaseCreate,
    PurchaseResponse,
    PurchaseUpdate,
    RevenueCreate,
    RevenueResponse,
    RevenueUpdate,
)
from finboard.infrastructure.database.repositories import (
    EmployeeRepository,
    ExpenseRepository,
    PurchaseRepository,
    RevenueRepository,
)

employees_router = build_crud_router(
    "/employees", EmployeeRepository, EmployeeCreate, EmployeeUpdate, EmployeeResponse
)
expenses_router = build_crud_router(
    "/expenses", ExpenseRepository, ExpenseCreate, ExpenseUpdate, ExpenseResponse
)
purchases_router = build_crud_router(
    "/purchases", PurchaseRepository, PurchaseCreate, PurchaseUpdate, PurchaseResponse
)
revenues_router = build_crud_router(
    "/revenues", RevenueRepository, RevenueCreate, RevenueUpdate, RevenueResponse
)

router = APIRouter()
for sub_router in (employees_router, expenses_router, purchases_router, revenues_router):
    router.include_router(sub_router)
