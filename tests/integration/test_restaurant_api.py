"""Integration tests for restaurant records and reports"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from finboard.utils.date_utils import days_in_month, month_id, shift_months


@pytest.fixture
def seeded(client: TestClient, user_headers: dict, this_month: date) -> None:
    """Revenue 1000, expenses 200, purchases 300, payroll 250 active + 500 inactive"""
    for name, salary, status in [("Amina", 100, "active"), ("Ravi", 150, "active"), ("Lena", 500, "inactive")]:
        response = client.post(
            "/v1/employees",
            json={"name": name, "designation": "Chef", "salary_monthly": salary, "status": status},
            headers=user_headers,
        )
        assert response.status_code == 201

    response = client.post(
        "/v1/revenues",
        json={"category": "Dine-in", "description": "Dinner service", "amount": 1000, "revenue_date": this_month.isoformat()},
        headers=user_headers,
    )
    assert response.status_code == 201

    response = client.post(
        "/v1/expenses",
        json={"category": "Rent", "title": "Shop rent", "amount": 200, "expense_date": this_month.isoformat(), "payment_method": "bank"},
        headers=user_headers,
    )
    assert response.status_code == 201

    response = client.post(
        "/v1/purchases",
        json={"item_name": "Prawns", "quantity": 3, "unit": "kg", "unit_cost": 100, "purchase_date": this_month.isoformat()},
        headers=user_headers,
    )
    assert response.status_code == 201


def test_restaurant_summary(client: TestClient, user_headers: dict, seeded, this_month: date):
    """Test GET /v1/reports/summary profit and loss"""
    response = client.get("/v1/reports/summary", params={"month": month_id(this_month)}, headers=user_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["revenue"]["total"] == 1000
    assert data["expenses"]["total"] == 200
    assert data["purchases"]["total"] == 300
    assert data["total_salaries"] == 250
    assert data["net_profit"] == 250
    assert data["profit_margin"] == pytest.approx(25)
    # Purchases without an item category are grouped under Other
    assert data["purchases"]["category_breakdown"] == [{"category": "Other", "amount": 300, "percentage": 100}]
    assert len(data["expenses"]["daily_series"]) == days_in_month(this_month)


def test_restaurant_summary_other_month_keeps_payroll(client: TestClient, user_headers: dict, seeded, this_month: date):
    previous = shift_months(this_month, -1)

    response = client.get("/v1/reports/summary", params={"month": month_id(previous)}, headers=user_headers)

    data = response.json()
    assert data["revenue"]["total"] == 0
    assert data["total_salaries"] == 250
    assert data["net_profit"] == -250
    assert data["profit_margin"] == 0


def test_dashboard(client: TestClient, user_headers: dict, seeded, this_month: date):
    """Test GET /v1/reports/dashboard"""
    response = client.get("/v1/reports/dashboard", headers=user_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["employee_count"] == 2
    assert data["summary"]["net_profit"] == 250
    assert {t["kind"] for t in data["recent_transactions"]} == {"revenue", "expense", "purchase"}
    assert len(data["monthly_trend"]) == 6
    assert data["monthly_trend"][-1]["month_start"] == this_month.isoformat()
    assert data["monthly_trend"][-1]["revenue"] == 1000


def test_purchase_total_cost_recomputed_on_update(client: TestClient, user_headers: dict, this_month: date):
    response = client.post(
        "/v1/purchases",
        json={
            "item_name": "Milk",
            "item_category": "Dairy",
            "quantity": 4,
            "unit": "liter",
            "unit_cost": 2.5,
            "purchase_date": this_month.isoformat(),
        },
        headers=user_headers,
    )
    purchase = response.json()
    assert purchase["total_cost"] == 10

    response = client.patch(f"/v1/purchases/{purchase['id']}", json={"quantity": 6}, headers=user_headers)

    assert response.status_code == 200
    assert response.json()["total_cost"] == 15


def test_employee_status_change_updates_payroll(client: TestClient, user_headers: dict, seeded):
    employees = client.get("/v1/employees", headers=user_headers).json()
    lena = next(e for e in employees if e["name"] == "Lena")

    response = client.patch(f"/v1/employees/{lena['id']}", json={"status": "active"}, headers=user_headers)
    assert response.status_code == 200

    summary = client.get("/v1/reports/summary", headers=user_headers).json()
    assert summary["total_salaries"] == 750


def test_revenue_crud_and_not_found(client: TestClient, user_headers: dict, this_month: date):
    response = client.post(
        "/v1/revenues",
        json={"category": "Catering", "description": "Wedding", "amount": 2500, "revenue_date": this_month.isoformat()},
        headers=user_headers,
    )
    revenue_id = response.json()["id"]

    assert client.get(f"/v1/revenues/{revenue_id}", headers=user_headers).json()["amount"] == 2500
    assert client.delete(f"/v1/revenues/{revenue_id}", headers=user_headers).status_code == 204
    assert client.delete(f"/v1/revenues/{revenue_id}", headers=user_headers).status_code == 404
    assert client.patch("/v1/expenses/missing", json={"amount": 1}, headers=user_headers).status_code == 404


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/v1/employees", {"name": "Sam", "designation": "Waiter", "salary_monthly": 100, "status": "retired"}),
        ("/v1/expenses", {"category": "", "title": "x", "amount": 1, "expense_date": "2024-03-01"}),
        ("/v1/purchases", {"item_name": "Rice", "quantity": 1, "unit": "tonne", "unit_cost": 1, "purchase_date": "2024-03-01"}),
        ("/v1/revenues", {"category": "Dine-in", "description": "x", "amount": -10, "revenue_date": "2024-03-01"}),
    ],
)
def test_invalid_records_rejected(client: TestClient, user_headers: dict, path: str, payload: dict):
    response = client.post(path, json=payload, headers=user_headers)
    assert response.status_code == 422
