"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finboard.api.main import create_app
from finboard.infrastructure.database.models import Base
from finboard.infrastructure.database.session import get_db
from finboard.domain.models import Employee, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def user_headers() -> dict:
    return {"X-User-ID": "user_1"}


def make_transaction(
    transaction_id: str,
    amount: float,
    occurred_at: date,
    category: str = "Food",
    kind: str = "expense",
) -> Transaction:
    return Transaction(
        transaction_id=transaction_id,
        amount=amount,
        occurred_at=occurred_at,
        category=category,
        description=f"{category} {transaction_id}",
        kind=kind,
    )


@pytest.fixture
def march_expenses() -> list[Transaction]:
    """Budget scenario: two Food expenses on the 1st, Transport on the 15th"""
    return [
        make_transaction("1", 100, date(2024, 3, 1), "Food"),
        make_transaction("2", 50, date(2024, 3, 1), "Food"),
        make_transaction("3", 30, date(2024, 3, 15), "Transport"),
    ]


@pytest.fixture
def roster() -> list[Employee]:
    return [
        Employee(employee_id="e1", name="Amina", salary_monthly=100, status="active"),
        Employee(employee_id="e2", name="Ravi", salary_monthly=150, status="active"),
        Employee(employee_id="e3", name="Lena", salary_monthly=500, status="inactive"),
    ]


@pytest.fixture
def this_month() -> date:
    return date.today().replace(day=1)
