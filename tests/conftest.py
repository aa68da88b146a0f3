"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from expensify_gateway.api.main import create_app
from expensify_gateway.api.dependencies import get_today
from expensify_gateway.infrastructure.database.models import Base
from expensify_gateway.infrastructure.database.session import get_db
from expensify_gateway.domain.models import Transaction, TransactionKind


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Day 10 of a 30-day month
TODAY = date(2024, 6, 10)


@pytest.fixture
def today() -> date:
    return TODAY


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
    """Create FastAPI test client with test database and a fixed clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)


def make_txn(
    amount: float,
    day: date,
    kind: TransactionKind = TransactionKind.EXPENSE,
    category: str = "Food",
    description: str = "Test",
) -> Transaction:
    return Transaction(
        transaction_id=f"{kind.value}_{day.isoformat()}_{amount}_{category}",
        kind=kind,
        description=description,
        amount=amount,
        date=day,
        category=category,
    )


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """A month of salary, rent and groceries, plus last month's spending"""
    transactions = [
        make_txn(40000, date(2024, 6, 1), kind=TransactionKind.INCOME, category="Salary"),
        make_txn(3000, date(2024, 6, 2), category="Rent"),
        make_txn(1200, date(2024, 6, 8), category="Groceries"),
        make_txn(800, date(2024, 6, 10), category="Groceries"),
        make_txn(7000, date(2024, 5, 28), category="Travel"),
    ]
    return transactions


@pytest.fixture
def txn():
    """Factory for ledger entries: txn(amount, day, kind=..., category=...)"""
    return make_txn
