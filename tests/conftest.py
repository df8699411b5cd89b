"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from scoring_gateway.api.main import create_app
from scoring_gateway.infrastructure.database.models import Base
from scoring_gateway.infrastructure.database.session import get_db
from scoring_gateway.domain.models import Transaction
from scoring_gateway.state import StateStore


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
def store() -> StateStore:
    return StateStore()


@pytest.fixture
def app(db: Session, store: StateStore):
    """FastAPI app wired to the test database and a fresh state store"""
    app = create_app(store)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client with test database"""
    return TestClient(app)


def _make_transaction(
    amount: float = 0.0,
    debit_credit: str = "CREDIT",
    balance_after: float = 0.0,
    status: str = "SUCCESSFUL",
    id: str = "tx",
) -> Transaction:
    return Transaction(
        id=id,
        amount=amount,
        debit_credit=debit_credit,
        balance_after=balance_after,
        status=status,
        channel="ATM",
        transaction_type="TRF",
        narration="Test",
        reference="ref",
        transaction_time="2023-01-01T00:00:00",
        value_date="2023-01-01",
    )


@pytest.fixture
def make_transaction():
    """Factory for transactions with test defaults for the descriptive fields"""
    return _make_transaction


@pytest.fixture
def mixed_transactions() -> list[Transaction]:
    """Two successful transactions (credit + debit) and one failure"""
    return [
        _make_transaction(5_000.0, "CREDIT", 5_000.0, id="1"),
        _make_transaction(2_000.0, "DEBIT", 3_000.0, id="2"),
        _make_transaction(100.0, "DEBIT", 3_000.0, status="FAILED", id="3"),
    ]
