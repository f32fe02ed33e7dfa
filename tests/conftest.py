"""Pytest fixtures for testing"""

import os

# Must be set before rentledger.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from datetime import date
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from rentledger.api.main import create_app
from rentledger.infrastructure.database.models import Base
from rentledger.infrastructure.database.session import get_db
from rentledger.domain.models import Payment


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


def make_payment(
    id=1,
    due_date=date(2024, 1, 1),
    paid_date=None,
    verified=False,
    amount="1200.00",
    property_id=1,
    status="pending",
) -> Payment:
    """Payment with sensible defaults for tests"""
    return Payment(
        id=id,
        amount=Decimal(amount),
        due_date=due_date,
        paid_date=paid_date,
        verified=verified,
        status=status,
        property_id=property_id,
    )


@pytest.fixture
def sample_payments() -> list[Payment]:
    """Six months of history: on time and verified except one awaiting verification, plus one upcoming"""
    return [
        make_payment(1, date(2024, 1, 1), date(2023, 12, 30), True, status="paid"),
        make_payment(2, date(2024, 2, 1), date(2024, 2, 1), True, status="paid"),
        make_payment(3, date(2024, 3, 1), date(2024, 3, 4), True, status="paid"),
        make_payment(4, date(2024, 4, 1), date(2024, 4, 1), True, status="paid"),
        make_payment(5, date(2024, 5, 1), date(2024, 5, 2), False, status="paid"),
        make_payment(6, date(2024, 6, 1), date(2024, 6, 3), True, status="paid"),
        make_payment(7, date(2024, 7, 1)),
    ]


@pytest.fixture
def payment_factory():
    """Build payments inline: payment_factory(id, due_date, paid_date, verified)"""
    return make_payment
