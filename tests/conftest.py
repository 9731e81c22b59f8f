"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from loan_desk.api.main import create_app
from loan_desk.infrastructure.database.models import Base
from loan_desk.infrastructure.database.session import get_db
from loan_desk.domain.models import ApplicationStatus, LoanApplication


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SUBMITTED_AT = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


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
def make_application() -> Callable[..., LoanApplication]:
    """Factory for domain applications; keyword arguments override defaults"""
    counter = {"n": 0}

    def _make(**overrides) -> LoanApplication:
        counter["n"] += 1
        fields = dict(
            id=f"app-{counter['n']}",
            full_name="Jane Borrower",
            email="jane.borrower@lender.io",
            phone_number="5550100200",
            loan_amount=Decimal("20000"),
            purpose="Home Renovation",
            credit_score=720,
            employment_status="Full-time",
            monthly_income=Decimal("8000"),
            status=ApplicationStatus.PENDING,
            submitted_at=SUBMITTED_AT,
        )
        fields.update(overrides)
        return LoanApplication(**fields)

    return _make


@pytest.fixture
def application_payload() -> dict:
    """Valid intake request body"""
    return {
        "full_name": "Jane Borrower",
        "email": "jane.borrower@lender.io",
        "phone_number": "5550100200",
        "loan_amount": 20000,
        "purpose": "Education",
        "credit_score": 760,
        "employment_status": "Full-time",
        "monthly_income": 10000,
    }
