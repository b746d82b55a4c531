"""
Pytest configuration and fixtures.
"""
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taxfiler.main import app
from taxfiler.models import Base, get_db


@pytest.fixture
def sample_tax_return_data():
    """Sample tax return body (camelCase, as sent by the frontend)."""
    return {
        "income": 50000,
        "deductions": 5000,
        "taxCredits": 3500,
        "year": 2023
    }


@pytest.fixture
def golden_inputs():
    """The worked example: €50,000 income, €5,000 deductions, €3,500 credits."""
    return {
        "income": Decimal("50000"),
        "deductions": Decimal("5000"),
        "tax_credits": Decimal("3500"),
    }


@pytest.fixture
def db_session():
    """In-memory database shared across connections for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """API client backed by the in-memory database."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Headers the upstream auth layer adds for user 'user-1'."""
    return {"X-User-Id": "user-1"}
