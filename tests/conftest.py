"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session
from debt_valuation.api.main import create_app
from debt_valuation.domain.models import RateObservation
from debt_valuation.domain.rates import RateTable
from debt_valuation.infrastructure.database.models import Base
from debt_valuation.infrastructure.database.session import build_engine, get_db


# Test database (in-memory, shared across the TestClient thread)
engine = build_engine("sqlite+pysqlite:///:memory:")
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
    """Create FastAPI test client with test database and the bundled rate table"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def make_rate() -> Callable[..., RateObservation]:
    """Factory for observations from rate strings"""

    def factory(year: int, month: int, usd: str, eur: str = "40", gold: str = "3000") -> RateObservation:
        return RateObservation(year=year, month=month, usd=Decimal(usd), eur=Decimal(eur), gold=Decimal(gold))

    return factory


@pytest.fixture
def sparse_table(make_rate) -> RateTable:
    """Two observations, January and February 2025"""
    return RateTable(
        [
            make_rate(2025, 1, "35.4370", "36.6893", "3250.00"),
            make_rate(2025, 2, "36.0729", "37.5777", "3380.00"),
        ]
    )
