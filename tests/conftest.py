"""
Shared pytest fixtures for the MazaoChain test suite.

Provides seeded price repositories, services, and an HTTP client whose
price repository is isolated per test.
"""

import pytest
from fastapi.testclient import TestClient

from mazaochain.core.enums import CropType
from mazaochain.deps import get_price_repository
from mazaochain.main import app
from mazaochain.repositories.price_repository import PriceRepository
from mazaochain.services.price_oracle import PriceOracleService
from mazaochain.services.rule_engine import EvaluationContext


@pytest.fixture
def price_repo():
    """Repository seeded with the default crop prices."""
    repo = PriceRepository()
    repo.seed({CropType.MANIOC: 0.5, CropType.CAFE: 2.0}, currency="USDC")
    return repo


@pytest.fixture
def price_oracle(price_repo):
    """Price oracle service over the seeded repository."""
    return PriceOracleService(price_repo)


@pytest.fixture
def loan_context():
    """Loan request that passes every eligibility rule."""
    return EvaluationContext(
        borrower_id="farmer-123",
        requested_amount=400.0,
        available_collateral=1000.0,
        collateral_token_count=2,
        existing_loan_statuses=[],
        repayment_period_months=12,
    )


@pytest.fixture
def client(price_repo):
    """HTTP client with a fresh price repository."""
    app.dependency_overrides[get_price_repository] = lambda: price_repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
