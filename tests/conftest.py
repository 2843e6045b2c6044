"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from supera_advisor.api.main import create_app
from supera_advisor.domain.models import FinancialInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_financials() -> FinancialInput:
    """Household spending 60% of income on expenses plus debts"""
    return FinancialInput(
        income=Decimal("1000.00"),
        expenses=Decimal("400.00"),
        debts=Decimal("200.00"),
    )
