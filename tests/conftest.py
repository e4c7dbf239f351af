"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from talktotoyota_finance.api.main import create_app
from talktotoyota_finance.domain.models import FinanceRequest


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def typical_request() -> FinanceRequest:
    """$30k vehicle, good credit, 10% down over 60 months"""
    return FinanceRequest(
        vehicle_price=30000,
        credit_score=720,
        down_payment=3000,
        loan_term_months=60,
        trade_in_value=0,
        sales_tax_rate=0.08,
    )


@pytest.fixture
def typical_payload() -> dict:
    """JSON body matching typical_request"""
    return {
        "vehiclePrice": 30000,
        "creditScore": 720,
        "downPayment": 3000,
        "loanTermMonths": 60,
        "tradeInValue": 0,
        "salesTaxRate": 0.08,
    }
