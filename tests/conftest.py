"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import date

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import app
from app.calculations.payment import LoanParameters


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def standard_loan() -> LoanParameters:
    """$300K price, $60K down, 5% for 30 years, monthly payments, no extras."""
    return LoanParameters(
        principal=240000,
        annual_rate_percent=5,
        term_years=30,
        payments_per_year=12,
        monthly_property_tax=0,
        monthly_insurance=0,
        simple_mode=False,
    )


@pytest.fixture
def start_date() -> date:
    return date(2025, 1, 1)
