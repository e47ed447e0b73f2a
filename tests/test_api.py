"""
Tests for the mortgage calculation API endpoints.
"""

import pytest

from app.calculations.form import DOWN_PAYMENT_MESSAGE


@pytest.fixture
def loan_payload():
    """$300K price, $60K down, 5% for 30 years."""
    return {
        "price": "300,000",
        "down_payment": "60,000",
        "interest": 5,
        "term": 30,
        "property_tax": 0,
        "insurance": 0,
    }


# ============================================================================
# MORTGAGE CALCULATION TESTS
# ============================================================================

@pytest.mark.integration
class TestMortgageAPI:
    """Test mortgage calculation endpoints."""

    def test_defaults(self, client):
        response = client.get("/api/calculate/mortgage/defaults")
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == "300,000"
        assert data["down_payment"] == "100,000"
        assert data["property_tax"] == 150
        assert data["insurance"] == 300

    def test_defaults_simple_mode(self, client):
        response = client.get("/api/calculate/mortgage/defaults", params={"simple_mode": True})
        assert response.status_code == 200
        data = response.json()
        assert data["property_tax"] == 0
        assert data["insurance"] == 0

    def test_calculate_payment(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "simple_mode": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["monthly_payment"] == 1288
        assert data["breakdown"]["total_monthly_payment"] == 1288
        assert data["monthly_total_display"] == "1,288"
        assert data["lifetime_total_display"] == "463,680"
        assert len(data["slices"]) == 4

    def test_calculate_payment_with_extras(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "property_tax": 150, "insurance": 300},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["total_monthly_payment"] == 1738
        assert data["monthly_total_display"] == "1,738"
        assert data["lifetime_total_display"] == "625,680"

    def test_simple_mode_ignores_extras(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "property_tax": 150, "insurance": 300, "simple_mode": True},
        )
        assert response.json()["breakdown"]["total_monthly_payment"] == 1288

    def test_down_payment_greater_than_price(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "price": "100,000", "down_payment": "200,000"},
        )
        assert response.status_code == 400
        assert DOWN_PAYMENT_MESSAGE in response.json()["detail"]

    def test_zero_interest_rejected(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "interest": 0},
        )
        assert response.status_code == 400

    def test_term_above_limit_rejected(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/schedule",
            json={**loan_payload, "term": 35},
        )
        assert response.status_code == 400

    def test_invalid_payments_per_year(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "payments_per_year": 0},
        )
        assert response.status_code == 422

    def test_payments_per_year_above_limit(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/schedule",
            json={**loan_payload, "payments_per_year": 10**9},
        )
        assert response.status_code == 400
        assert "Payments per year must be between 1 and 52" in response.json()["detail"]

    def test_weekly_payments_accepted(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/payment",
            json={**loan_payload, "payments_per_year": 52},
        )
        assert response.status_code == 200

    def test_calculate_schedule(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/schedule",
            json={**loan_payload, "start_date": "2025-01-01"},
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["schedule"]) == 361
        assert data["schedule"][0]["payment_date"] == "2025-01-01"
        assert data["schedule"][1]["payment_date"] == "2025-02-01"
        assert data["schedule"][-1]["remaining_balance"] == 0
        assert data["summary"]["payments"] == 361
        assert len(data["yearly"]) == 30
        assert data["yearly"][-1]["ending_balance"] == 0
        assert len(data["chart"]["dates"]) == 181

    def test_calculate_schedule_biweekly(self, client, loan_payload):
        response = client.post(
            "/api/calculate/mortgage/schedule",
            json={**loan_payload, "payments_per_year": 26},
        )
        assert response.status_code == 200
        assert len(response.json()["schedule"]) == 781


# ============================================================================
# CURRENCY TESTS
# ============================================================================

class TestCurrencyAPI:
    """Test currency normalization endpoint."""

    def test_normalize_currency(self, client):
        response = client.post("/api/calculate/currency", json={"value": "1000000abc"})
        assert response.status_code == 200
        assert response.json() == {"formatted": "1,000,000", "amount": 1000000}

    def test_normalize_empty(self, client):
        response = client.post("/api/calculate/currency", json={"value": ""})
        assert response.json() == {"formatted": "", "amount": 0}


# ============================================================================
# HEALTH CHECK TESTS
# ============================================================================

class TestHealthCheck:
    """Test health check endpoint."""

    def test_health_check(self, client):
        """Test health check returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
