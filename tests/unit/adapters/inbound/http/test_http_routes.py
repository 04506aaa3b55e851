"""Unit tests for HTTP routes."""

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from loan_calculator.adapters.inbound.http.routes import router
from loan_calculator.infrastructure.config.settings import settings


@pytest.fixture
def app():
    """Create FastAPI app with router."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_quote_loan_success(client):
    """Test quote endpoint with valid request."""
    response = client.post(
        "/loans/quote",
        json={"annual_interest_rate_percent": 8.25, "term_years": 5, "principal": 120000.95},
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["term_years"] == 5
    assert data["number_of_payments"] == 60
    assert data["principal"] == 120000.95
    assert data["monthly_payment"] == pytest.approx(2447.57, abs=0.05)
    assert data["total_payment"] == pytest.approx(data["monthly_payment"] * 60, abs=1.0)
    assert "originated_at" in data


def test_quote_loan_zero_rate(client):
    """Test quote endpoint with a zero interest rate."""
    response = client.post(
        "/loans/quote",
        json={"annual_interest_rate_percent": 0, "term_years": 1, "principal": 1000},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["monthly_payment"] == 83.33


@pytest.mark.parametrize(
    "payload",
    [
        {"annual_interest_rate_percent": -1, "term_years": 5, "principal": 1000},
        {"annual_interest_rate_percent": 5, "term_years": 0, "principal": 1000},
        {"annual_interest_rate_percent": 5, "term_years": 5, "principal": -1},
        {"annual_interest_rate_percent": 5, "term_years": 5},
    ],
)
def test_quote_loan_invalid_request(client, payload):
    """Test quote endpoint rejects out-of-domain input."""
    response = client.post("/loans/quote", json=payload)
    assert response.status_code == 422


def test_quote_loan_overflow_returns_422(client):
    """Test quote endpoint maps calculation failures to 422."""
    response = client.post(
        "/loans/quote",
        json={"annual_interest_rate_percent": 1e308, "term_years": 1, "principal": 1e308},
    )
    assert response.status_code == 422
    assert "finite" in response.json()["detail"]


def test_quote_loan_total_overflow_returns_422(client):
    """Test quote endpoint never returns non-finite totals."""
    response = client.post(
        "/loans/quote",
        json={"annual_interest_rate_percent": 10, "term_years": 30, "principal": 1.7e308},
    )
    assert response.status_code == 422
    assert "Total payment" in response.json()["detail"]


def test_quote_default_loan(client):
    """Test default loan endpoint quotes 2.5% over 1 year on 1000."""
    response = client.get("/loans/default")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["annual_interest_rate_percent"] == 2.5
    assert data["term_years"] == 1
    assert data["principal"] == 1000.0
    assert data["monthly_payment"] == pytest.approx(84.47, abs=0.01)


def test_compare_loans(client):
    """Test compare endpoint skips invalid terms."""
    response = client.post(
        "/loans/compare",
        json={"annual_interest_rate_percent": 6.0, "principal": 100000.0, "terms_years": [5, 0, 10]},
    )
    assert response.status_code == status.HTTP_200_OK
    assert [quote["term_years"] for quote in response.json()] == [5, 10]


def test_compare_loans_omitted_terms_use_configured_terms(client):
    """Test compare endpoint falls back to configured terms when none are given."""
    response = client.post(
        "/loans/compare",
        json={"annual_interest_rate_percent": 6.0, "principal": 100000.0},
    )
    assert response.status_code == status.HTTP_200_OK
    expected = [years for years in settings.comparison_terms_years if years >= 1]
    assert [quote["term_years"] for quote in response.json()] == expected


def test_compare_loans_empty_terms(client):
    """Test compare endpoint returns no quotes for an explicit empty term list."""
    response = client.post(
        "/loans/compare",
        json={"annual_interest_rate_percent": 6.0, "principal": 100000.0, "terms_years": []},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_compare_loans_invalid_rate(client):
    """Test compare endpoint rejects a negative rate."""
    response = client.post(
        "/loans/compare",
        json={"annual_interest_rate_percent": -6.0, "principal": 100000.0, "terms_years": [5]},
    )
    assert response.status_code == 422


def test_application_entrypoint_serves_routes():
    """Test the ASGI application includes the loan routes."""
    from loan_calculator.main import app as application

    response = TestClient(application).get("/loans/default")
    assert response.status_code == status.HTTP_200_OK
    assert application.title == "Loan Calculator"
