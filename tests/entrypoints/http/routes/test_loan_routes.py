"""
Test suite for the loan calculator routes.

- POST /v1/financing/loan
- POST /v1/financing/loan/schedule

Routes parse → map → execute → map; the real use cases are cheap, so most
tests run them end to end and a few swap in mocks to check the wiring.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from carmarket_finance.domain.loan import LoanRequest, LoanResult
from carmarket_finance.entrypoints.http.dependencies import get_calculate_loan_use_case
from carmarket_finance.entrypoints.http.exception_handlers import register_exception_handlers
from carmarket_finance.entrypoints.http.routes.loan import router

LOAN_URL = "/v1/financing/loan"
SCHEDULE_URL = "/v1/financing/loan/schedule"


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def payload() -> dict:
    return {
        "price": "1000000.00",
        "down_payment": "200000.00",
        "annual_interest_rate_percent": "8.5",
        "term_months": 60,
    }


# ==============================================================================
# Happy Path
# ==============================================================================


def test_calculate_loan_success(client: TestClient, payload: dict) -> None:
    response = client.post(LOAN_URL, json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["principal"] == "800000.00"
    assert 16_412 < float(data["monthly_payment"]) < 16_414
    assert 184_750 < float(data["total_interest"]) < 184_850
    assert data["loan_to_value"] == {"ratio_percent": "80.00", "rating": "excellent"}


def test_amounts_are_strings_with_two_decimals(client: TestClient, payload: dict) -> None:
    data = client.post(LOAN_URL, json=payload).json()

    for key in ("principal", "monthly_payment", "total_interest", "total_cost"):
        assert isinstance(data[key], str)
        assert len(data[key].split(".")[1]) == 2


@pytest.mark.parametrize(
    "overrides",
    [
        {"term_months": 0},
        {"annual_interest_rate_percent": "0"},
        {"down_payment": "1000000.00"},
        {"down_payment": "1200000.00"},
    ],
    ids=["zero-term", "zero-rate", "fully-paid", "overpaid"],
)
def test_degenerate_loan_returns_zeros(client: TestClient, payload: dict, overrides: dict) -> None:
    response = client.post(LOAN_URL, json={**payload, **overrides})

    assert response.status_code == 200
    data = response.json()
    assert data["principal"] == "0.00"
    assert data["monthly_payment"] == "0.00"
    assert data["total_interest"] == "0.00"
    assert data["total_cost"] == "0.00"


def test_high_risk_loan_to_value(client: TestClient, payload: dict) -> None:
    response = client.post(LOAN_URL, json={**payload, "down_payment": "20000"})

    assert response.json()["loan_to_value"] == {"ratio_percent": "98.00", "rating": "high_risk"}


def test_route_delegates_to_use_case(app: FastAPI, client: TestClient, payload: dict) -> None:
    mock_use_case = Mock()
    mock_use_case.execute.return_value = LoanResult(
        principal=Decimal("800000"),
        monthly_payment=Decimal("1.005"),
        total_interest=Decimal("2"),
        total_cost=Decimal("3"),
    )
    app.dependency_overrides[get_calculate_loan_use_case] = lambda: mock_use_case

    response = client.post(LOAN_URL, json=payload)

    assert response.status_code == 200
    assert response.json()["monthly_payment"] == "1.01"
    mock_use_case.execute.assert_called_once_with(
        LoanRequest(
            principal_price=Decimal("1000000.00"),
            down_payment=Decimal("200000.00"),
            annual_interest_rate_percent=Decimal("8.5"),
            term_months=60,
        )
    )


# ==============================================================================
# Validation Errors
# ==============================================================================


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("price", "abc"),
        ("price", "-100"),
        ("price", "100.123"),
        ("down_payment", "1e5"),
        ("annual_interest_rate_percent", "8.12345"),
        ("term_months", -1),
        ("term_months", 481),
    ],
)
def test_invalid_field_returns_422(
    client: TestClient, payload: dict, field: str, value: object
) -> None:
    response = client.post(LOAN_URL, json={**payload, field: value})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["detail"] == "Invalid request parameters"
    assert data["errors"][0]["field"] == field


def test_amount_beyond_twelve_digits_returns_422(client: TestClient, payload: dict) -> None:
    response = client.post(LOAN_URL, json={**payload, "price": "1" + "0" * 30})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "price"


def test_missing_field_returns_422(client: TestClient, payload: dict) -> None:
    del payload["price"]

    response = client.post(LOAN_URL, json=payload)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "price"


# ==============================================================================
# Amortization Schedule
# ==============================================================================


def test_schedule_has_one_row_per_month(client: TestClient, payload: dict) -> None:
    response = client.post(SCHEDULE_URL, json={**payload, "term_months": 12})

    assert response.status_code == 200
    rows = response.json()["rows"]
    assert [row["month"] for row in rows] == list(range(1, 13))
    assert rows[-1]["remaining_balance"] == "0.00"


def test_schedule_is_empty_for_degenerate_loan(client: TestClient, payload: dict) -> None:
    response = client.post(SCHEDULE_URL, json={**payload, "term_months": 0})

    assert response.status_code == 200
    assert response.json() == {"rows": []}


def test_schedule_validates_like_the_calculator(client: TestClient, payload: dict) -> None:
    response = client.post(SCHEDULE_URL, json={**payload, "price": "lots"})

    assert response.status_code == 422
