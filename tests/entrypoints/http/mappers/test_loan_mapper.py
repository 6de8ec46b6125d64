"""
Tests for LoanMapper.

- str → Decimal conversion for requests, with all bad fields reported together
- Decimal → str for responses, rounded half-up to cents
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from carmarket_finance.domain.errors import ValidationError
from carmarket_finance.domain.loan import (
    AmortizationRow,
    LoanRequest,
    LoanResult,
    LoanToValue,
    LtvRating,
)
from carmarket_finance.entrypoints.http.dtos.loan import LoanRequestDTO
from carmarket_finance.entrypoints.http.mappers.loan_mapper import LoanMapper


# ==============================================================================
# DTO → Domain
# ==============================================================================


def test_to_domain_request_converts_strings_to_decimals() -> None:
    dto = LoanRequestDTO(
        price="1000000.00",
        down_payment="200000",
        annual_interest_rate_percent="8.5",
        term_months=60,
    )

    req = LoanMapper.to_domain_request(dto)

    assert req == LoanRequest(
        principal_price=Decimal("1000000.00"),
        down_payment=Decimal("200000"),
        annual_interest_rate_percent=Decimal("8.5"),
        term_months=60,
    )
    assert isinstance(req.principal_price, Decimal)


def test_to_domain_request_reports_every_invalid_field() -> None:
    """model_construct skips pydantic validation, as a non-HTTP caller might."""
    dto = LoanRequestDTO.model_construct(
        price="abc",
        down_payment="200000",
        annual_interest_rate_percent="Infinity",
        term_months=60,
    )

    with pytest.raises(ValidationError) as exc_info:
        LoanMapper.to_domain_request(dto)

    errors = exc_info.value.errors
    assert errors is not None
    assert [e["field"] for e in errors] == ["price", "annual_interest_rate_percent"]
    assert errors[0]["message"] == "Must be a valid decimal: abc"
    assert errors[1]["message"] == "Must be a finite decimal: Infinity"
    assert all(e["code"] == "INVALID_DECIMAL" for e in errors)


# ==============================================================================
# Domain → DTO
# ==============================================================================


def test_to_response_rounds_half_up_to_cents() -> None:
    result = LoanResult(
        principal=Decimal("800000"),
        monthly_payment=Decimal("16413.22545"),
        total_interest=Decimal("184793.527"),
        total_cost=Decimal("1184793.125"),
    )
    ltv = LoanToValue(ratio_percent=Decimal("80.0"), rating=LtvRating.EXCELLENT)

    dto = LoanMapper.to_response(result, ltv)

    assert dto.principal == "800000.00"
    assert dto.monthly_payment == "16413.23"
    assert dto.total_interest == "184793.53"
    assert dto.total_cost == "1184793.13"
    assert dto.loan_to_value.ratio_percent == "80.00"
    assert dto.loan_to_value.rating == "excellent"


def test_to_response_for_zero_result() -> None:
    ltv = LoanToValue(ratio_percent=Decimal("0"), rating=LtvRating.EXCELLENT)

    dto = LoanMapper.to_response(LoanResult.zero(), ltv)

    assert dto.monthly_payment == "0.00"
    assert dto.total_cost == "0.00"


def test_to_schedule_response_clamps_tiny_negative_balance() -> None:
    rows = [
        AmortizationRow(
            month=1,
            payment=Decimal("5100.5"),
            principal_portion=Decimal("5058.333"),
            interest_portion=Decimal("42.167"),
            remaining_balance=Decimal("-0.0000000001"),
        )
    ]

    dto = LoanMapper.to_schedule_response(rows)

    assert len(dto.rows) == 1
    assert dto.rows[0].month == 1
    assert dto.rows[0].payment == "5100.50"
    assert dto.rows[0].principal_portion == "5058.33"
    assert dto.rows[0].interest_portion == "42.17"
    assert dto.rows[0].remaining_balance == "0.00"


def test_to_request_dto_is_a_valid_request_payload() -> None:
    req = LoanRequest(
        principal_price=Decimal("1200000.00"),
        down_payment=Decimal("240000"),
        annual_interest_rate_percent=Decimal("8.5"),
        term_months=60,
    )

    dto = LoanMapper.to_request_dto(req)

    assert dto.price == "1200000.00"
    assert dto.down_payment == "240000.00"
    assert dto.annual_interest_rate_percent == "8.5"
    assert LoanMapper.to_domain_request(dto) == req
