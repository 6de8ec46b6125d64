from __future__ import annotations

from decimal import Decimal

from carmarket_finance.domain.loan import AmortizationRow, LoanRequest, LoanResult, LoanToValue
from carmarket_finance.entrypoints.http.dtos.loan import (
    AmortizationRowDTO,
    AmortizationScheduleResponseDTO,
    LoanRequestDTO,
    LoanResponseDTO,
    LoanToValueDTO,
)
from carmarket_finance.entrypoints.http.mappers.decimal_fields import DecimalFields, money


class LoanMapper:
    """Maps between REST DTOs and domain models for the loan calculator."""

    @staticmethod
    def to_domain_request(dto: LoanRequestDTO) -> LoanRequest:
        """
        Converts request DTO to domain LoanRequest (str → Decimal).

        Raises:
            ValidationError: If string values cannot be converted to valid Decimals
        """
        fields = DecimalFields()
        price = fields.parse("price", dto.price)
        down_payment = fields.parse("down_payment", dto.down_payment)
        rate = fields.parse("annual_interest_rate_percent", dto.annual_interest_rate_percent)
        fields.raise_if_invalid()

        return LoanRequest(
            principal_price=price,
            down_payment=down_payment,
            annual_interest_rate_percent=rate,
            term_months=dto.term_months,
        )

    @staticmethod
    def to_request_dto(request: LoanRequest) -> LoanRequestDTO:
        return LoanRequestDTO(
            price=money(request.principal_price),
            down_payment=money(request.down_payment),
            annual_interest_rate_percent=f"{request.annual_interest_rate_percent:f}",
            term_months=request.term_months,
        )

    @staticmethod
    def to_response(result: LoanResult, loan_to_value: LoanToValue) -> LoanResponseDTO:
        """Converts domain LoanResult to response DTO (Decimal → str, rounded to cents)."""
        return LoanResponseDTO(
            principal=money(result.principal),
            monthly_payment=money(result.monthly_payment),
            total_interest=money(result.total_interest),
            total_cost=money(result.total_cost),
            loan_to_value=LoanToValueDTO(
                ratio_percent=money(loan_to_value.ratio_percent),
                rating=loan_to_value.rating.value,
            ),
        )

    @staticmethod
    def to_schedule_response(rows: list[AmortizationRow]) -> AmortizationScheduleResponseDTO:
        return AmortizationScheduleResponseDTO(
            rows=[
                AmortizationRowDTO(
                    month=row.month,
                    payment=money(row.payment),
                    principal_portion=money(row.principal_portion),
                    interest_portion=money(row.interest_portion),
                    # Full-precision balance can end a hair below zero
                    remaining_balance=money(max(row.remaining_balance, Decimal("0"))),
                )
                for row in rows
            ]
        )
