from fastapi import APIRouter, Depends

from carmarket_finance.domain.loan import assess_loan_to_value
from carmarket_finance.entrypoints.http.dependencies import (
    get_build_amortization_schedule_use_case,
    get_calculate_loan_use_case,
)
from carmarket_finance.entrypoints.http.dtos.loan import (
    AmortizationScheduleResponseDTO,
    LoanRequestDTO,
    LoanResponseDTO,
)
from carmarket_finance.entrypoints.http.error_responses import ErrorResponse
from carmarket_finance.entrypoints.http.mappers.loan_mapper import LoanMapper
from carmarket_finance.use_cases.build_amortization_schedule import BuildAmortizationSchedule
from carmarket_finance.use_cases.calculate_loan import CalculateLoan

router = APIRouter(tags=["Financing"])


@router.post(
    "/financing/loan",
    response_model=LoanResponseDTO,
    summary="Calculate auto loan",
    description="""
    Monthly payment, total interest and total cost of a fixed-rate loan.

    ## Calculation
    - principal = price - down_payment
    - monthly_rate = annual_interest_rate_percent / 100 / 12
    - monthly_payment = P * r(1+r)^n / ((1+r)^n - 1)
    - total_cost = monthly_payment * term_months + down_payment

    ## Degenerate inputs
    Nothing financed, a 0% rate or a 0-month term return all zeros
    (not an error), so forms can be recalculated while the user types.

    ## Loan to value
    Financed share of the price: <= 80% excellent, <= 90% good,
    <= 95% fair, above that high_risk.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def calculate_loan(
    payload: LoanRequestDTO,
    use_case: CalculateLoan = Depends(get_calculate_loan_use_case),
) -> LoanResponseDTO:
    """Parse → map → execute → map → return."""
    request = LoanMapper.to_domain_request(payload)

    result = use_case.execute(request)
    loan_to_value = assess_loan_to_value(request.principal_price, request.down_payment)

    return LoanMapper.to_response(result, loan_to_value)


@router.post(
    "/financing/loan/schedule",
    response_model=AmortizationScheduleResponseDTO,
    summary="Build amortization schedule",
    description="""
    Month-by-month split of each payment into interest and principal,
    with the balance left after the payment. Empty when the inputs
    describe no loan.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def build_amortization_schedule(
    payload: LoanRequestDTO,
    use_case: BuildAmortizationSchedule = Depends(get_build_amortization_schedule_use_case),
) -> AmortizationScheduleResponseDTO:
    request = LoanMapper.to_domain_request(payload)

    rows = use_case.execute(request)

    return LoanMapper.to_schedule_response(rows)
