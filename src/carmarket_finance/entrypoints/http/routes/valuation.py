from datetime import date

from fastapi import APIRouter, Depends

from carmarket_finance.entrypoints.http.dependencies import (
    get_estimate_valuation_use_case,
    get_today,
)
from carmarket_finance.entrypoints.http.dtos.valuation import (
    TradeInRequestDTO,
    TradeInResponseDTO,
)
from carmarket_finance.entrypoints.http.error_responses import ErrorResponse
from carmarket_finance.entrypoints.http.mappers.valuation_mapper import ValuationMapper
from carmarket_finance.use_cases.estimate_valuation import EstimateValuation

router = APIRouter(tags=["Valuation"])


@router.post(
    "/valuations/trade-in",
    response_model=TradeInResponseDTO,
    summary="Estimate trade-in value",
    description="""
    Asks the valuation service for a trade-in estimate. When the service
    is not configured or fails, a local formula answers instead
    (source = "fallback"): trade-in is 75% of the estimated market value.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def estimate_trade_in(
    payload: TradeInRequestDTO,
    use_case: EstimateValuation = Depends(get_estimate_valuation_use_case),
    today: date = Depends(get_today),
) -> TradeInResponseDTO:
    request = ValuationMapper.to_domain_request(payload, current_year=today.year)

    result = use_case.execute(request)

    return ValuationMapper.to_response(result)
