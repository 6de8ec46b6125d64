from datetime import date

from fastapi import APIRouter, Depends, Query

from carmarket_finance.entrypoints.http.dependencies import (
    get_suggest_calculator_defaults_use_case,
    get_today,
)
from carmarket_finance.entrypoints.http.dtos.calculator_defaults import (
    CalculatorDefaultsResponseDTO,
)
from carmarket_finance.entrypoints.http.dtos.patterns import MAX_YEAR
from carmarket_finance.entrypoints.http.error_responses import ErrorResponse
from carmarket_finance.entrypoints.http.mappers.calculator_defaults_mapper import (
    CalculatorDefaultsMapper,
)
from carmarket_finance.use_cases.suggest_calculator_defaults import (
    SuggestCalculatorDefaults,
    SuggestCalculatorDefaultsRequest,
)

router = APIRouter(tags=["Cars"])


@router.get(
    "/cars/{car_id}/calculator-defaults",
    response_model=CalculatorDefaultsResponseDTO,
    summary="Prefill calculators for a listed car",
    description="""
    Suggested loan and ownership inputs for a catalog car, estimated from
    its price, brand, age and fuel type. The `loan` and `ownership` blocks
    are valid request bodies for the calculator endpoints.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Invalid car id"},
    },
)
def get_calculator_defaults(
    car_id: str,
    as_of_year: int | None = Query(default=None, ge=1900, le=MAX_YEAR),
    use_case: SuggestCalculatorDefaults = Depends(get_suggest_calculator_defaults_use_case),
    today: date = Depends(get_today),
) -> CalculatorDefaultsResponseDTO:
    request = SuggestCalculatorDefaultsRequest(
        car_id=car_id,
        as_of_year=as_of_year if as_of_year is not None else today.year,
    )

    defaults = use_case.execute(request)

    return CalculatorDefaultsMapper.to_response(defaults)
