from fastapi import APIRouter, Depends

from carmarket_finance.entrypoints.http.dependencies import get_calculate_ownership_cost_use_case
from carmarket_finance.entrypoints.http.dtos.ownership import (
    OwnershipRequestDTO,
    OwnershipResponseDTO,
)
from carmarket_finance.entrypoints.http.error_responses import ErrorResponse
from carmarket_finance.entrypoints.http.mappers.ownership_mapper import OwnershipMapper
from carmarket_finance.use_cases.calculate_ownership_cost import CalculateOwnershipCost

router = APIRouter(tags=["Ownership"])


@router.post(
    "/ownership/cost",
    response_model=OwnershipResponseDTO,
    summary="Calculate total cost of ownership",
    description="""
    Depreciation, fuel, maintenance, insurance, taxes and (optionally)
    financing over the ownership horizon.

    ## Notes
    - Depreciation is declining balance, charged on the remaining value each year
    - estimated_resale_value uses the closed form price * (1 - rate)^years
    - financing is reported in the breakdown but not added to total_cost
    - breakdown_share_percent measures every entry against total_cost
    - ownership_years = 0 returns zeros
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def calculate_ownership_cost(
    payload: OwnershipRequestDTO,
    use_case: CalculateOwnershipCost = Depends(get_calculate_ownership_cost_use_case),
) -> OwnershipResponseDTO:
    request = OwnershipMapper.to_domain_request(payload)

    result = use_case.execute(request)

    return OwnershipMapper.to_response(result)
