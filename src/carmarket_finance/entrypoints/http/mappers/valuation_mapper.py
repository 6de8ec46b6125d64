from __future__ import annotations

from carmarket_finance.domain.valuation import ValuationRequest, ValuationResult
from carmarket_finance.entrypoints.http.dtos.valuation import (
    TradeInRequestDTO,
    TradeInResponseDTO,
)
from carmarket_finance.entrypoints.http.mappers.decimal_fields import DecimalFields, money
from carmarket_finance.use_cases.estimate_valuation import EstimateValuationRequest


class ValuationMapper:
    """Maps between REST DTOs and domain models for trade-in estimates."""

    @staticmethod
    def to_domain_request(dto: TradeInRequestDTO, current_year: int) -> EstimateValuationRequest:
        """
        Converts request DTO to the use case request.

        The clock is read by the route, never by the domain: `current_year`
        only applies when the client did not pin `as_of_year`.

        Raises:
            ValidationError: If mileage is not a valid decimal
        """
        fields = DecimalFields()
        mileage = fields.parse("mileage", dto.mileage)
        fields.raise_if_invalid()

        return EstimateValuationRequest(
            vehicle=ValuationRequest(
                brand=dto.brand,
                model=dto.model,
                year=dto.year,
                mileage=mileage,
                condition=dto.condition,
                fuel_kind=dto.fuel_kind,
                transmission=dto.transmission,
            ),
            as_of_year=dto.as_of_year if dto.as_of_year is not None else current_year,
        )

    @staticmethod
    def to_response(result: ValuationResult) -> TradeInResponseDTO:
        return TradeInResponseDTO(
            trade_in_value=money(result.trade_in_value),
            market_value=money(result.market_value),
            source=result.source.value,
        )
