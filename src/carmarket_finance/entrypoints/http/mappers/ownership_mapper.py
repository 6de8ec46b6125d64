from __future__ import annotations

from carmarket_finance.domain.ownership import OwnershipRequest, OwnershipResult
from carmarket_finance.entrypoints.http.dtos.ownership import (
    OwnershipRequestDTO,
    OwnershipResponseDTO,
)
from carmarket_finance.entrypoints.http.mappers.decimal_fields import DecimalFields, money


class OwnershipMapper:
    """Maps between REST DTOs and domain models for the ownership calculator."""

    @staticmethod
    def to_domain_request(dto: OwnershipRequestDTO) -> OwnershipRequest:
        """
        Converts request DTO to domain OwnershipRequest (str → Decimal).

        Raises:
            ValidationError: If a value is not a valid decimal, or the
                depreciation rate is above 100 percent
        """
        fields = DecimalFields()
        request = OwnershipRequest(
            vehicle_price=fields.parse("vehicle_price", dto.vehicle_price),
            ownership_years=dto.ownership_years,
            annual_distance=fields.parse("annual_distance", dto.annual_distance),
            fuel_kind=dto.fuel_kind,
            fuel_efficiency=fields.parse("fuel_efficiency", dto.fuel_efficiency),
            fuel_unit_price=fields.parse("fuel_unit_price", dto.fuel_unit_price),
            annual_maintenance_cost=fields.parse(
                "annual_maintenance_cost", dto.annual_maintenance_cost
            ),
            annual_insurance_cost=fields.parse("annual_insurance_cost", dto.annual_insurance_cost),
            one_time_registration_fee=fields.parse(
                "one_time_registration_fee", dto.one_time_registration_fee
            ),
            annual_depreciation_rate_percent=fields.parse_percent(
                "annual_depreciation_rate_percent", dto.annual_depreciation_rate_percent
            ),
            include_financing=dto.include_financing,
            monthly_financing_payment=fields.parse(
                "monthly_financing_payment", dto.monthly_financing_payment
            ),
        )
        fields.raise_if_invalid()
        return request

    @staticmethod
    def to_request_dto(request: OwnershipRequest) -> OwnershipRequestDTO:
        return OwnershipRequestDTO(
            vehicle_price=money(request.vehicle_price),
            ownership_years=request.ownership_years,
            annual_distance=money(request.annual_distance),
            fuel_kind=request.fuel_kind,
            fuel_efficiency=f"{request.fuel_efficiency:f}",
            fuel_unit_price=money(request.fuel_unit_price),
            annual_maintenance_cost=money(request.annual_maintenance_cost),
            annual_insurance_cost=money(request.annual_insurance_cost),
            one_time_registration_fee=money(request.one_time_registration_fee),
            annual_depreciation_rate_percent=f"{request.annual_depreciation_rate_percent:f}",
            include_financing=request.include_financing,
            monthly_financing_payment=money(request.monthly_financing_payment),
        )

    @staticmethod
    def to_response(result: OwnershipResult) -> OwnershipResponseDTO:
        return OwnershipResponseDTO(
            total_cost=money(result.total_cost),
            monthly_cost=money(result.monthly_cost),
            breakdown={category: money(amount) for category, amount in result.breakdown.items()},
            total_depreciation=money(result.total_depreciation),
            estimated_resale_value=money(result.estimated_resale_value),
            breakdown_share_percent={
                category: money(share) for category, share in result.breakdown_share_percent.items()
            },
            depreciation_percent=money(result.depreciation_percent),
        )
