from __future__ import annotations

from carmarket_finance.domain.car import Car
from carmarket_finance.entrypoints.http.dtos.calculator_defaults import (
    CalculatorDefaultsResponseDTO,
    CarSummaryDTO,
)
from carmarket_finance.entrypoints.http.mappers.decimal_fields import money
from carmarket_finance.entrypoints.http.mappers.loan_mapper import LoanMapper
from carmarket_finance.entrypoints.http.mappers.ownership_mapper import OwnershipMapper
from carmarket_finance.use_cases.suggest_calculator_defaults import CalculatorDefaults


class CalculatorDefaultsMapper:
    @staticmethod
    def to_car_summary(car: Car) -> CarSummaryDTO:
        return CarSummaryDTO(
            id=car.id,
            brand=car.make,  # Domain uses 'make', DTO uses 'brand'
            model=car.model,
            year=car.year,
            price=money(car.price),
        )

    @staticmethod
    def to_response(defaults: CalculatorDefaults) -> CalculatorDefaultsResponseDTO:
        return CalculatorDefaultsResponseDTO(
            car=CalculatorDefaultsMapper.to_car_summary(defaults.car),
            loan=LoanMapper.to_request_dto(defaults.loan),
            ownership=OwnershipMapper.to_request_dto(defaults.ownership),
        )
