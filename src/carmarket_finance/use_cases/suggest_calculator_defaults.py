"""Prefill the loan and ownership calculators from a catalog listing."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from carmarket_finance.domain.car import Car
from carmarket_finance.domain.errors import NotFoundError, ValidationError
from carmarket_finance.domain.loan import LoanDefaults, LoanRequest
from carmarket_finance.domain.ownership import FuelKind, OwnershipDefaults, OwnershipRequest
from carmarket_finance.ports.car_catalog_repository import CarCatalogRepository

WHOLE_UNIT = Decimal("1")


def _round_whole(amount: Decimal) -> Decimal:
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def _make_matches(make: str, fragments: frozenset[str]) -> bool:
    lowered = make.lower()
    return any(fragment in lowered for fragment in fragments)


@dataclass(frozen=True, slots=True)
class SuggestCalculatorDefaultsRequest:
    car_id: str
    as_of_year: int


@dataclass(frozen=True, slots=True)
class CalculatorDefaults:
    car: Car
    loan: LoanRequest
    ownership: OwnershipRequest


class SuggestCalculatorDefaults:
    """
    Starting inputs for both calculators, derived from one listed car.

    The suggestions are estimates the user is expected to edit: brand
    families, age and price tiers pick values from OwnershipDefaults.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        loan_defaults: LoanDefaults | None = None,
        ownership_defaults: OwnershipDefaults | None = None,
    ) -> None:
        self._repository = car_catalog_repository
        self._loan_defaults = loan_defaults or LoanDefaults()
        self._ownership_defaults = ownership_defaults or OwnershipDefaults()

    def execute(self, request: SuggestCalculatorDefaultsRequest) -> CalculatorDefaults:
        """
        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If car with given ID doesn't exist
        """
        car = self._get_car(request.car_id)

        return CalculatorDefaults(
            car=car,
            loan=self.loan_defaults_for(car),
            ownership=self.ownership_defaults_for(car, request.as_of_year),
        )

    def _get_car(self, car_id: str) -> Car:
        try:
            UUID(car_id)
        except ValueError:
            raise ValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID",
                    }
                ]
            )

        car = self._repository.get_by_id(car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=car_id)
        return car

    def loan_defaults_for(self, car: Car) -> LoanRequest:
        defaults = self._loan_defaults
        return LoanRequest(
            principal_price=car.price,
            down_payment=_round_whole(car.price * defaults.down_payment_ratio),
            annual_interest_rate_percent=defaults.annual_interest_rate_percent,
            term_months=defaults.term_months,
        )

    def ownership_defaults_for(self, car: Car, as_of_year: int) -> OwnershipRequest:
        defaults = self._ownership_defaults
        fuel_kind = FuelKind.from_label(car.fuel_type)
        fuel_profile = defaults.fuel_profiles[fuel_kind]

        return OwnershipRequest(
            vehicle_price=car.price,
            ownership_years=defaults.ownership_years,
            annual_distance=defaults.annual_distance,
            fuel_kind=fuel_kind,
            fuel_efficiency=fuel_profile.efficiency,
            fuel_unit_price=fuel_profile.unit_price,
            annual_maintenance_cost=self._maintenance(car, as_of_year),
            annual_insurance_cost=self._insurance(car),
            one_time_registration_fee=self._registration_fee(car.price),
            annual_depreciation_rate_percent=self._depreciation_rate(car, fuel_kind),
        )

    def _maintenance(self, car: Car, as_of_year: int) -> Decimal:
        defaults = self._ownership_defaults
        # Newer than the reference age lowers the estimate, older raises it
        years_offset = car.year - as_of_year + defaults.maintenance_reference_age

        if _make_matches(car.make, defaults.domestic_brands):
            estimate = (
                defaults.domestic_maintenance_base
                - years_offset * defaults.domestic_maintenance_per_year
            )
        else:
            estimate = defaults.maintenance_base - years_offset * defaults.maintenance_per_year

        return max(defaults.maintenance_floor, estimate)

    def _insurance(self, car: Car) -> Decimal:
        defaults = self._ownership_defaults
        ratio = (
            defaults.luxury_insurance_ratio
            if _make_matches(car.make, defaults.luxury_brands)
            else defaults.insurance_ratio
        )
        return _round_whole(car.price * ratio)

    def _registration_fee(self, price: Decimal) -> Decimal:
        defaults = self._ownership_defaults
        for tier in defaults.registration_tiers:
            if price < tier.price_below:
                return tier.fee
        return _round_whole(price * defaults.registration_ratio_above_tiers)

    def _depreciation_rate(self, car: Car, fuel_kind: FuelKind) -> Decimal:
        defaults = self._ownership_defaults
        if fuel_kind is FuelKind.ELECTRIC:
            return defaults.electric_depreciation_rate_percent
        for band in defaults.depreciation_bands:
            if _make_matches(car.make, band.brands):
                return band.rate_percent
        return defaults.depreciation_rate_percent
