from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from carmarket_finance.domain.ownership import (
    COST_CATEGORIES,
    TOTAL_COST_CATEGORIES,
    OwnershipRequest,
    OwnershipResult,
)

ZERO = Decimal("0")
ONE = Decimal("1")
PERCENT = Decimal("100")
MONTHS_PER_YEAR = 12


@dataclass(frozen=True, slots=True)
class CalculateOwnershipCost:
    """
    Total cost of owning a vehicle over a multi-year horizon.

    Two depreciation figures are reported on purpose:
    - total_depreciation: declining balance, each year charged on the value
      left after the previous years (also the "depreciation" breakdown entry)
    - estimated_resale_value: closed form price * (1 - rate)^years

    total_cost sums the breakdown without "financing"; monthly_cost spreads it
    over ownership_years * 12 months. breakdown_share_percent divides every
    entry, financing included, by that total. depreciation_percent is the
    closed form share of the price lost, 100 * (1 - (1 - rate)^years).
    A non-positive horizon yields zeros.
    """

    def execute(self, req: OwnershipRequest) -> OwnershipResult:
        years = req.ownership_years
        if years <= 0:
            return OwnershipResult(
                total_cost=ZERO,
                monthly_cost=ZERO,
                breakdown=MappingProxyType({category: ZERO for category in COST_CATEGORIES}),
                total_depreciation=ZERO,
                estimated_resale_value=req.vehicle_price,
                breakdown_share_percent=MappingProxyType(
                    {category: ZERO for category in COST_CATEGORIES}
                ),
                depreciation_percent=ZERO,
            )

        rate = req.annual_depreciation_rate_percent / PERCENT

        breakdown = {
            "depreciation": self._declining_balance_depreciation(req.vehicle_price, rate, years),
            "fuel": self._fuel_cost(req, years),
            "maintenance": req.annual_maintenance_cost * years,
            "insurance": req.annual_insurance_cost * years,
            "taxes": req.one_time_registration_fee,
            "financing": (
                req.monthly_financing_payment * MONTHS_PER_YEAR * years
                if req.include_financing
                else ZERO
            ),
        }

        total_cost = sum((breakdown[category] for category in TOTAL_COST_CATEGORIES), ZERO)
        remaining_ratio = (ONE - rate) ** years

        return OwnershipResult(
            total_cost=total_cost,
            monthly_cost=total_cost / (years * MONTHS_PER_YEAR),
            breakdown=MappingProxyType(breakdown),
            total_depreciation=breakdown["depreciation"],
            estimated_resale_value=req.vehicle_price * remaining_ratio,
            breakdown_share_percent=MappingProxyType(self._shares(breakdown, total_cost)),
            depreciation_percent=(ONE - remaining_ratio) * PERCENT,
        )

    @staticmethod
    def _declining_balance_depreciation(price: Decimal, rate: Decimal, years: int) -> Decimal:
        total = ZERO
        current_value = price
        for _ in range(years):
            yearly = current_value * rate
            total += yearly
            current_value -= yearly
        return total

    @staticmethod
    def _shares(breakdown: dict[str, Decimal], total_cost: Decimal) -> dict[str, Decimal]:
        if total_cost == 0:
            return {category: ZERO for category in breakdown}
        return {category: amount / total_cost * PERCENT for category, amount in breakdown.items()}

    @staticmethod
    def _fuel_cost(req: OwnershipRequest, years: int) -> Decimal:
        # Same arithmetic for every fuel kind; units are the caller's concern
        if req.fuel_efficiency <= 0:
            return ZERO
        total_distance = req.annual_distance * years
        return total_distance / req.fuel_efficiency * req.fuel_unit_price
