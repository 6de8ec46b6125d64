from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from carmarket_finance.domain.errors import ServiceUnavailableError
from carmarket_finance.domain.ownership import FuelKind


class ValuationServiceUnavailable(ServiceUnavailableError):
    pass


class VehicleCondition(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ValuationSource(str, Enum):
    SERVICE = "service"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ValuationRequest:
    brand: str
    model: str
    year: int
    mileage: Decimal
    condition: VehicleCondition
    fuel_kind: FuelKind
    transmission: str


@dataclass(frozen=True, slots=True)
class ValuationResult:
    trade_in_value: Decimal
    market_value: Decimal
    source: ValuationSource


def _default_condition_factors() -> Mapping[VehicleCondition, Decimal]:
    return MappingProxyType(
        {
            VehicleCondition.EXCELLENT: Decimal("1.10"),
            VehicleCondition.GOOD: Decimal("1.00"),
            VehicleCondition.FAIR: Decimal("0.85"),
            VehicleCondition.POOR: Decimal("0.70"),
        }
    )


@dataclass(frozen=True, slots=True)
class ValuationConfig:
    """Constants of the local trade-in formula used when the service is down."""

    base_value: Decimal = Decimal("500000")
    yearly_depreciation: Decimal = Decimal("0.08")
    mileage_horizon: Decimal = Decimal("200000")
    condition_factors: Mapping[VehicleCondition, Decimal] = field(
        default_factory=_default_condition_factors
    )
    premium_brands: frozenset[str] = frozenset(
        {"Mercedes-Benz", "BMW", "Audi", "Lexus", "Porsche", "Tesla"}
    )
    premium_brand_factor: Decimal = Decimal("1.20")
    trade_in_ratio: Decimal = Decimal("0.75")

    def is_premium(self, brand: str) -> bool:
        wanted = brand.strip().lower()
        return any(wanted == premium.lower() for premium in self.premium_brands)
