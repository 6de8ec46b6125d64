from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class FuelKind(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"

    @classmethod
    def from_label(cls, label: str | None, default: FuelKind | None = None) -> FuelKind:
        """
        Parse a catalog fuel label.

        Catalog records say "gasoline" where the calculators say "petrol".
        Unknown or missing labels resolve to `default` (petrol if not given).
        """
        fallback = default or cls.PETROL
        if not label:
            return fallback

        normalized = label.strip().lower()
        if normalized == "gasoline":
            return cls.PETROL
        try:
            return cls(normalized)
        except ValueError:
            return fallback


# Breakdown keys, in presentation order
COST_CATEGORIES = ("depreciation", "fuel", "maintenance", "insurance", "taxes", "financing")

# Categories that add up to total_cost. Financing is reported in the breakdown
# but left out of the total: the payments replace the purchase price rather
# than add to it.
TOTAL_COST_CATEGORIES = ("depreciation", "fuel", "maintenance", "insurance", "taxes")


@dataclass(frozen=True, slots=True)
class OwnershipRequest:
    vehicle_price: Decimal
    ownership_years: int
    annual_distance: Decimal
    fuel_kind: FuelKind
    fuel_efficiency: Decimal  # distance per litre, or per kWh for electric
    fuel_unit_price: Decimal  # currency per litre, or per kWh for electric
    annual_maintenance_cost: Decimal
    annual_insurance_cost: Decimal
    one_time_registration_fee: Decimal
    annual_depreciation_rate_percent: Decimal
    include_financing: bool = False
    monthly_financing_payment: Decimal = Decimal("0")


@dataclass(frozen=True, slots=True)
class OwnershipResult:
    total_cost: Decimal
    monthly_cost: Decimal
    breakdown: Mapping[str, Decimal]
    total_depreciation: Decimal  # declining balance, summed year by year
    estimated_resale_value: Decimal  # closed form price * (1 - rate)^years
    # Each breakdown entry as a percentage of total_cost; financing can exceed 100
    breakdown_share_percent: Mapping[str, Decimal]
    depreciation_percent: Decimal  # share of the price lost by resale time


@dataclass(frozen=True, slots=True)
class FuelProfile:
    efficiency: Decimal
    unit_price: Decimal


def _default_fuel_profiles() -> Mapping[FuelKind, FuelProfile]:
    return MappingProxyType(
        {
            FuelKind.PETROL: FuelProfile(efficiency=Decimal("14"), unit_price=Decimal("105")),
            FuelKind.DIESEL: FuelProfile(efficiency=Decimal("14"), unit_price=Decimal("90")),
            FuelKind.ELECTRIC: FuelProfile(efficiency=Decimal("4"), unit_price=Decimal("8")),
            FuelKind.HYBRID: FuelProfile(efficiency=Decimal("14"), unit_price=Decimal("100")),
        }
    )


@dataclass(frozen=True, slots=True)
class DepreciationBand:
    brands: frozenset[str]
    rate_percent: Decimal


def _default_depreciation_bands() -> tuple[DepreciationBand, ...]:
    # First matching band wins
    return (
        DepreciationBand(frozenset({"maruti", "tata", "mahindra"}), Decimal("10")),
        DepreciationBand(frozenset({"toyota", "honda"}), Decimal("11")),
        DepreciationBand(frozenset({"hyundai", "kia"}), Decimal("12")),
        DepreciationBand(frozenset({"bmw", "mercedes", "audi"}), Decimal("15")),
    )


@dataclass(frozen=True, slots=True)
class RegistrationTier:
    price_below: Decimal
    fee: Decimal


def _default_registration_tiers() -> tuple[RegistrationTier, ...]:
    return (
        RegistrationTier(price_below=Decimal("500000"), fee=Decimal("5000")),
        RegistrationTier(price_below=Decimal("1000000"), fee=Decimal("10000")),
        RegistrationTier(price_below=Decimal("2000000"), fee=Decimal("20000")),
    )


@dataclass(frozen=True, slots=True)
class OwnershipDefaults:
    """
    Market assumptions used to prefill the ownership calculator for a car.

    Brand sets hold lowercase fragments matched as substrings of the car make.
    """

    ownership_years: int = 5
    annual_distance: Decimal = Decimal("15000")
    fuel_profiles: Mapping[FuelKind, FuelProfile] = field(default_factory=_default_fuel_profiles)

    domestic_brands: frozenset[str] = frozenset({"tata", "mahindra", "maruti"})
    domestic_maintenance_base: Decimal = Decimal("15000")
    domestic_maintenance_per_year: Decimal = Decimal("800")
    maintenance_base: Decimal = Decimal("20000")
    maintenance_per_year: Decimal = Decimal("1000")
    maintenance_reference_age: int = 5
    maintenance_floor: Decimal = Decimal("8000")

    luxury_brands: frozenset[str] = frozenset({"bmw", "mercedes", "audi"})
    luxury_insurance_ratio: Decimal = Decimal("0.04")
    insurance_ratio: Decimal = Decimal("0.025")

    registration_tiers: tuple[RegistrationTier, ...] = field(
        default_factory=_default_registration_tiers
    )
    registration_ratio_above_tiers: Decimal = Decimal("0.02")

    electric_depreciation_rate_percent: Decimal = Decimal("18")
    depreciation_bands: tuple[DepreciationBand, ...] = field(
        default_factory=_default_depreciation_bands
    )
    depreciation_rate_percent: Decimal = Decimal("13")
