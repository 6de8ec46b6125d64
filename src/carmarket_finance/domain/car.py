from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Car:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    fuel_type: str | None = None
    transmission: str | None = None
    mileage_km: int | None = None
