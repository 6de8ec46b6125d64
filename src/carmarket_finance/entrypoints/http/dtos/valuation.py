from pydantic import BaseModel, ConfigDict, Field

from carmarket_finance.domain.ownership import FuelKind
from carmarket_finance.domain.valuation import VehicleCondition
from carmarket_finance.entrypoints.http.dtos.patterns import MAX_YEAR, MONEY_PATTERN


class TradeInRequestDTO(BaseModel):
    """Vehicle descriptor for a trade-in estimate."""

    brand: str = Field(min_length=1, max_length=50, examples=["BMW"])
    model: str = Field(min_length=1, max_length=50, examples=["X1"])
    year: int = Field(ge=1900, le=MAX_YEAR, examples=[2021])
    mileage: str = Field(examples=["45000"], pattern=MONEY_PATTERN)
    condition: VehicleCondition = Field(examples=[VehicleCondition.GOOD])
    fuel_kind: FuelKind = FuelKind.PETROL
    transmission: str = Field(default="automatic", max_length=20)
    as_of_year: int | None = Field(
        default=None,
        ge=1900,
        le=MAX_YEAR,
        description="Year the estimate is made in; defaults to the current year",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "brand": "BMW",
                "model": "X1",
                "year": 2021,
                "mileage": "45000",
                "condition": "good",
                "fuel_kind": "petrol",
                "transmission": "automatic",
            }
        }
    )


class TradeInResponseDTO(BaseModel):
    trade_in_value: str
    market_value: str
    source: str = Field(description="'service' or 'fallback'")
