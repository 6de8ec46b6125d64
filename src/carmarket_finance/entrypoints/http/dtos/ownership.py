from pydantic import BaseModel, ConfigDict, Field

from carmarket_finance.domain.ownership import FuelKind
from carmarket_finance.entrypoints.http.dtos.patterns import MONEY_PATTERN, RATE_PATTERN


class OwnershipRequestDTO(BaseModel):
    """Request payload for the total cost of ownership calculator."""

    vehicle_price: str = Field(examples=["1000000.00"], pattern=MONEY_PATTERN)
    ownership_years: int = Field(examples=[5], ge=0, le=50)
    annual_distance: str = Field(
        description="Distance driven per year", examples=["15000"], pattern=MONEY_PATTERN
    )
    fuel_kind: FuelKind = Field(examples=[FuelKind.PETROL])
    fuel_efficiency: str = Field(
        description="Distance per litre, or per kWh for electric",
        examples=["14"],
        pattern=RATE_PATTERN,
    )
    fuel_unit_price: str = Field(
        description="Price per litre, or per kWh for electric",
        examples=["105"],
        pattern=MONEY_PATTERN,
    )
    annual_maintenance_cost: str = Field(examples=["12000"], pattern=MONEY_PATTERN)
    annual_insurance_cost: str = Field(examples=["25000"], pattern=MONEY_PATTERN)
    one_time_registration_fee: str = Field(examples=["10000"], pattern=MONEY_PATTERN)
    annual_depreciation_rate_percent: str = Field(
        description="Declining-balance depreciation per year, 0 to 100",
        examples=["13"],
        pattern=RATE_PATTERN,
    )
    include_financing: bool = False
    monthly_financing_payment: str = Field(default="0", pattern=MONEY_PATTERN)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_price": "1000000.00",
                "ownership_years": 5,
                "annual_distance": "15000",
                "fuel_kind": "petrol",
                "fuel_efficiency": "14",
                "fuel_unit_price": "105",
                "annual_maintenance_cost": "12000",
                "annual_insurance_cost": "25000",
                "one_time_registration_fee": "10000",
                "annual_depreciation_rate_percent": "13",
                "include_financing": False,
                "monthly_financing_payment": "0",
            }
        }
    )


class OwnershipResponseDTO(BaseModel):
    """Total cost of ownership. Amounts are decimal strings rounded to cents."""

    total_cost: str = Field(description="Sum of the breakdown, financing excluded")
    monthly_cost: str
    breakdown: dict[str, str] = Field(
        description="depreciation, fuel, maintenance, insurance, taxes, financing"
    )
    total_depreciation: str = Field(description="Declining balance, summed year by year")
    estimated_resale_value: str = Field(description="price * (1 - rate)^years")
    breakdown_share_percent: dict[str, str] = Field(
        description="Each breakdown entry as a percentage of total_cost"
    )
    depreciation_percent: str = Field(description="100 * (1 - (1 - rate)^years)")
