from pydantic import BaseModel, ConfigDict, Field

from carmarket_finance.entrypoints.http.dtos.patterns import MONEY_PATTERN, RATE_PATTERN


class LoanRequestDTO(BaseModel):
    """Request payload for the auto loan calculator."""

    price: str = Field(
        description="Vehicle price before down payment, as decimal string",
        examples=["1000000.00"],
        pattern=MONEY_PATTERN,
    )
    down_payment: str = Field(
        description="Down payment amount as decimal string",
        examples=["200000.00"],
        pattern=MONEY_PATTERN,
    )
    annual_interest_rate_percent: str = Field(
        description="Annual interest rate in percent as decimal string ('8.5' = 8.5%)",
        examples=["8.5"],
        pattern=RATE_PATTERN,
    )
    term_months: int = Field(
        description="Loan term in months. 0 describes no loan and yields zeros",
        examples=[60],
        ge=0,
        le=480,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "price": "1000000.00",
                "down_payment": "200000.00",
                "annual_interest_rate_percent": "8.5",
                "term_months": 60,
            }
        }
    )


class LoanToValueDTO(BaseModel):
    ratio_percent: str = Field(description="Financed share of the price, in percent")
    rating: str = Field(description="excellent, good, fair or high_risk")


class LoanResponseDTO(BaseModel):
    """Calculated loan. All amounts are decimal strings rounded to cents."""

    principal: str = Field(description="price - down_payment (0 when no loan is modelled)")
    monthly_payment: str
    total_interest: str
    total_cost: str = Field(description="monthly_payment * term_months + down_payment")
    loan_to_value: LoanToValueDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "800000.00",
                "monthly_payment": "16413.23",
                "total_interest": "184793.55",
                "total_cost": "1184793.55",
                "loan_to_value": {"ratio_percent": "80.00", "rating": "excellent"},
            }
        }
    )


class AmortizationRowDTO(BaseModel):
    month: int
    payment: str
    principal_portion: str
    interest_portion: str
    remaining_balance: str


class AmortizationScheduleResponseDTO(BaseModel):
    """Month-by-month schedule; empty when the inputs describe no loan."""

    rows: list[AmortizationRowDTO]
