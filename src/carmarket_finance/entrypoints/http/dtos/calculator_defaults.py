from pydantic import BaseModel

from carmarket_finance.entrypoints.http.dtos.loan import LoanRequestDTO
from carmarket_finance.entrypoints.http.dtos.ownership import OwnershipRequestDTO


class CarSummaryDTO(BaseModel):
    id: str
    brand: str
    model: str
    year: int
    price: str


class CalculatorDefaultsResponseDTO(BaseModel):
    """Prefilled calculator inputs; each block can be posted back unchanged."""

    car: CarSummaryDTO
    loan: LoanRequestDTO
    ownership: OwnershipRequestDTO
