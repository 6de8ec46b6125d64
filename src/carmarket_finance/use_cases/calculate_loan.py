from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from carmarket_finance.domain.loan import LoanRequest, LoanResult

ONE = Decimal("1")
MONTHS_PER_YEAR = Decimal("12")
PERCENT = Decimal("100")


def monthly_rate_for(annual_interest_rate_percent: Decimal) -> Decimal:
    return annual_interest_rate_percent / PERCENT / MONTHS_PER_YEAR


def level_payment(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    """
    Standard amortized loan payment:
    monthly_payment = P * (r*(1+r)^n) / ((1+r)^n - 1)

    Callers guarantee monthly_rate > 0 and term_months > 0.
    """
    factor = (ONE + monthly_rate) ** term_months
    return principal * (monthly_rate * factor) / (factor - ONE)


@dataclass(frozen=True, slots=True)
class CalculateLoan:
    """
    Calculate a fixed-rate, fixed-term installment loan.

    Numeric policy:
    - Full precision Decimal throughout, no rounding (presentation rounds)
    - total_cost = monthly_payment * term_months + down_payment
    - Degenerate inputs (nothing financed, non-positive rate or term,
      negative down payment) return an all-zero result instead of raising
    """

    def execute(self, req: LoanRequest) -> LoanResult:
        if not req.models_a_loan():
            return LoanResult.zero()

        principal = req.principal_price - req.down_payment
        monthly_payment = level_payment(
            principal,
            monthly_rate_for(req.annual_interest_rate_percent),
            req.term_months,
        )

        total_paid = monthly_payment * req.term_months
        total_interest = total_paid - principal

        return LoanResult(
            principal=principal,
            monthly_payment=monthly_payment,
            total_interest=total_interest,
            total_cost=total_paid + req.down_payment,
        )
