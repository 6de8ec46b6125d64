from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class LoanRequest:
    principal_price: Decimal
    down_payment: Decimal
    annual_interest_rate_percent: Decimal
    term_months: int

    def models_a_loan(self) -> bool:
        """
        Whether these inputs describe a loan that can be amortized.

        Live-edited forms pass through invalid states while the user types,
        so callers return a neutral result instead of raising when False.
        """
        return (
            self.principal_price - self.down_payment > 0
            and self.down_payment >= 0
            and self.annual_interest_rate_percent > 0
            and self.term_months > 0
        )


@dataclass(frozen=True, slots=True)
class LoanResult:
    principal: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal

    @classmethod
    def zero(cls) -> LoanResult:
        return cls(
            principal=ZERO,
            monthly_payment=ZERO,
            total_interest=ZERO,
            total_cost=ZERO,
        )


@dataclass(frozen=True, slots=True)
class AmortizationRow:
    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


class LtvRating(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    HIGH_RISK = "high_risk"


@dataclass(frozen=True, slots=True)
class LoanToValue:
    ratio_percent: Decimal
    rating: LtvRating


def assess_loan_to_value(price: Decimal, down_payment: Decimal) -> LoanToValue:
    """
    Rate the share of the price that is financed.

    Thresholds (inclusive): <= 80% excellent, <= 90% good, <= 95% fair,
    anything above is high risk. A non-positive price finances nothing.
    """
    if price <= 0:
        return LoanToValue(ratio_percent=ZERO, rating=LtvRating.EXCELLENT)

    ratio = (price - down_payment) / price * HUNDRED

    if ratio <= 80:
        rating = LtvRating.EXCELLENT
    elif ratio <= 90:
        rating = LtvRating.GOOD
    elif ratio <= 95:
        rating = LtvRating.FAIR
    else:
        rating = LtvRating.HIGH_RISK

    return LoanToValue(ratio_percent=ratio, rating=rating)


@dataclass(frozen=True, slots=True)
class LoanDefaults:
    """Starting values offered by the loan calculator for a listed car."""

    down_payment_ratio: Decimal = Decimal("0.20")
    annual_interest_rate_percent: Decimal = Decimal("8.5")
    term_months: int = 60
