from __future__ import annotations

from dataclasses import dataclass

from carmarket_finance.domain.loan import AmortizationRow, LoanRequest
from carmarket_finance.use_cases.calculate_loan import level_payment, monthly_rate_for


@dataclass(frozen=True, slots=True)
class BuildAmortizationSchedule:
    """
    Month-by-month split of each level payment into interest and principal.

    Interest accrues on the opening balance of each month. Rows carry full
    precision, so the closing balance of the last month is zero up to
    Decimal rounding noise. Inputs that do not model a loan produce no rows.
    """

    def execute(self, req: LoanRequest) -> list[AmortizationRow]:
        if not req.models_a_loan():
            return []

        balance = req.principal_price - req.down_payment
        monthly_rate = monthly_rate_for(req.annual_interest_rate_percent)
        payment = level_payment(balance, monthly_rate, req.term_months)

        rows: list[AmortizationRow] = []
        for month in range(1, req.term_months + 1):
            interest = balance * monthly_rate
            principal_portion = payment - interest
            balance -= principal_portion
            rows.append(
                AmortizationRow(
                    month=month,
                    payment=payment,
                    principal_portion=principal_portion,
                    interest_portion=interest,
                    remaining_balance=balance,
                )
            )

        return rows
