from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from carmarket_finance.domain.errors import ValidationError

CENT = Decimal("0.01")


def money(amount: Decimal) -> str:
    """
    Present an amount rounded to cents (the only rounding step).

    Raises:
        ValidationError: If the amount has too many digits to be shown in cents
    """
    try:
        return str(amount.quantize(CENT, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise ValidationError("Result is too large to represent") from None


class DecimalFields:
    """
    Collects string → Decimal conversions for one request.

    Every field is attempted so a single ValidationError can report all
    invalid fields at once.
    """

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def parse(self, field: str, raw: str) -> Decimal:
        try:
            value = Decimal(raw)
        except (InvalidOperation, ValueError):
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {raw}",
                    "code": "INVALID_DECIMAL",
                }
            )
            return Decimal("0")  # Placeholder to continue validation

        if not value.is_finite():
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be a finite decimal: {raw}",
                    "code": "INVALID_DECIMAL",
                }
            )
            return Decimal("0")

        return value

    def parse_percent(self, field: str, raw: str) -> Decimal:
        value = self.parse(field, raw)
        if value > 100:
            self.errors.append(
                {
                    "field": field,
                    "message": "Must be between 0 and 100",
                    "code": "OUT_OF_RANGE",
                }
            )
        return value

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(errors=self.errors)
