from decimal import Decimal

import pytest

from carmarket_finance.domain.errors import ValidationError
from carmarket_finance.entrypoints.http.mappers.decimal_fields import money


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        ("0", "0.00"),
        ("1.005", "1.01"),
        ("1.004", "1.00"),
        ("999999999999.99", "999999999999.99"),
    ],
)
def test_money_rounds_half_up_to_cents(amount: str, expected: str) -> None:
    assert money(Decimal(amount)) == expected


def test_money_rejects_amount_with_too_many_digits() -> None:
    with pytest.raises(ValidationError, match="too large"):
        money(Decimal("5E+29"))
