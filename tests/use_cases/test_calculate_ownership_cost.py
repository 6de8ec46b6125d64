from dataclasses import replace
from decimal import Decimal

import pytest

from carmarket_finance.domain.ownership import (
    COST_CATEGORIES,
    TOTAL_COST_CATEGORIES,
    FuelKind,
    OwnershipRequest,
)
from carmarket_finance.use_cases.calculate_ownership_cost import CalculateOwnershipCost


@pytest.fixture
def req() -> OwnershipRequest:
    """1,000,000 petrol car kept five years, 15,000 km a year at 14 km/l."""
    return OwnershipRequest(
        vehicle_price=Decimal("1000000"),
        ownership_years=5,
        annual_distance=Decimal("15000"),
        fuel_kind=FuelKind.PETROL,
        fuel_efficiency=Decimal("14"),
        fuel_unit_price=Decimal("105"),
        annual_maintenance_cost=Decimal("12000"),
        annual_insurance_cost=Decimal("25000"),
        one_time_registration_fee=Decimal("10000"),
        annual_depreciation_rate_percent=Decimal("13"),
    )


# ============================================================================
# WORKED EXAMPLE
# ============================================================================


def test_five_year_petrol_breakdown(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(req)

    assert result.breakdown["depreciation"] == Decimal("501579.0793")
    assert abs(result.breakdown["fuel"] - Decimal("562500")) < Decimal("0.01")
    assert result.breakdown["maintenance"] == Decimal("60000")
    assert result.breakdown["insurance"] == Decimal("125000")
    assert result.breakdown["taxes"] == Decimal("10000")
    assert result.breakdown["financing"] == 0


def test_five_year_petrol_totals(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(req)

    assert abs(result.total_cost - Decimal("1259079.0793")) < Decimal("0.01")
    assert abs(result.monthly_cost - Decimal("20984.65")) < Decimal("0.01")
    assert result.estimated_resale_value == Decimal("498420.9207")


def test_depreciation_and_resale_add_up_to_price(req: OwnershipRequest) -> None:
    """Declining balance summed year by year agrees with the closed form."""
    result = CalculateOwnershipCost().execute(req)

    assert result.total_depreciation + result.estimated_resale_value == req.vehicle_price
    assert result.total_depreciation == result.breakdown["depreciation"]


def test_electric_uses_same_arithmetic_in_kwh(req: OwnershipRequest) -> None:
    """75,000 km at 4 km/kWh and 8 per kWh."""
    electric = replace(
        req,
        fuel_kind=FuelKind.ELECTRIC,
        fuel_efficiency=Decimal("4"),
        fuel_unit_price=Decimal("8"),
    )

    result = CalculateOwnershipCost().execute(electric)

    assert result.breakdown["fuel"] == Decimal("150000")


# ============================================================================
# BREAKDOWN INVARIANTS
# ============================================================================


def test_breakdown_lists_every_category_in_order(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(req)

    assert tuple(result.breakdown) == COST_CATEGORIES


def test_total_is_sum_of_breakdown_without_financing(req: OwnershipRequest) -> None:
    financed = replace(req, include_financing=True, monthly_financing_payment=Decimal("16413.23"))

    result = CalculateOwnershipCost().execute(financed)

    expected = sum((result.breakdown[c] for c in TOTAL_COST_CATEGORIES), Decimal("0"))
    assert result.total_cost == expected
    assert "financing" not in TOTAL_COST_CATEGORIES


def test_financing_is_reported_but_not_totalled(req: OwnershipRequest) -> None:
    uc = CalculateOwnershipCost()
    financed = replace(req, include_financing=True, monthly_financing_payment=Decimal("20000"))

    without = uc.execute(req)
    with_financing = uc.execute(financed)

    assert with_financing.breakdown["financing"] == Decimal("1200000")
    assert with_financing.total_cost == without.total_cost
    assert with_financing.monthly_cost == without.monthly_cost


def test_financing_payment_ignored_when_not_included(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(
        replace(req, include_financing=False, monthly_financing_payment=Decimal("20000"))
    )

    assert result.breakdown["financing"] == 0


def test_monthly_cost_spreads_total_over_horizon(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(req)

    assert result.monthly_cost == result.total_cost / 60


def test_breakdown_is_read_only(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(req)

    with pytest.raises(TypeError):
        result.breakdown["fuel"] = Decimal("0")  # type: ignore[index]


# ============================================================================
# EDGE CASES
# ============================================================================


@pytest.mark.parametrize("years", [0, -3])
def test_non_positive_horizon_returns_zeros(req: OwnershipRequest, years: int) -> None:
    result = CalculateOwnershipCost().execute(replace(req, ownership_years=years))

    assert result.total_cost == 0
    assert result.monthly_cost == 0
    assert result.total_depreciation == 0
    assert all(value == 0 for value in result.breakdown.values())
    assert result.estimated_resale_value == req.vehicle_price
    assert all(share == 0 for share in result.breakdown_share_percent.values())
    assert result.depreciation_percent == 0


def test_zero_fuel_efficiency_means_no_fuel_cost(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(replace(req, fuel_efficiency=Decimal("0")))

    assert result.breakdown["fuel"] == 0


def test_zero_depreciation_rate_keeps_full_value(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(
        replace(req, annual_depreciation_rate_percent=Decimal("0"))
    )

    assert result.total_depreciation == 0
    assert result.estimated_resale_value == req.vehicle_price


def test_full_depreciation_in_first_year(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(
        replace(req, annual_depreciation_rate_percent=Decimal("100"))
    )

    assert result.total_depreciation == req.vehicle_price
    assert result.estimated_resale_value == 0


def test_same_input_gives_identical_output(req: OwnershipRequest) -> None:
    uc = CalculateOwnershipCost()

    assert uc.execute(req) == uc.execute(req)


# ============================================================================
# SHARES
# ============================================================================


def test_depreciation_percent_is_share_of_price_lost(req: OwnershipRequest) -> None:
    """1 - 0.87^5 = 0.5015790793."""
    result = CalculateOwnershipCost().execute(req)

    assert result.depreciation_percent == Decimal("50.15790793")


def test_shares_of_totalled_categories_add_up_to_hundred(req: OwnershipRequest) -> None:
    result = CalculateOwnershipCost().execute(req)

    shares = result.breakdown_share_percent
    assert list(shares) == list(COST_CATEGORIES)
    assert abs(sum(shares[c] for c in TOTAL_COST_CATEGORIES) - 100) < Decimal("0.000001")
    assert abs(shares["fuel"] - Decimal("44.6755")) < Decimal("0.001")
    assert shares["financing"] == 0


def test_financing_share_is_measured_against_the_same_total(req: OwnershipRequest) -> None:
    financed = replace(req, include_financing=True, monthly_financing_payment=Decimal("20000"))

    result = CalculateOwnershipCost().execute(financed)

    assert result.breakdown_share_percent["financing"] == (
        Decimal("1200000") / result.total_cost * 100
    )
    assert 95 < result.breakdown_share_percent["financing"] < 96


def test_zero_total_gives_zero_shares(req: OwnershipRequest) -> None:
    free = replace(
        req,
        annual_distance=Decimal("0"),
        annual_maintenance_cost=Decimal("0"),
        annual_insurance_cost=Decimal("0"),
        one_time_registration_fee=Decimal("0"),
        annual_depreciation_rate_percent=Decimal("0"),
        include_financing=True,
        monthly_financing_payment=Decimal("5000"),
    )

    result = CalculateOwnershipCost().execute(free)

    assert result.total_cost == 0
    assert all(share == 0 for share in result.breakdown_share_percent.values())
