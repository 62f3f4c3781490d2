import math

import pytest
from dcf_valuation.models.request import ValuationInput
from dcf_valuation.models.valuations import ValuationErrorCode
from dcf_valuation.valuation.dcf import compute_dcf_valuation, discount_factor


def make_input(**overrides) -> ValuationInput:
    values = dict(
        fcf_base=10,
        total_shares=100,
        discount_rate_pct=10,
        perpetual_growth_pct=3,
        years=5,
        avg_growth_rate_pct=8,
    )
    values.update(overrides)
    return ValuationInput(**values)


def test_basic_dcf():
    inputs = make_input()
    outcome = compute_dcf_valuation(inputs)
    assert outcome.ok
    assert outcome.error is None
    result = outcome.result
    assert len(result.projected_fcfs) == 5
    assert len(result.discounted_fcfs) == 5
    assert result.projected_fcfs[0] == 10
    assert abs(result.per_share_value - result.firm_value / 100) < 1e-9


def test_provided_case():
    """Known figures for a ten-year forecast."""
    inputs = make_input(fcf_base=988.0, total_shares=12.52, years=10)
    result = compute_dcf_valuation(inputs).result
    assert abs(result.firm_value - 19485.7206) < 1e-3
    assert abs(result.per_share_value - 1556.367457) < 1e-6


def test_geometric_growth():
    result = compute_dcf_valuation(make_input(years=8, avg_growth_rate_pct=12.5)).result
    for prev, cur in zip(result.projected_fcfs, result.projected_fcfs[1:]):
        assert abs(cur - prev * 1.125) <= 1e-9 * abs(cur)


def test_discounting_and_terminal_value():
    result = compute_dcf_valuation(make_input(years=3)).result
    for t, (fcf, pv) in enumerate(zip(result.projected_fcfs, result.discounted_fcfs), start=1):
        assert abs(pv - fcf / 1.1 ** t) < 1e-9
    # TV = FCF_N * (1 + gp) / (r - gp)
    expected_tv = result.projected_fcfs[-1] * 1.03 / 0.07
    assert abs(result.terminal_value - expected_tv) < 1e-9
    assert abs(result.discounted_terminal_value - expected_tv / 1.1 ** 3) < 1e-9
    expected_firm = sum(result.discounted_fcfs) + result.discounted_terminal_value
    assert abs(result.firm_value - expected_firm) < 1e-9


def test_single_year():
    result = compute_dcf_valuation(make_input(years=1)).result
    assert result.projected_fcfs == [10]
    assert abs(result.discounted_fcfs[0] - 10 / 1.1) < 1e-12


def test_negative_growth_and_cash_flow():
    result = compute_dcf_valuation(make_input(fcf_base=-5, avg_growth_rate_pct=-20)).result
    assert result.projected_fcfs[0] == -5
    assert result.firm_value < 0


def test_idempotent():
    inputs = make_input(fcf_base=988.0, total_shares=12.52, years=10)
    assert compute_dcf_valuation(inputs) == compute_dcf_valuation(inputs)


@pytest.mark.parametrize("r, gp", [(5, 5), (5, 6), (-1, 0)])
def test_discount_rate_not_above_perpetual_growth(r, gp):
    outcome = compute_dcf_valuation(
        make_input(discount_rate_pct=r, perpetual_growth_pct=gp, years=3)
    )
    assert not outcome.ok
    assert outcome.result is None
    assert outcome.error.code == ValuationErrorCode.INVALID_RATE_RELATION


@pytest.mark.parametrize("years", [0, -1])
def test_invalid_years(years):
    outcome = compute_dcf_valuation(make_input(years=years))
    assert outcome.error.code == ValuationErrorCode.INVALID_YEARS
    assert "years" in outcome.error.message


@pytest.mark.parametrize("shares", [0, -12.5])
def test_invalid_shares(shares):
    outcome = compute_dcf_valuation(make_input(total_shares=shares))
    assert outcome.error.code == ValuationErrorCode.INVALID_SHARES


def test_years_checked_before_shares_and_rates():
    outcome = compute_dcf_valuation(
        make_input(years=0, total_shares=0, discount_rate_pct=1, perpetual_growth_pct=2)
    )
    assert outcome.error.code == ValuationErrorCode.INVALID_YEARS


def test_non_finite_input_rejected():
    with pytest.raises(ValueError):
        make_input(fcf_base=float("nan"))


def test_long_horizon_discount_factor_saturates():
    """(1 + r)^t beyond the float range counts as infinite, so those PVs are zero."""
    inputs = make_input(years=10000, avg_growth_rate_pct=0)
    outcome = compute_dcf_valuation(inputs)
    assert outcome.ok
    result = outcome.result
    assert len(result.projected_fcfs) == 10000
    assert len(result.discounted_fcfs) == 10000
    assert result.discounted_fcfs[-1] == 0.0
    assert result.discounted_terminal_value == 0.0
    assert math.isfinite(result.firm_value)
    # sum of 10 / 1.1^t over all t is 100
    assert abs(result.firm_value - 100.0) < 1e-9
    assert abs(result.per_share_value - 1.0) < 1e-11


def test_discount_factor():
    assert discount_factor(1.1, 2) == 1.1 ** 2
    assert discount_factor(1.1, 10000) == math.inf
    assert discount_factor(-1.5, 10001) == -math.inf
    assert discount_factor(-1.5, 10000) == math.inf
