import math

from dcf_valuation.models.request import ValuationInput
from dcf_valuation.models.valuations import (
    ValuationError, ValuationErrorCode, ValuationOutcome, ValuationResult,
)


def discount_factor(base: float, periods: int) -> float:
    """base ** periods, saturating to +/-inf instead of raising OverflowError."""
    try:
        return base ** periods
    except OverflowError:
        return -math.inf if base < 0 and periods % 2 else math.inf


def _reject(code: ValuationErrorCode, message: str) -> ValuationOutcome:
    return ValuationOutcome(error=ValuationError(code=code, message=message))


def _project_fcfs(fcf_base: float, growth: float, n_years: int) -> list[float]:
    """Geometric FCF series; fcf_base is already the year-1 figure."""
    fcfs: list[float] = []
    current = fcf_base
    for _ in range(n_years):
        fcfs.append(current)
        current = current * (1.0 + growth)
    return fcfs


def compute_dcf_valuation(inputs: ValuationInput) -> ValuationOutcome:
    """Two-stage DCF: explicit forecast years plus a Gordon growth terminal value.

    1) FCF_t = FCF_{t-1} * (1 + g)
    2) PV_t = FCF_t / (1 + r)^t
    3) TV_N = FCF_N * (1 + gp) / (r - gp), PV_TV = TV_N / (1 + r)^N
    4) Firm = sum(PV_t) + PV_TV
    5) PerShare = Firm / TotalShares

    Invalid inputs are returned as an error outcome, never raised.
    """
    if inputs.years < 1:
        return _reject(ValuationErrorCode.INVALID_YEARS, "years must be >= 1")
    if inputs.total_shares <= 0:
        return _reject(ValuationErrorCode.INVALID_SHARES, "total shares must be > 0")

    r = inputs.discount_rate_pct / 100.0
    g = inputs.avg_growth_rate_pct / 100.0
    gp = inputs.perpetual_growth_pct / 100.0

    if r <= gp:
        return _reject(
            ValuationErrorCode.INVALID_RATE_RELATION,
            "discount rate must be greater than perpetual growth rate",
        )

    n_years = inputs.years
    projected = _project_fcfs(inputs.fcf_base, g, n_years)

    discounted: list[float] = []
    sum_pv = 0.0
    for t in range(1, n_years + 1):
        pv = projected[t - 1] / discount_factor(1.0 + r, t)
        discounted.append(pv)
        sum_pv += pv

    terminal_value = projected[-1] * (1.0 + gp) / (r - gp)
    pv_terminal = terminal_value / discount_factor(1.0 + r, n_years)

    firm_value = sum_pv + pv_terminal

    return ValuationOutcome(result=ValuationResult(
        projected_fcfs=projected,
        discounted_fcfs=discounted,
        terminal_value=terminal_value,
        discounted_terminal_value=pv_terminal,
        firm_value=firm_value,
        per_share_value=firm_value / inputs.total_shares,
    ))
