from dcf_valuation.models.request import ValuationInput
from dcf_valuation.models.valuations import ValuationResult


def format_input_summary(inputs: ValuationInput) -> str:
    return (
        f"Inputs: next-year FCF={inputs.fcf_base:.4f}, shares={inputs.total_shares:.4f}, "
        f"WACC={inputs.discount_rate_pct:.2f}%, g={inputs.avg_growth_rate_pct:.2f}%, "
        f"gp={inputs.perpetual_growth_pct:.2f}%, N={inputs.years}"
    )


def format_report(inputs: ValuationInput, result: ValuationResult) -> str:
    """Render the five DCF steps followed by the input summary, one line per entry."""
    lines = [
        "",
        "DCF valuation, step by step:",
        "Step 1: project free cash flow for N years",
        f"  formula: FCF_t = FCF_{{t-1}} x (1 + g), g={inputs.avg_growth_rate_pct:.2f}%",
    ]
    for year, fcf in enumerate(result.projected_fcfs, start=1):
        lines.append(f"  year {year}: {fcf:.4f}")

    lines.append("Step 2: discount each year's FCF to present value")
    lines.append(f"  formula: PV_t = FCF_t / (1 + r)^t, r={inputs.discount_rate_pct:.2f}%")
    for year, pv in enumerate(result.discounted_fcfs, start=1):
        lines.append(f"  year {year} PV: {pv:.4f}")

    lines.extend([
        "Step 3: terminal value and its present value",
        f"  formula: TV = FCF_N x (1 + gp) / (r - gp), PV_TV = TV / (1 + r)^N, "
        f"gp={inputs.perpetual_growth_pct:.2f}%, r={inputs.discount_rate_pct:.2f}%, N={inputs.years}",
        f"  terminal value (end of year N): {result.terminal_value:.4f}",
        f"  present value: {result.discounted_terminal_value:.4f}",
        "Step 4: firm value",
        "  formula: Firm = sum(PV_t) + PV_TV",
        f"  firm value: {result.firm_value:.4f}",
        "Step 5: value per share",
        f"  formula: PerShare = Firm / TotalShares, TotalShares={inputs.total_shares:.4f}",
        f"  value per share: {result.per_share_value:.6f}",
        "",
        format_input_summary(inputs),
    ])
    return "\n".join(lines)
