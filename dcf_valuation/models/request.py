from pydantic import BaseModel, ConfigDict, Field


class ValuationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    fcf_base: float = Field(..., allow_inf_nan=False, description="Free cash flow of the next period (end of year 1)")
    total_shares: float = Field(..., allow_inf_nan=False, description="Total share count, in the same unit scale as the cash flows")
    discount_rate_pct: float = Field(..., allow_inf_nan=False, description="Discount rate / WACC in percent (10 means 10%)")
    perpetual_growth_pct: float = Field(..., allow_inf_nan=False, description="Perpetual growth rate after year N, in percent")
    years: int = Field(..., description="Number of explicit forecast years N")
    avg_growth_rate_pct: float = Field(..., allow_inf_nan=False, description="Average FCF growth rate over the N forecast years, in percent")
