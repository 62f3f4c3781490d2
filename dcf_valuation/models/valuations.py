from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValuationErrorCode(str, Enum):
    INVALID_YEARS = "InvalidYears"
    INVALID_SHARES = "InvalidShares"
    INVALID_RATE_RELATION = "InvalidRateRelation"


class ValuationError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ValuationErrorCode
    message: str


class ValuationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    projected_fcfs: list[float] = Field(..., description="Projected FCF for years 1..N")
    discounted_fcfs: list[float] = Field(..., description="Present value of each projected FCF")
    terminal_value: float = Field(..., description="Perpetuity value at the end of year N")
    discounted_terminal_value: float = Field(..., description="Terminal value discounted to today")
    firm_value: float
    per_share_value: float


class ValuationOutcome(BaseModel):
    """Either a full result or the reason the inputs were rejected."""
    model_config = ConfigDict(frozen=True)

    result: Optional[ValuationResult] = None
    error: Optional[ValuationError] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "ValuationOutcome":
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of result or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
