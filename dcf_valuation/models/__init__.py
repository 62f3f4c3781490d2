from dcf_valuation.models.request import ValuationInput
from dcf_valuation.models.valuations import (
    ValuationErrorCode, ValuationError, ValuationResult, ValuationOutcome,
)

__all__ = [
    "ValuationInput",
    "ValuationErrorCode", "ValuationError", "ValuationResult", "ValuationOutcome",
]
