import math
from typing import Mapping, Optional

from dcf_valuation.models.request import ValuationInput

# Raw field name -> ValuationInput attribute, in the order fields are checked.
FIELD_MAP: dict[str, str] = {
    "fcf": "fcf_base",
    "shares": "total_shares",
    "r": "discount_rate_pct",
    "gp": "perpetual_growth_pct",
    "n": "years",
    "g": "avg_growth_rate_pct",
}
INTEGER_FIELDS = {"n"}


class InputError(ValueError):
    """Raw input could not be turned into a ValuationInput."""
    def __init__(self, message: str, field: str):
        self.field = field
        super().__init__(message)


class MissingParameterError(InputError):
    def __init__(self, field: str):
        super().__init__(f"missing parameter: {field}", field)


class MalformedNumberError(InputError):
    def __init__(self, field: str, value: str):
        self.value = value
        super().__init__(f"malformed number for parameter: {field}", field)


def _text(field: str, raw: object) -> str:
    if raw is None:
        return ""
    # Uploaded files and other non-text form values are not numbers
    if not isinstance(raw, str):
        raise MalformedNumberError(field, "")
    return raw.strip()


def parse_float(field: str, raw: Optional[str]) -> float:
    text = _text(field, raw)
    if not text:
        raise MissingParameterError(field)
    try:
        value = float(text)
    except ValueError:
        raise MalformedNumberError(field, text)
    if not math.isfinite(value):
        raise MalformedNumberError(field, text)
    return value


def parse_int(field: str, raw: Optional[str]) -> int:
    text = _text(field, raw)
    if not text:
        raise MissingParameterError(field)
    try:
        return int(text)
    except ValueError:
        raise MalformedNumberError(field, text)


def parse_valuation_input(raw: Mapping[str, Optional[str]]) -> ValuationInput:
    """Build a ValuationInput from raw strings keyed by fcf/shares/r/gp/n/g.

    Only syntax is checked here; domain rules (years >= 1, shares > 0, r > gp)
    are left to the valuation engine.
    """
    values: dict[str, float | int] = {}
    for field, attr in FIELD_MAP.items():
        parse = parse_int if field in INTEGER_FIELDS else parse_float
        values[attr] = parse(field, raw.get(field))
    return ValuationInput(**values)
