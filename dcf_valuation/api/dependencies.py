import os
from functools import lru_cache

from fastapi.templating import Jinja2Templates

from dcf_valuation.valuation.dcf import discount_factor

WEB_DIR = os.path.join(os.path.dirname(__file__), "..", "web")
TEMPLATE_DIR = os.path.join(WEB_DIR, "templates")
STATIC_DIR = os.path.join(WEB_DIR, "static")


def one_plus_pct(pct: float) -> float:
    """1 + p/100, the base of (1 + r)^t."""
    return 1.0 + pct / 100.0


@lru_cache
def get_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=TEMPLATE_DIR)
    templates.env.globals["one_plus_pct"] = one_plus_pct
    templates.env.globals["pow"] = discount_factor
    return templates
