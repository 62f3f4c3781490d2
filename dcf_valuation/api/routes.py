import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from dcf_valuation.api.dependencies import get_templates
from dcf_valuation.models.request import ValuationInput
from dcf_valuation.models.valuations import ValuationResult
from dcf_valuation.services.input_parser import FIELD_MAP, InputError, parse_valuation_input
from dcf_valuation.valuation.dcf import compute_dcf_valuation

logger = logging.getLogger(__name__)

pages = APIRouter(tags=["pages"])
router = APIRouter(prefix="/api/valuations", tags=["valuations"])


def _render(
    templates: Jinja2Templates,
    request: Request,
    status_code: int = 200,
    **context,
) -> HTMLResponse:
    data = {"result": None, "error": "", "inputs": None, "form": {}}
    data.update(context)
    return templates.TemplateResponse(request, "index.html", data, status_code=status_code)


@pages.get("/", response_class=HTMLResponse)
async def index(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    """Empty valuation form."""
    return _render(templates, request)


@pages.post("/compute", response_class=HTMLResponse)
async def compute_form(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    """Run a valuation from the HTML form and render the step-by-step report.

    The user's raw values are always sent back so the form stays filled in;
    the parsed input is echoed as well whenever parsing succeeded.
    """
    form = await request.form()
    raw = {field: form.get(field) for field in FIELD_MAP}
    refill = {field: value for field, value in raw.items() if isinstance(value, str)}

    try:
        inputs = parse_valuation_input(raw)
    except InputError as e:
        logger.warning(f"Form input rejected ({e.field}): {e}")
        return _render(templates, request, status_code=400, error=str(e), form=refill)

    outcome = compute_dcf_valuation(inputs)
    if not outcome.ok:
        logger.info(f"Valuation rejected: {outcome.error.code.value}")
        return _render(
            templates, request, status_code=422,
            error=outcome.error.message, form=refill, inputs=inputs,
        )

    logger.info(f"Valuation computed: N={inputs.years}, per-share={outcome.result.per_share_value:.6f}")
    return _render(templates, request, result=outcome.result, form=refill, inputs=inputs)


@router.post("", response_model=ValuationResult)
async def create_valuation(inputs: ValuationInput):
    """Run a valuation from a JSON body and return every intermediate step."""
    outcome = compute_dcf_valuation(inputs)
    if not outcome.ok:
        raise HTTPException(status_code=422, detail=outcome.error.model_dump(mode="json"))
    return outcome.result
