import argparse
import logging
import sys
from typing import Callable

from pydantic import ValidationError

from dcf_valuation.config import LOG_LEVELS, configure_logging
from dcf_valuation.models.request import ValuationInput
from dcf_valuation.services.input_parser import InputError, parse_float, parse_int
from dcf_valuation.services.report import format_report
from dcf_valuation.valuation.dcf import compute_dcf_valuation

logger = logging.getLogger(__name__)

PROMPTS = [
    ("fcf", "Next-year free cash flow: "),
    ("shares", "Total shares: "),
    ("r", "Discount rate / WACC (%): "),
    ("gp", "Perpetual growth rate (%): "),
    ("n", "Forecast years N: "),
    ("g", "Average FCF growth rate over N years (%): "),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dcf-valuation",
        description="Two-stage DCF valuation with a step-by-step report. "
                    "Prompts interactively unless --fcf, --shares, --r and --n are all given.",
    )
    parser.add_argument("--fcf", type=float, help="Next-year free cash flow")
    parser.add_argument("--shares", type=float, help="Total shares (same unit scale as FCF)")
    parser.add_argument("--r", type=float, help="Discount rate / WACC in percent")
    parser.add_argument("--gp", type=float, default=0.0, help="Perpetual growth rate in percent (default 0)")
    parser.add_argument("--n", type=int, help="Number of forecast years")
    parser.add_argument("--g", type=float, default=0.0, help="Average FCF growth over N years in percent (default 0)")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Override DCF_LOG_LEVEL",
    )
    return parser


def _prompt(label: str, field: str, parse: Callable[[str, str], float | int]) -> float | int:
    while True:
        text = input(label)
        try:
            return parse(field, text)
        except InputError:
            print("Please enter a valid integer" if parse is parse_int else "Please enter a valid number")


def prompt_interactive() -> ValuationInput:
    print("Enter the following parameters (numbers only):")
    values = {
        field: _prompt(label, field, parse_int if field == "n" else parse_float)
        for field, label in PROMPTS
    }
    return ValuationInput(
        fcf_base=values["fcf"],
        total_shares=values["shares"],
        discount_rate_pct=values["r"],
        perpetual_growth_pct=values["gp"],
        years=values["n"],
        avg_growth_rate_pct=values["g"],
    )


def inputs_from_args(args: argparse.Namespace) -> ValuationInput | None:
    if None in (args.fcf, args.shares, args.r, args.n):
        return None
    return ValuationInput(
        fcf_base=args.fcf,
        total_shares=args.shares,
        discount_rate_pct=args.r,
        perpetual_growth_pct=args.gp,
        years=args.n,
        avg_growth_rate_pct=args.g,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        inputs = inputs_from_args(args)
    except ValidationError:
        print("error: flag values must be finite numbers", file=sys.stderr)
        return 1
    if inputs is None:
        try:
            inputs = prompt_interactive()
        except EOFError:
            print("error: input aborted", file=sys.stderr)
            return 1

    outcome = compute_dcf_valuation(inputs)
    if not outcome.ok:
        logger.info(f"Valuation rejected: {outcome.error.code.value}")
        print(f"error: {outcome.error.message}", file=sys.stderr)
        return 1

    print(format_report(inputs, outcome.result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
