from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from unit_economics.config.env import LOG_LEVELS, PERIOD_CHOICES, CalculatorConfig, get_calculator_config
from unit_economics.exports.reports import evaluation_md, evaluation_text
from unit_economics.growth.engine import evaluate, result_as_dict
from unit_economics.growth.inputs import (
    InvalidInput,
    ScenarioInput,
    check_cac,
    check_cfa,
    check_early_gp_rate,
    check_low_cac_fraction,
    check_ltgp,
)
from unit_economics.cli import prompts
from unit_economics.cli.prompts import InputFn, OutputFn

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2
EXIT_CONFIG_ERROR = 2
EXIT_ABORTED = 130


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ltgp-cac",
        description="LTGP:CAC calculator: places a growth scenario in a CAC/CFA quadrant and estimates payback.",
    )
    ap.add_argument("-i", "--interactive", action="store_true",
                    help="Launch the guided form for any value not given as a flag")
    ap.add_argument("--cac", type=float, help="Cost to acquire a customer (CAC), in dollars")
    ap.add_argument("--cfa", type=float, help="Cash the customer gives you upfront (CFA), in dollars")
    ap.add_argument("--ltgp", type=float, help="Lifetime gross profit per customer (LTGP), in dollars")
    ap.add_argument("--early-gp-rate", type=float,
                    help="Percent of LTGP earned per period early in the lifecycle (0-100)")
    ap.add_argument("--period", type=str.lower, choices=PERIOD_CHOICES,
                    help="Period unit for the payback estimate")
    ap.add_argument("--low-cac-fraction", type=float,
                    help="CAC counts as low when CAC <= fraction * LTGP (e.g., 0.10)")
    ap.add_argument("--format", choices=("text", "markdown", "json"), default="text",
                    help="Output format")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                    help="Logging level (default from LTGP_LOG_LEVEL)")
    return ap


def needs_guided_form(args: argparse.Namespace) -> bool:
    return args.interactive or args.cac is None or args.ltgp is None


def collect_input(
    args: argparse.Namespace,
    cfg: CalculatorConfig,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> ScenarioInput:
    """Turn flags into a ScenarioInput, prompting for whatever the flags left out."""
    if not needs_guided_form(args):
        return ScenarioInput(
            cac=args.cac,
            cfa=args.cfa if args.cfa is not None else 0.0,
            ltgp=args.ltgp,
            low_cac_fraction=args.low_cac_fraction if args.low_cac_fraction is not None else cfg.low_cac_fraction,
            early_gp_rate=args.early_gp_rate if args.early_gp_rate is not None else 0.0,
            period_label=args.period or cfg.default_period,
        )

    output_fn("\nWelcome! This guided form will help you estimate growth economics.")
    output_fn("You can press Enter to accept defaults where shown.")

    def ask(value: Optional[float], h: prompts.FieldHelp, default: Optional[float], check) -> float:
        if value is not None:
            return value
        return prompts.prompt_number(h, default=default, check=check, input_fn=input_fn, output_fn=output_fn)

    cac = ask(args.cac, prompts.CAC_HELP, None, check_cac)
    cfa = ask(args.cfa, prompts.CFA_HELP, 0.0, check_cfa)
    ltgp = ask(args.ltgp, prompts.LTGP_HELP, None, check_ltgp)
    early_gp_rate = ask(args.early_gp_rate, prompts.EARLY_GP_RATE_HELP, 0.0, check_early_gp_rate)
    period = args.period or prompts.prompt_choice(
        prompts.PERIOD_HELP, PERIOD_CHOICES, cfg.default_period, input_fn=input_fn, output_fn=output_fn,
    )
    low_cac_fraction = ask(args.low_cac_fraction, prompts.LOW_CAC_FRACTION_HELP,
                           cfg.low_cac_fraction, check_low_cac_fraction)
    return ScenarioInput(
        cac=cac,
        cfa=cfa,
        ltgp=ltgp,
        low_cac_fraction=low_cac_fraction,
        early_gp_rate=early_gp_rate,
        period_label=period,
    )


def render(result, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(result_as_dict(result), indent=2, allow_nan=False) + "\n"
    if fmt == "markdown":
        return evaluation_md(result)
    return evaluation_text(result)


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = get_calculator_config()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    logging.basicConfig(
        level=args.log_level or cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = collect_input(args, cfg, input_fn=input_fn, output_fn=output_fn)
    except (KeyboardInterrupt, EOFError):
        print("\naborted", file=sys.stderr)
        return EXIT_ABORTED

    try:
        result = evaluate(scenario)
    except InvalidInput as e:
        logger.warning("rejected scenario: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    output_fn(render(result, args.format).rstrip("\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
