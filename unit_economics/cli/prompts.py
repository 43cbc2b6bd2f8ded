from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


@dataclass(frozen=True)
class FieldHelp:
    title: str
    what: str
    where_how: str
    why: str
    who: str
    prompt: str


CAC_HELP = FieldHelp(
    title="Customer Acquisition Cost (CAC) — dollars per new customer",
    what="The average fully-loaded cost to acquire one new customer (ads, sales commissions, SDR/AE time, agency fees, attributable tooling).",
    where_how="From finance or growth analytics: take sales+marketing spend for a period and divide by the number of new customers acquired in that period.",
    why="Determines how much cash you invest upfront and affects payback and ROI.",
    who="Any business acquiring customers (SaaS, e-commerce, services, marketplaces).",
    prompt="Enter CAC in dollars",
)

CFA_HELP = FieldHelp(
    title="Cash From Activities (CFA) — cash collected upfront per customer",
    what="Cash collected at or before acquisition: deposits, setup fees, prepayments, first invoice paid upfront.",
    where_how="From pricing/billing: look at typical cash collected at purchase or at contract signature.",
    why="Offsets CAC, lowering your net cash outlay and risk while speeding up payback.",
    who="Businesses that collect money upfront. If you don't, enter 0.",
    prompt="Enter CFA in dollars",
)

LTGP_HELP = FieldHelp(
    title="Lifetime Gross Profit (LTGP) — total gross profit per customer",
    what="Sum of (revenue - cost of goods sold) you expect over the customer's lifetime.",
    where_how="From cohort LTV or unit economics: monthly gross profit x expected lifetime (months), or lifetime revenue x gross margin.",
    why="Primary measure of value; used to judge whether CAC is justified.",
    who="The segment/cohort you're modeling. Use a conservative estimate.",
    prompt="Enter LTGP in dollars",
)

EARLY_GP_RATE_HELP = FieldHelp(
    title="Early Gross Profit Rate — % of LTGP earned per period at the start",
    what="Share of lifetime gross profit you realize per chosen period in the early customer lifecycle.",
    where_how="From recent cohorts: average gross profit per period over the first few periods, divided by LTGP.",
    why="Used to estimate how quickly you recover your upfront cash (payback period).",
    who="Applies to your early lifecycle; enter 0 if unknown to skip payback.",
    prompt="Enter early gross profit rate in percent (0-100)",
)

PERIOD_HELP = FieldHelp(
    title="Period Unit — time unit used for the payback estimate",
    what="The unit of time you want the payback estimate expressed in.",
    where_how="Choose the unit that matches how you measure early profit (e.g., if early GP is weekly, choose weeks).",
    why="Ensures the payback figure is in a meaningful unit.",
    who="Anyone estimating payback.",
    prompt="Choose a period unit",
)

LOW_CAC_FRACTION_HELP = FieldHelp(
    title="Low CAC Threshold — fraction of LTGP considered 'low CAC'",
    what="A heuristic boundary: CAC is low when CAC <= threshold x LTGP.",
    where_how="Use 0.10 (10%) by default; adjust to your risk tolerance and capital availability.",
    why="Affects the quadrant label and qualitative guidance.",
    who="Anyone using the quadrant classification.",
    prompt="Enter threshold as a fraction (e.g., 0.10 for 10%)",
)


def parse_money_like(s: str) -> Optional[float]:
    """Parse '2,500.75' or '$500' into a float; None when it is not a number."""
    cleaned = s.replace(",", "").replace("$", "").strip()
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def _print_help(h: FieldHelp, out: OutputFn, where_label: str = "Where/how to get it") -> None:
    out("")
    out(h.title)
    out(f"• What it is: {h.what}")
    out(f"• {where_label}: {h.where_how}")
    out(f"• Why it matters: {h.why}")
    out(f"• Who it applies to: {h.who}")


def prompt_number(
    h: FieldHelp,
    default: Optional[float] = None,
    check: Optional[Callable[[float], None]] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> float:
    """Ask until a number is entered that passes `check` (a validator raising ValueError)."""
    while True:
        _print_help(h, output_fn)
        hint = f" [default: {default:.2f}]" if default is not None else ""
        raw = input_fn(f"{h.prompt}{hint}: ").strip()
        if not raw and default is not None:
            return default
        value = parse_money_like(raw)
        if value is None:
            output_fn("Please enter a valid number (e.g., 500, 2500.75).")
            continue
        if check is not None:
            try:
                check(value)
            except ValueError as e:
                output_fn(f"That value won't work ({e}). Please try again.")
                continue
        return value


def prompt_choice(
    h: FieldHelp,
    choices: Sequence[str],
    default: str,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> str:
    while True:
        _print_help(h, output_fn, where_label="Where/how to choose")
        output_fn(f"Options: {', '.join(choices)}")
        raw = input_fn(f"{h.prompt} [default: {default}]: ").strip().lower()
        choice = raw or default
        if choice in (c.lower() for c in choices):
            return choice
        output_fn(f"Please enter one of: {', '.join(choices)}")
