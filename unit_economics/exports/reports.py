from __future__ import annotations
from typing import List

from unit_economics.growth.engine import ScenarioResult
from unit_economics.growth.payback import PaybackStatus

NOTES = [
    "A lifetime return ratio above 3 means clients are worth it in the long run.",
    "If net outlay is zero, clients are financing their own acquisition.",
    "Low CAC and High CFA together create the safest and fastest growth.",
]


def payback_sentence(r: ScenarioResult) -> str:
    p = r.payback
    if p.status is PaybackStatus.IMMEDIATE:
        return "Payback is immediate: upfront cash already covers acquisition cost."
    if p.status is PaybackStatus.UNDEFINED:
        return "Payback period could not be estimated. Provide an early gross profit rate above 0 to calculate it."
    days = p.approx_days()
    if days is None:
        return f"Estimated payback period: {p.periods:.2f} {p.period_label}."
    return f"Estimated payback period: {p.periods:.2f} {p.period_label} (≈ {days:.1f} days)."


def evaluation_text(r: ScenarioResult) -> str:
    """Plain-text evaluation as printed by the command line tool."""
    s = r.inputs
    cls = r.classification
    net_cash = max(0.0, r.net_outlay)
    lines: List[str] = [
        "=== Growth Model Evaluation ===",
        "",
        f"You spend about ${s.cac:,.2f} to acquire a customer.",
        f"The customer gives you about ${s.cfa:,.2f} upfront.",
        f"Over their lifetime, you expect to make ${s.ltgp:,.2f} in gross profit.",
        "",
        "That means:",
        f" - Net cash you actually lay out upfront: ${net_cash:,.2f}.",
        f" - Lifetime return ratio (LTGP divided by CAC): {r.ratio:.2f}.",
        f" - CAC classification: {cls.cac_level.label}",
        f" - CFA classification: {cls.cfa_level.label}",
        f" - Quadrant: {cls.quadrant.title}: {cls.quadrant.description}",
        "",
        f"Verdict: {r.verdict}",
        "",
        payback_sentence(r),
        "",
        "Notes:",
    ]
    lines.extend(f" - {n}" for n in NOTES)
    return "\n".join(lines) + "\n"


def evaluation_md(r: ScenarioResult) -> str:
    s = r.inputs
    cls = r.classification
    lines = [
        "# Growth Model Evaluation",
        "",
        "## Inputs",
        f"- CAC: {s.cac:.2f}",
        f"- CFA: {s.cfa:.2f}",
        f"- LTGP: {s.ltgp:.2f}",
        f"- Low CAC fraction: {s.low_cac_fraction:.2f}",
        f"- Early gross profit rate: {s.early_gp_rate:.2f}% per {s.period_label}",
        "",
        "## Result",
        f"- Quadrant: **{cls.quadrant.title}** ({cls.cac_level.value} CAC, {cls.cfa_level.value} CFA)",
        f"- Low CAC threshold: {cls.cac_cut:.2f}",
        f"- Net outlay: {r.net_outlay:.2f}",
        f"- LTGP:CAC ratio: {r.ratio:.2f}",
        f"- Payback: {payback_sentence(r)}",
        "",
        "## Verdict",
        r.verdict,
    ]
    return "\n".join(lines) + "\n"
