from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict
import logging
import math

from unit_economics.growth.inputs import InvalidInput, ScenarioInput, validate_input
from unit_economics.growth.classifier import Classification, Quadrant, classify_regions
from unit_economics.growth.payback import PaybackResult, estimate_payback
from unit_economics.growth.verdict import Tone, verdict, verdict_tone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioResult:
    inputs: ScenarioInput
    classification: Classification
    net_outlay: float  # cac - cfa; negative when the customer prepays more than CAC
    ratio: float       # ltgp / cac
    payback: PaybackResult
    tone: Tone
    verdict: str

    @property
    def quadrant(self) -> Quadrant:
        return self.classification.quadrant


def evaluate(s: ScenarioInput) -> ScenarioResult:
    """Validate a scenario, then classify it, estimate payback and pick a verdict.

    Raises InvalidInput before any computation when a field is out of range.
    """
    validate_input(s)
    ratio = float(s.ltgp) / float(s.cac)
    if not math.isfinite(ratio):
        raise InvalidInput("ltgp", "LTGP:CAC ratio is too large to represent")

    cls = classify_regions(s.cac, s.cfa, s.ltgp, s.low_cac_fraction)
    payback = estimate_payback(s.cac, s.cfa, s.ltgp, s.early_gp_rate, s.period_label)
    net_outlay = float(s.cac) - float(s.cfa)
    tone = verdict_tone(cls.quadrant, net_outlay, ratio)

    logger.debug(
        "evaluated scenario quadrant=%s ratio=%.4f net_outlay=%.2f payback=%s",
        cls.quadrant.value, ratio, net_outlay, payback.status.value,
    )
    return ScenarioResult(
        inputs=s,
        classification=cls,
        net_outlay=net_outlay,
        ratio=ratio,
        payback=payback,
        tone=tone,
        verdict=verdict(cls.quadrant, net_outlay, ratio),
    )


def evaluate_values(**kwargs: Any) -> ScenarioResult:
    return evaluate(ScenarioInput(**kwargs))


def result_as_dict(r: ScenarioResult) -> Dict[str, Any]:
    cls = r.classification
    return {
        "inputs": {
            "cac": r.inputs.cac,
            "cfa": r.inputs.cfa,
            "ltgp": r.inputs.ltgp,
            "low_cac_fraction": r.inputs.low_cac_fraction,
            "early_gp_rate": r.inputs.early_gp_rate,
            "period": r.inputs.period_label,
        },
        "quadrant": cls.quadrant.value,
        "quadrant_title": cls.quadrant.title,
        "cac_level": cls.cac_level.value,
        "cfa_level": cls.cfa_level.value,
        "low_cac_threshold": cls.cac_cut,
        "net_outlay": r.net_outlay,
        "ratio": r.ratio,
        "payback": {
            "status": r.payback.status.value,
            "periods": r.payback.periods,
            "period": r.payback.period_label,
            "net_to_recover": r.payback.net_to_recover,
            "approx_days": r.payback.approx_days(),
        },
        "tone": r.tone.value,
        "verdict": r.verdict,
    }
