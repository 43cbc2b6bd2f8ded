from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple

from unit_economics.growth.classifier import Quadrant

# LTGP:CAC above this is considered worth acquiring in the long run
STRONG_RATIO = 3.0


class Tone(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    CAUTION = "caution"
    FRAGILE = "fragile"
    WARNING = "warning"
    UNSUSTAINABLE = "unsustainable"


MESSAGES: Dict[Tone, str] = {
    Tone.EXCELLENT: "Excellent: Clients fully finance their own acquisition and profits are healthy (LTGP:CAC > 3).",
    Tone.GOOD: "Good: Profitable clients with quick payback; you just need a little cash buffer.",
    Tone.CAUTION: "Caution: Profitable clients, but growth is slower because they are costly to acquire.",
    Tone.FRAGILE: "Fragile: Profitable on paper, but requires heavy upfront spending and is hard to scale safely.",
    Tone.WARNING: "Warning: Clients cover acquisition costs upfront, but long-term profits are too small (LTGP:CAC ≤ 3).",
    Tone.UNSUSTAINABLE: "Unsustainable: You spend real money upfront and lifetime profits don’t justify it (LTGP:CAC ≤ 3).",
}

# Tone for a strong ratio with real cash still at risk
_STRONG_WITH_OUTLAY = {
    Quadrant.SELF_FUNDING_GROWTH: Tone.GOOD,
    Quadrant.CASH_LIGHT_EFFICIENCY: Tone.GOOD,
    Quadrant.DEFERRED_CASH_RISK: Tone.CAUTION,
    Quadrant.CAPITAL_INTENSIVE_TRAP: Tone.FRAGILE,
}


def _build_table() -> Dict[Tuple[Quadrant, bool, bool], Tone]:
    # key: (quadrant, cash_neutral, strong_ratio)
    table: Dict[Tuple[Quadrant, bool, bool], Tone] = {}
    for q in Quadrant:
        table[(q, True, True)] = Tone.EXCELLENT
        table[(q, False, True)] = _STRONG_WITH_OUTLAY[q]
        table[(q, True, False)] = Tone.WARNING
        table[(q, False, False)] = Tone.UNSUSTAINABLE
    return table


VERDICT_TABLE = _build_table()


def verdict_tone(quadrant: Quadrant, net_outlay: float, ratio: float) -> Tone:
    return VERDICT_TABLE[(Quadrant(quadrant), net_outlay <= 0, ratio > STRONG_RATIO)]


def verdict(quadrant: Quadrant, net_outlay: float, ratio: float) -> str:
    """Guidance sentence for a quadrant, refined by cash neutrality and LTGP:CAC strength."""
    return MESSAGES[verdict_tone(quadrant, net_outlay, ratio)]
