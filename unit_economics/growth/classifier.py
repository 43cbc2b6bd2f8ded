from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from unit_economics.growth.inputs import (
    DEFAULT_LOW_CAC_FRACTION,
    check_cac,
    check_cfa,
    check_low_cac_fraction,
    check_ltgp,
)

# CFA counts as "high" once the customer covers half of CAC upfront
HIGH_CFA_FRACTION = 0.5


class CacLevel(str, Enum):
    LOW = "low"
    HIGH = "high"

    @property
    def label(self) -> str:
        if self is CacLevel.LOW:
            return "Low CAC (cheap to acquire a customer)"
        return "High CAC (expensive to acquire a customer)"


class CfaLevel(str, Enum):
    HIGH = "high"
    LOW = "low"

    @property
    def label(self) -> str:
        if self is CfaLevel.HIGH:
            return "High CFA (customer covers much of your cost upfront)"
        return "Low CFA (customer covers little upfront)"


class Quadrant(str, Enum):
    SELF_FUNDING_GROWTH = "self_funding_growth"
    CASH_LIGHT_EFFICIENCY = "cash_light_efficiency"
    DEFERRED_CASH_RISK = "deferred_cash_risk"
    CAPITAL_INTENSIVE_TRAP = "capital_intensive_trap"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def cac_level(self) -> CacLevel:
        return _LEVELS[self][0]

    @property
    def cfa_level(self) -> CfaLevel:
        return _LEVELS[self][1]


QUADRANT_TABLE: Dict[Tuple[CacLevel, CfaLevel], Quadrant] = {
    (CacLevel.LOW, CfaLevel.HIGH): Quadrant.SELF_FUNDING_GROWTH,
    (CacLevel.LOW, CfaLevel.LOW): Quadrant.CASH_LIGHT_EFFICIENCY,
    (CacLevel.HIGH, CfaLevel.HIGH): Quadrant.DEFERRED_CASH_RISK,
    (CacLevel.HIGH, CfaLevel.LOW): Quadrant.CAPITAL_INTENSIVE_TRAP,
}

_LEVELS: Dict[Quadrant, Tuple[CacLevel, CfaLevel]] = {q: k for k, q in QUADRANT_TABLE.items()}

_TITLES = {
    Quadrant.SELF_FUNDING_GROWTH: "Self-Funding Growth",
    Quadrant.CASH_LIGHT_EFFICIENCY: "Cash-Light Efficiency",
    Quadrant.DEFERRED_CASH_RISK: "Deferred-Cash Risk",
    Quadrant.CAPITAL_INTENSIVE_TRAP: "Capital-Intensive Trap",
}

_DESCRIPTIONS = {
    Quadrant.SELF_FUNDING_GROWTH: "customers pay for themselves upfront.",
    Quadrant.CASH_LIGHT_EFFICIENCY: "customers are cheap to get, but you need some working capital.",
    Quadrant.DEFERRED_CASH_RISK: "customers are expensive, but upfront payments soften the blow.",
    Quadrant.CAPITAL_INTENSIVE_TRAP: "customers are expensive and pay little upfront; very risky.",
}


@dataclass(frozen=True)
class Classification:
    cac_level: CacLevel
    cfa_level: CfaLevel
    quadrant: Quadrant
    cac_cut: float  # low_cac_fraction * ltgp
    cfa_cut: float  # HIGH_CFA_FRACTION * cac


def cac_level(cac: float, cac_cut: float) -> CacLevel:
    # Boundary is inclusive to LOW
    return CacLevel.LOW if 0 < cac <= cac_cut else CacLevel.HIGH


def cfa_level(cfa: float, cac: float) -> CfaLevel:
    # Boundary is inclusive to HIGH
    return CfaLevel.HIGH if cfa >= HIGH_CFA_FRACTION * cac else CfaLevel.LOW


def classify_regions(
    cac: float,
    cfa: float,
    ltgp: float,
    low_cac_fraction: float = DEFAULT_LOW_CAC_FRACTION,
) -> Classification:
    """Place a scenario on both axes and resolve its quadrant.

    Comparisons are exact (no tolerance), so CAC equal to the cut is Low and
    CFA equal to half of CAC is High.
    """
    check_cac(cac)
    check_cfa(cfa)
    check_ltgp(ltgp)
    check_low_cac_fraction(low_cac_fraction)

    cac, cfa, ltgp = float(cac), float(cfa), float(ltgp)
    cac_cut = float(low_cac_fraction) * ltgp
    c = cac_level(cac, cac_cut)
    f = cfa_level(cfa, cac)
    return Classification(
        cac_level=c,
        cfa_level=f,
        quadrant=QUADRANT_TABLE[(c, f)],
        cac_cut=cac_cut,
        cfa_cut=HIGH_CFA_FRACTION * cac,
    )


def classify(
    cac: float,
    cfa: float,
    ltgp: float,
    low_cac_fraction: float = DEFAULT_LOW_CAC_FRACTION,
) -> Quadrant:
    return classify_regions(cac, cfa, ltgp, low_cac_fraction).quadrant
