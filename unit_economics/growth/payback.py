from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math

from unit_economics.growth.inputs import (
    DEFAULT_PERIOD_LABEL,
    check_cac,
    check_cfa,
    check_early_gp_rate,
    check_ltgp,
)

# Rough day counts for the usual period labels; display only
DAYS_PER_PERIOD = {
    "days": 1.0,
    "weeks": 7.0,
    "months": 30.0,
    "years": 365.0,
}


class PaybackStatus(str, Enum):
    IMMEDIATE = "immediate"  # upfront cash already covers CAC
    ESTIMATED = "estimated"
    UNDEFINED = "undefined"  # no early gross profit to recover the outlay with


@dataclass(frozen=True)
class PaybackResult:
    status: PaybackStatus
    periods: Optional[float]  # None only when UNDEFINED
    net_to_recover: float
    period_label: str = DEFAULT_PERIOD_LABEL

    @property
    def is_defined(self) -> bool:
        return self.status is not PaybackStatus.UNDEFINED

    def whole_periods(self) -> Optional[int]:
        """Periods rounded up, for "pays back within N <label>" displays."""
        if self.periods is None:
            return None
        return int(math.ceil(self.periods))

    def approx_days(self) -> Optional[float]:
        if self.periods is None:
            return None
        per = DAYS_PER_PERIOD.get(self.period_label.strip().lower())
        if per is None:
            return None
        days = self.periods * per
        return days if math.isfinite(days) else None


def estimate_payback(
    cac: float,
    cfa: float,
    ltgp: float,
    early_gp_rate: float,
    period_label: str = DEFAULT_PERIOD_LABEL,
) -> PaybackResult:
    """Periods needed to recover max(0, cac - cfa) from early gross profit.

    Early gross profit per period is early_gp_rate percent of LTGP. A zero rate
    with cash still to recover yields an UNDEFINED result rather than an error.
    The returned period count is the exact quotient; rounding is left to callers.
    """
    check_cac(cac)
    check_cfa(cfa)
    check_ltgp(ltgp)
    check_early_gp_rate(early_gp_rate)

    net_to_recover = max(0.0, float(cac) - float(cfa))
    if net_to_recover == 0:
        return PaybackResult(PaybackStatus.IMMEDIATE, 0.0, 0.0, period_label)
    if early_gp_rate <= 0:
        return PaybackResult(PaybackStatus.UNDEFINED, None, net_to_recover, period_label)

    gp_per_period = (float(early_gp_rate) / 100.0) * float(ltgp)
    # A rate that underflows to 0 or a quotient that overflows has no usable estimate
    if gp_per_period <= 0:
        return PaybackResult(PaybackStatus.UNDEFINED, None, net_to_recover, period_label)
    periods = net_to_recover / gp_per_period
    if not math.isfinite(periods):
        return PaybackResult(PaybackStatus.UNDEFINED, None, net_to_recover, period_label)
    return PaybackResult(PaybackStatus.ESTIMATED, periods, net_to_recover, period_label)
