from __future__ import annotations
from dataclasses import dataclass
import math

# CAC is "low" when it is at most this fraction of LTGP
DEFAULT_LOW_CAC_FRACTION = 0.10
DEFAULT_PERIOD_LABEL = "days"


class InvalidInput(ValueError):
    """A scenario value violates its domain. Carries the offending field name."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


@dataclass(frozen=True)
class ScenarioInput:
    cac: float   # customer acquisition cost, currency units
    cfa: float   # cash collected upfront from the customer
    ltgp: float  # lifetime gross profit per customer
    low_cac_fraction: float = DEFAULT_LOW_CAC_FRACTION
    early_gp_rate: float = 0.0  # % of LTGP realized per period early in the lifecycle
    period_label: str = DEFAULT_PERIOD_LABEL  # display only


def _finite(field: str, value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(field, f"must be a number, got {value!r}") from None
    except OverflowError:
        raise InvalidInput(field, "is too large to represent") from None
    if not math.isfinite(v):
        raise InvalidInput(field, "must be a finite number")
    return v


def check_cac(cac: float) -> None:
    if not _finite("cac", cac) > 0:
        raise InvalidInput("cac", "must be greater than 0")


def check_ltgp(ltgp: float) -> None:
    if not _finite("ltgp", ltgp) > 0:
        raise InvalidInput("ltgp", "must be greater than 0")


def check_cfa(cfa: float) -> None:
    if _finite("cfa", cfa) < 0:
        raise InvalidInput("cfa", "must not be negative")


def check_low_cac_fraction(fraction: float) -> None:
    if not (0.0 < _finite("low_cac_fraction", fraction) <= 1.0):
        raise InvalidInput("low_cac_fraction", "must be in (0, 1]")


def check_early_gp_rate(rate: float) -> None:
    if not (0.0 <= _finite("early_gp_rate", rate) <= 100.0):
        raise InvalidInput("early_gp_rate", "must be a percent between 0 and 100")


def validate_input(s: ScenarioInput) -> None:
    """Raise InvalidInput for the first field outside its domain."""
    check_cac(s.cac)
    check_cfa(s.cfa)
    check_ltgp(s.ltgp)
    check_low_cac_fraction(s.low_cac_fraction)
    check_early_gp_rate(s.early_gp_rate)
    if not isinstance(s.period_label, str):
        raise InvalidInput("period_label", "must be a string")
