from __future__ import annotations
import os
from dataclasses import dataclass

from unit_economics.growth.inputs import DEFAULT_LOW_CAC_FRACTION, DEFAULT_PERIOD_LABEL

PERIOD_CHOICES = ("days", "weeks", "months", "years")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CalculatorConfig:
    default_period: str = DEFAULT_PERIOD_LABEL
    low_cac_fraction: float = DEFAULT_LOW_CAC_FRACTION
    log_level: str = "WARNING"


def get_calculator_config() -> CalculatorConfig:
    period = os.getenv("LTGP_DEFAULT_PERIOD", DEFAULT_PERIOD_LABEL).strip().lower()
    if period not in PERIOD_CHOICES:
        raise ValueError(f"LTGP_DEFAULT_PERIOD must be one of {', '.join(PERIOD_CHOICES)}")
    raw_fraction = os.getenv("LTGP_LOW_CAC_FRACTION", str(DEFAULT_LOW_CAC_FRACTION))
    try:
        fraction = float(raw_fraction)
    except ValueError:
        raise ValueError(f"LTGP_LOW_CAC_FRACTION must be a number, got {raw_fraction!r}") from None
    if not (0.0 < fraction <= 1.0):
        raise ValueError("LTGP_LOW_CAC_FRACTION must be in (0, 1]")
    log_level = os.getenv("LTGP_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LTGP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    return CalculatorConfig(
        default_period=period,
        low_cac_fraction=fraction,
        log_level=log_level,
    )


@dataclass(frozen=True)
class ApiConfig:
    api_key: str | None = None
    rate_limit_n: int = 5
    rate_limit_window_sec: float = 1.0
    host: str = "0.0.0.0"
    port: int = 8000
    trust_proxy: bool = False  # honour X-Forwarded-For only behind a known proxy


def get_api_config() -> ApiConfig:
    return ApiConfig(
        api_key=os.getenv("API_KEY") or None,
        rate_limit_n=int(os.getenv("RATE_LIMIT_N", "5")),
        rate_limit_window_sec=float(os.getenv("RATE_LIMIT_WINDOW_SEC", "1.0")),
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
        trust_proxy=os.getenv("TRUST_PROXY", "").strip().lower() in ("1", "true", "yes"),
    )
