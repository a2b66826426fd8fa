"""Configuration values for the FinTrack engine.

Defaults match the thresholds the dashboard has always used. Each one can be
overridden through a ``FINTRACK_*`` environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Alerts
LARGE_TRANSACTION_THRESHOLD = _env_float("FINTRACK_LARGE_TRANSACTION_THRESHOLD", 10000.0)
CATEGORY_CONCENTRATION_THRESHOLD = _env_float("FINTRACK_CATEGORY_CONCENTRATION_THRESHOLD", 0.5)

# Daily pace tiers, as multiples of the daily budget
PACE_GOOD_MULTIPLIER = _env_float("FINTRACK_PACE_GOOD_MULTIPLIER", 1.0)
PACE_CAUTION_MULTIPLIER = _env_float("FINTRACK_PACE_CAUTION_MULTIPLIER", 1.2)

# Budget usage tiers, in percent
BUDGET_CAUTION_PERCENT = _env_float("FINTRACK_BUDGET_CAUTION_PERCENT", 70.0)
BUDGET_DANGER_PERCENT = _env_float("FINTRACK_BUDGET_DANGER_PERCENT", 90.0)

DEFAULT_CURRENCY = os.getenv("FINTRACK_CURRENCY", "INR")


@dataclass(frozen=True)
class Thresholds:
    """Rule constants passed explicitly into the engine."""

    large_transaction: float = LARGE_TRANSACTION_THRESHOLD
    category_concentration: float = CATEGORY_CONCENTRATION_THRESHOLD
    pace_good: float = PACE_GOOD_MULTIPLIER
    pace_caution: float = PACE_CAUTION_MULTIPLIER
    budget_caution_percent: float = BUDGET_CAUTION_PERCENT
    budget_danger_percent: float = BUDGET_DANGER_PERCENT
