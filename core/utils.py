from __future__ import annotations

import math
from typing import Any

import numpy as np


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Best-effort float conversion; None, NaN and unparseable values give `default`."""
    if value is None or isinstance(value, bool):
        return float(default)
    try:
        out = float(value)
    except (TypeError, ValueError):
        return float(default)
    except OverflowError:
        # ints beyond float range carry on as infinities
        return math.inf if value > 0 else -math.inf
    if math.isnan(out):
        return float(default)
    return out


def pct_to_decimal(pct: float) -> float:
    """7.0 -> 0.07"""
    return float(pct) / 100.0


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Division that returns `default` instead of raising or producing NaN."""
    if denominator == 0 or not np.isfinite(denominator):
        return float(default)
    out = float(numerator) / float(denominator)
    if math.isnan(out):
        return float(default)
    return out


def deflate(value: float, inflation_rate: float, years: float) -> float:
    """
    Present value of `value` after `years` of inflation: value / (1 + i)^years.
    `inflation_rate` is a decimal. A zero or overflowing deflator gives 0.0.
    """
    if years == 0:
        return float(value)
    with np.errstate(over="ignore", invalid="ignore"):
        factor = float(np.power(1.0 + float(inflation_rate), float(years)))
    return safe_divide(value, factor)


def goal_year(month: int) -> int:
    """Year index a month falls in: ceil(month / 12); month 0 is year 0."""
    return (int(month) + 11) // 12
