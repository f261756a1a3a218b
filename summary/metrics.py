"""
Post-loop summary statistics.

  - inflation-adjusted final balance = final / (1 + inflation)^years
  - doubling time (Rule of 72)       = 72 / rate%        (0 when rate <= 0)
  - multiplier                       = final / deposits  (0 when deposits <= 0)

Every division is guarded so no input produces NaN or raises.
"""

from __future__ import annotations

from core.utils import deflate, safe_divide

RULE_OF_72 = 72.0


def inflation_adjusted_balance(final_balance: float, inflation_rate: float, years: float) -> float:
    """`inflation_rate` is a decimal (0.025 for 2.5%)."""
    return deflate(final_balance, inflation_rate, years)


def doubling_time(interest_rate_pct: float) -> float:
    """Rule-of-72 years to double at a nominal rate given in percent."""
    if interest_rate_pct <= 0:
        return 0.0
    return safe_divide(RULE_OF_72, interest_rate_pct)


def growth_multiplier(final_balance: float, total_contributed: float) -> float:
    if total_contributed <= 0:
        return 0.0
    return safe_divide(final_balance, total_contributed)
