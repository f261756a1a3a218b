"""
Plan report — headline figures and advisory flags for one projection.

Answers the questions a saver asks of the numbers:
  "Do I hit my target, and when?"        -> goal status
  "What is it worth in today's money?"   -> inflation-adjusted value vs deposits
  "How much does tax cost me?"           -> tax vs net interest
  "Did the horizon get cut short?"       -> truncation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.currency import format_currency
from core.schema import DEFAULT_CURRENCY, PlanInputs, ProjectionResult
from core.utils import coerce_number


@dataclass
class PlanReport:
    """Display-ready summary of a projection."""
    currency: str
    years: int

    final_balance: float
    final_balance_adjusted: float
    total_deposits: float
    total_interest: float
    total_tax: float

    target_amount: float
    goal_reached_year: Optional[int]

    doubling_time: float
    multiplier: float

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        money = lambda v: format_currency(v, self.currency)  # noqa: E731
        rows = [
            {"Metric": "Maturity Value", "Value": money(self.final_balance), "Unit": f"after {self.years} yr"},
            {"Metric": "Inflation Adjusted", "Value": money(self.final_balance_adjusted), "Unit": ""},
            {"Metric": "Total Deposits", "Value": money(self.total_deposits), "Unit": ""},
            {"Metric": "Total Interest", "Value": money(self.total_interest), "Unit": ""},
            {"Metric": "Tax Paid", "Value": money(self.total_tax), "Unit": ""},
            {"Metric": "Doubling Time", "Value": f"{self.doubling_time:.1f}", "Unit": "years"},
            {"Metric": "Multiplier", "Value": f"{self.multiplier:.2f}x", "Unit": ""},
        ]
        if self.target_amount > 0:
            reached = f"year {self.goal_reached_year}" if self.goal_reached_year is not None else "not reached"
            rows.append({"Metric": "Goal", "Value": money(self.target_amount), "Unit": reached})
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def generate_plan_report(
    inputs: PlanInputs,
    result: ProjectionResult,
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> PlanReport:
    """
    Build a PlanReport from the inputs a projection was run with and its result.

    Flags are informational only:
      GOAL_NOT_REACHED   target set but never met within the horizon
      REAL_LOSS          inflation-adjusted value is below total deposits
      TAX_EXCEEDS_GAIN   tax paid is larger than the net interest kept
      HORIZON_TRUNCATED  requested horizon was longer than the cap
    """
    target = coerce_number(inputs.target_amount)
    requested_years = coerce_number(inputs.years)
    years = int(max(0.0, min(requested_years, float(config.max_years))))

    flags = []
    if target > 0 and result.goal_reached_year is None:
        flags.append(f"GOAL_NOT_REACHED: target not met within {years} years")
    if result.final_balance_adjusted < result.total_deposits:
        flags.append("REAL_LOSS: inflation-adjusted value is below total deposits")
    if result.total_tax > 0 and result.total_tax > result.total_interest:
        flags.append("TAX_EXCEEDS_GAIN: tax paid exceeds net interest earned")
    if requested_years > config.max_years:
        flags.append(f"HORIZON_TRUNCATED: projected {config.max_years} of {requested_years:g} years")

    return PlanReport(
        currency=str(inputs.currency or DEFAULT_CURRENCY),
        years=years,
        final_balance=result.final_balance,
        final_balance_adjusted=result.final_balance_adjusted,
        total_deposits=result.total_deposits,
        total_interest=result.total_interest,
        total_tax=result.total_tax,
        target_amount=target,
        goal_reached_year=result.goal_reached_year,
        doubling_time=result.doubling_time,
        multiplier=result.multiplier,
        flags=flags,
    )
