"""
Projection runner — drives one plan through the monthly simulation.

Stages run once each, in order:
  normalize_inputs -> iter_months (year snapshots inside) -> settle_tax -> summary metrics

Per-month transition (fixed order):
  1. step-up the running contribution on the first month of years 2+
  2. deposit this month's contribution (main + both variance balances)
  3. skip interest unless this is a compounding month
  4. accrue interest: main (tax withheld if timing is "yearly"),
     optimistic at rate+2pp and pessimistic at max(0, rate-2pp), both untaxed
  5. goal check (first hit only)
  6. on year-end months, snapshot a YearRecord

The loop is bounded by config.max_months; a horizon of 0 (or less) runs no
months and returns the initial deposit unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import PlanInputs, ProjectionResult, YearRecord
from core.utils import goal_year
from summary.metrics import doubling_time, growth_multiplier, inflation_adjusted_balance

from .cashflow import (
    accrue_interest,
    contribution_due,
    is_compounding_month,
    is_step_up_month,
    is_year_end,
    step_up,
)
from .normalizer import NormalizedPlan, normalize_inputs
from .settlement import settle_tax
from .state import SimulationState, snapshot_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthStep:
    """What happened in one simulated month (state values are end-of-month)."""

    month: int
    year: int
    contribution: float
    gross_interest: float
    tax: float
    balance: float
    total_contributed: float
    optimistic_balance: float
    pessimistic_balance: float
    goal_reached_year: Optional[int]
    year_record: Optional[YearRecord] = None


def iter_months(
    plan: NormalizedPlan, state: Optional[SimulationState] = None
) -> Iterator[MonthStep]:
    """
    Advance `state` (a fresh one if omitted) one month at a time over the
    plan's horizon, yielding a MonthStep after each month.
    """
    if state is None:
        state = SimulationState.start(plan)

    for month in range(1, plan.total_months + 1):
        # 1. step-up
        if is_step_up_month(month):
            state.period_contribution = step_up(state.period_contribution, plan.annual_step_up)

        # 2. contribution
        deposit = contribution_due(month, state.period_contribution, plan.yearly_contributions)
        state.deposit(deposit)

        # 3-4. interest on compounding months
        gross = 0.0
        tax = 0.0
        if is_compounding_month(month, plan.compounding_frequency):
            withheld_rate = plan.tax_rate if plan.tax_timing == "yearly" else 0.0
            gross, tax = accrue_interest(
                state.balance, plan.annual_rate, plan.periods_per_year, withheld_rate
            )
            state.balance += gross - tax
            state.gross_interest += gross
            state.total_tax += tax

            opt_gross, _ = accrue_interest(
                state.optimistic_balance, plan.optimistic_rate, plan.periods_per_year
            )
            pes_gross, _ = accrue_interest(
                state.pessimistic_balance, plan.pessimistic_rate, plan.periods_per_year
            )
            state.optimistic_balance += opt_gross
            state.pessimistic_balance += pes_gross

        # 5. goal
        state.check_goal(plan, month)

        # 6. year-end snapshot
        record = snapshot_year(state, plan, month // 12) if is_year_end(month) else None

        yield MonthStep(
            month=month,
            year=goal_year(month),
            contribution=deposit,
            gross_interest=gross,
            tax=tax,
            balance=state.balance,
            total_contributed=state.total_contributed,
            optimistic_balance=state.optimistic_balance,
            pessimistic_balance=state.pessimistic_balance,
            goal_reached_year=state.goal_reached_year,
            year_record=record,
        )


def project(
    inputs: PlanInputs, *, config: Optional[ProjectionConfig] = None
) -> ProjectionResult:
    """
    Project a plan's future value. Synchronous, side-effect free, and total:
    never raises for any numeric input.
    """
    cfg = config or DEFAULT_CONFIG
    plan = normalize_inputs(inputs, cfg)

    if plan.truncated:
        logger.warning(
            "Horizon of %s years exceeds the %d-year cap; projecting %d years.",
            plan.requested_years, cfg.max_years, plan.horizon_years,
        )

    state = SimulationState.start(plan)
    yearly: List[YearRecord] = [
        step.year_record for step in iter_months(plan, state) if step.year_record is not None
    ]

    settle_tax(state, plan)

    final_balance = state.balance
    total_deposits = state.total_contributed

    logger.debug(
        "Projected %d months (rate=%.4f, n=%d, tax=%s@%.4f): final=%.2f deposits=%.2f gross_interest=%.2f",
        plan.total_months, plan.annual_rate, plan.periods_per_year, plan.tax_timing,
        plan.tax_rate, final_balance, total_deposits, state.gross_interest,
    )

    return ProjectionResult(
        total_deposits=total_deposits,
        total_interest=final_balance - total_deposits,
        total_tax=state.total_tax,
        final_balance=final_balance,
        final_balance_adjusted=inflation_adjusted_balance(
            final_balance, plan.inflation_rate, plan.total_months / 12.0
        ),
        yearly_breakdown=tuple(yearly),
        goal_reached_year=state.goal_reached_year,
        doubling_time=doubling_time(plan.interest_rate_pct),
        multiplier=growth_multiplier(final_balance, total_deposits),
    )
