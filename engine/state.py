"""
Mutable running state for one projection.

Created fresh per call and discarded when the call returns; nothing is
shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.schema import YearRecord
from core.utils import deflate, goal_year

from .normalizer import NormalizedPlan


@dataclass
class SimulationState:
    balance: float
    total_contributed: float
    gross_interest: float
    total_tax: float
    period_contribution: float
    optimistic_balance: float
    pessimistic_balance: float
    goal_reached_year: Optional[int] = None

    @classmethod
    def start(cls, plan: NormalizedPlan) -> "SimulationState":
        state = cls(
            balance=plan.initial_deposit,
            total_contributed=plan.initial_deposit,
            gross_interest=0.0,
            total_tax=0.0,
            period_contribution=plan.monthly_contribution,
            optimistic_balance=plan.initial_deposit,
            pessimistic_balance=plan.initial_deposit,
        )
        # a goal already met by the opening deposit is reached in year 0
        state.check_goal(plan, month=0)
        return state

    def deposit(self, amount: float) -> None:
        self.balance += amount
        self.optimistic_balance += amount
        self.pessimistic_balance += amount
        self.total_contributed += amount

    def check_goal(self, plan: NormalizedPlan, month: int) -> None:
        """Set the goal marker the first time the balance meets the target; never cleared."""
        if self.goal_reached_year is not None or not plan.has_goal:
            return
        if self.balance >= plan.target_amount:
            self.goal_reached_year = goal_year(month)


def snapshot_year(state: SimulationState, plan: NormalizedPlan, year: int) -> YearRecord:
    return YearRecord(
        year=year,
        principal=plan.initial_deposit,
        contributions=state.total_contributed - plan.initial_deposit,
        interest=state.balance - state.total_contributed,
        balance=state.balance,
        inflation_adjusted=deflate(state.balance, plan.inflation_rate, year),
        optimistic_balance=state.optimistic_balance,
        pessimistic_balance=state.pessimistic_balance,
    )
