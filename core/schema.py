"""
Plan, year-record and result types shared by every stage of the projection.

The engine reads a PlanInputs, never mutates it, and hands back a
ProjectionResult whose yearly breakdown is an ordered tuple of YearRecords.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

# Cadence vocabularies (canonical labels).
CONTRIBUTION_FREQUENCIES: Tuple[str, ...] = ("weekly", "bi-weekly", "monthly", "yearly")
COMPOUNDING_FREQUENCIES: Tuple[str, ...] = ("monthly", "quarterly", "yearly")
TAX_TIMINGS: Tuple[str, ...] = ("yearly", "end")

DEFAULT_CONTRIBUTION_FREQUENCY = "monthly"
DEFAULT_COMPOUNDING_FREQUENCY = "monthly"
DEFAULT_TAX_TIMING = "end"
DEFAULT_CURRENCY = "USD"

# Column order of the tabular breakdown (matches the CSV export).
BREAKDOWN_COLUMNS: Tuple[str, ...] = (
    "Year",
    "Principal",
    "Contributions",
    "Total Interest",
    "Balance",
    "Inflation Adjusted",
    "Optimistic",
    "Pessimistic",
)


@dataclass(frozen=True)
class PlanInputs:
    """
    Caller-supplied plan parameters.

    Rates are percentages (7 means 7%). Any numeric field may also be None;
    the normalizer treats missing values as 0 and missing cadences as their
    defaults. `currency` is a display label only.
    """

    initial_deposit: Optional[float] = 0.0
    contribution: Optional[float] = 0.0
    contribution_frequency: Optional[str] = DEFAULT_CONTRIBUTION_FREQUENCY
    annual_step_up: Optional[float] = 0.0
    interest_rate: Optional[float] = 0.0
    years: Optional[float] = 0
    compounding_frequency: Optional[str] = DEFAULT_COMPOUNDING_FREQUENCY
    inflation_rate: Optional[float] = 0.0
    tax_rate: Optional[float] = 0.0
    tax_timing: Optional[str] = DEFAULT_TAX_TIMING
    target_amount: Optional[float] = 0.0
    currency: Optional[str] = DEFAULT_CURRENCY


@dataclass(frozen=True)
class YearRecord:
    """Snapshot of the running plan at the end of simulated year `year`."""

    year: int
    principal: float
    contributions: float  # cumulative, excluding the initial deposit
    interest: float  # balance - cumulative contributed (net growth)
    balance: float
    inflation_adjusted: float
    optimistic_balance: float
    pessimistic_balance: float


@dataclass(frozen=True)
class ProjectionResult:
    """Everything one call to the engine produces."""

    total_deposits: float
    total_interest: float  # final balance - total deposits, net of tax already deducted
    total_tax: float
    final_balance: float
    final_balance_adjusted: float
    yearly_breakdown: Tuple[YearRecord, ...] = field(default_factory=tuple)
    goal_reached_year: Optional[int] = None
    doubling_time: float = 0.0
    multiplier: float = 0.0

    @property
    def final_optimistic_balance(self) -> Optional[float]:
        if not self.yearly_breakdown:
            return None
        return self.yearly_breakdown[-1].optimistic_balance

    @property
    def final_pessimistic_balance(self) -> Optional[float]:
        if not self.yearly_breakdown:
            return None
        return self.yearly_breakdown[-1].pessimistic_balance
