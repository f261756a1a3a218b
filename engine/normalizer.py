"""
Input normalizer — turns a PlanInputs (any field possibly missing) into the
canonical rate/period representation the monthly loop runs on.

  1. Missing / NaN numerics -> 0
  2. Missing or unrecognised cadence labels -> their defaults
  3. Percentages -> decimals
  4. Horizon -> bounded month count (config.max_months)
  5. Contribution -> monthly-equivalent base (weekly x4.333, bi-weekly x2.166,
     monthly as-is, yearly held whole for the year-end month)
  6. Variance rates: optimistic = rate + 2pp, pessimistic = max(0, rate - 2pp)

Nothing here raises for out-of-range numbers; they are carried as given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import (
    COMPOUNDING_FREQUENCIES,
    CONTRIBUTION_FREQUENCIES,
    DEFAULT_COMPOUNDING_FREQUENCY,
    DEFAULT_CONTRIBUTION_FREQUENCY,
    DEFAULT_CURRENCY,
    DEFAULT_TAX_TIMING,
    TAX_TIMINGS,
    PlanInputs,
)
from core.utils import coerce_number, pct_to_decimal

# Accepted spellings -> canonical label.
FREQUENCY_ALIASES: Dict[str, str] = {
    "biweekly": "bi-weekly",
    "bi_weekly": "bi-weekly",
    "fortnightly": "bi-weekly",
    "annually": "yearly",
    "annual": "yearly",
}

# Compounding periods per year.
PERIODS_PER_YEAR: Dict[str, int] = {"monthly": 12, "quarterly": 4, "yearly": 1}


def canonical_label(value: Optional[str], allowed: tuple, default: str) -> str:
    """Case-insensitive enum lookup with aliases; anything else gives `default`."""
    if value is None:
        return default
    label = str(value).strip().lower()
    label = FREQUENCY_ALIASES.get(label, label)
    return label if label in allowed else default


@dataclass(frozen=True)
class NormalizedPlan:
    """Canonical, decimal-rate view of a plan. All rates are decimals."""

    initial_deposit: float
    contribution_frequency: str
    monthly_contribution: float  # per-month base; for yearly cadence, the annual amount
    annual_step_up: float
    interest_rate_pct: float
    annual_rate: float
    optimistic_rate: float
    pessimistic_rate: float
    compounding_frequency: str
    periods_per_year: int
    inflation_rate: float
    tax_rate: float
    tax_timing: str
    target_amount: float
    requested_years: float
    total_months: int
    currency: str

    @property
    def horizon_years(self) -> int:
        """Number of complete simulated years (<= config.max_years)."""
        return self.total_months // 12

    @property
    def truncated(self) -> bool:
        return self.requested_years * 12 > self.total_months

    @property
    def yearly_contributions(self) -> bool:
        return self.contribution_frequency == "yearly"

    @property
    def has_goal(self) -> bool:
        return self.target_amount > 0


def monthly_contribution_base(
    amount: float, frequency: str, config: ProjectionConfig = DEFAULT_CONFIG
) -> float:
    if frequency == "weekly":
        return amount * config.weekly_factor
    if frequency == "bi-weekly":
        return amount * config.biweekly_factor
    # monthly: unscaled; yearly: whole amount applied in the year-end month
    return amount


def horizon_months(years: float, config: ProjectionConfig = DEFAULT_CONFIG) -> int:
    """min(years * 12, cap), floored at 0. Infinite horizons hit the cap."""
    return int(max(0.0, min(years * 12.0, float(config.max_months))))


def normalize_inputs(
    inputs: PlanInputs, config: ProjectionConfig = DEFAULT_CONFIG
) -> NormalizedPlan:
    contribution_frequency = canonical_label(
        inputs.contribution_frequency, CONTRIBUTION_FREQUENCIES, DEFAULT_CONTRIBUTION_FREQUENCY
    )
    compounding_frequency = canonical_label(
        inputs.compounding_frequency, COMPOUNDING_FREQUENCIES, DEFAULT_COMPOUNDING_FREQUENCY
    )
    tax_timing = canonical_label(inputs.tax_timing, TAX_TIMINGS, DEFAULT_TAX_TIMING)

    rate_pct = coerce_number(inputs.interest_rate)
    spread = config.variance_spread_pct
    years = coerce_number(inputs.years)

    return NormalizedPlan(
        initial_deposit=coerce_number(inputs.initial_deposit),
        contribution_frequency=contribution_frequency,
        monthly_contribution=monthly_contribution_base(
            coerce_number(inputs.contribution), contribution_frequency, config
        ),
        annual_step_up=pct_to_decimal(coerce_number(inputs.annual_step_up)),
        interest_rate_pct=rate_pct,
        annual_rate=pct_to_decimal(rate_pct),
        optimistic_rate=pct_to_decimal(rate_pct + spread),
        pessimistic_rate=pct_to_decimal(max(0.0, rate_pct - spread)),
        compounding_frequency=compounding_frequency,
        periods_per_year=PERIODS_PER_YEAR[compounding_frequency],
        inflation_rate=pct_to_decimal(coerce_number(inputs.inflation_rate)),
        tax_rate=pct_to_decimal(coerce_number(inputs.tax_rate)),
        tax_timing=tax_timing,
        target_amount=coerce_number(inputs.target_amount),
        requested_years=years,
        total_months=horizon_months(years, config),
        currency=str(inputs.currency).strip().upper() if inputs.currency else DEFAULT_CURRENCY,
    )
