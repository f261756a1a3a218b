"""
Per-month cashflow helpers for the simulation loop.

Month indices are 1-based: month 1 is the first simulated month, month 12
closes year 1. The same accrual function is applied to the main balance and
to both variance balances; only the rate (and, for the main balance, the tax
rate) differs.
"""

from __future__ import annotations

from typing import Tuple


def is_year_end(month: int) -> bool:
    return month % 12 == 0


def is_step_up_month(month: int) -> bool:
    """First month of every year after the first."""
    return month > 1 and (month - 1) % 12 == 0


def is_compounding_month(month: int, compounding_frequency: str) -> bool:
    if compounding_frequency == "monthly":
        return True
    if compounding_frequency == "quarterly":
        return month % 3 == 0
    return month % 12 == 0


def step_up(period_contribution: float, annual_step_up: float) -> float:
    """Raise the running contribution baseline by one year's step-up."""
    if annual_step_up > 0:
        return period_contribution * (1.0 + annual_step_up)
    return period_contribution


def contribution_due(month: int, period_contribution: float, yearly: bool) -> float:
    """
    Amount deposited this month. Sub-annual cadences deposit their
    monthly-equivalent every month; yearly deposits land on year-end months only.
    """
    if yearly:
        return period_contribution if is_year_end(month) else 0.0
    return period_contribution


def accrue_interest(
    balance: float,
    annual_rate: float,
    periods_per_year: int,
    tax_rate: float = 0.0,
) -> Tuple[float, float]:
    """
    One compounding period of interest on `balance`.

    Returns (gross_interest, tax). The amount to credit is gross - tax;
    pass tax_rate=0 when tax is deferred or not tracked.
    """
    gross = balance * (annual_rate / periods_per_year)
    tax = gross * tax_rate if tax_rate else 0.0
    return gross, tax
