"""
End-of-term tax settlement.

With tax timing "end" nothing is withheld inside the loop; once the loop
finishes, tax is charged on the net gain (final balance - total contributed)
and replaces whatever total the loop carried. A non-positive gain owes no tax.
Timing "yearly" has already been settled period by period and is left alone.
"""

from __future__ import annotations

from .normalizer import NormalizedPlan
from .state import SimulationState


def settle_tax(state: SimulationState, plan: NormalizedPlan) -> float:
    """Apply deferred tax to `state` in place. Returns the tax charged here."""
    if plan.tax_timing != "end":
        return 0.0

    taxable = state.balance - state.total_contributed
    tax = taxable * plan.tax_rate if taxable > 0 else 0.0
    state.balance -= tax
    state.total_tax = tax
    return tax
