from dataclasses import replace

from core.schema import PlanInputs

BASELINE = PlanInputs(
    initial_deposit=10000,
    contribution=500,
    contribution_frequency="monthly",
    interest_rate=7,
    years=10,
    compounding_frequency="monthly",
    inflation_rate=0,
    tax_rate=0,
)


def plan(**overrides) -> PlanInputs:
    return replace(BASELINE, **overrides)


def bare_plan(**overrides) -> PlanInputs:
    """A plan with nothing set except `overrides`."""
    return replace(PlanInputs(), **overrides)
