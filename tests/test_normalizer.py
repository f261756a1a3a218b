import math

import pytest

from core.config import ProjectionConfig
from core.schema import CONTRIBUTION_FREQUENCIES, PlanInputs
from core.utils import coerce_number
from engine.normalizer import canonical_label, horizon_months, normalize_inputs
from tests.helpers import bare_plan, plan


def test_all_missing_fields_default_to_zero_and_monthly():
    inputs = PlanInputs(
        initial_deposit=None,
        contribution=None,
        contribution_frequency=None,
        annual_step_up=None,
        interest_rate=None,
        years=None,
        compounding_frequency=None,
        inflation_rate=None,
        tax_rate=None,
        tax_timing=None,
        target_amount=None,
        currency=None,
    )
    p = normalize_inputs(inputs)

    assert p.initial_deposit == 0.0
    assert p.monthly_contribution == 0.0
    assert p.annual_rate == 0.0
    assert p.total_months == 0
    assert p.contribution_frequency == "monthly"
    assert p.compounding_frequency == "monthly"
    assert p.periods_per_year == 12
    assert p.tax_timing == "end"
    assert p.currency == "USD"
    assert not p.has_goal


def test_nan_numerics_are_treated_as_missing():
    p = normalize_inputs(bare_plan(initial_deposit=float("nan"), interest_rate=float("nan"), years=float("nan")))
    assert p.initial_deposit == 0.0
    assert p.annual_rate == 0.0
    assert p.total_months == 0


@pytest.mark.parametrize(
    "frequency, expected",
    [("weekly", 433.3), ("bi-weekly", 216.6), ("monthly", 100.0), ("yearly", 100.0)],
)
def test_monthly_contribution_base(frequency, expected):
    p = normalize_inputs(bare_plan(contribution=100, contribution_frequency=frequency))
    assert p.monthly_contribution == pytest.approx(expected)


@pytest.mark.parametrize("compounding, n", [("monthly", 12), ("quarterly", 4), ("yearly", 1)])
def test_periods_per_year(compounding, n):
    assert normalize_inputs(bare_plan(compounding_frequency=compounding)).periods_per_year == n


def test_variance_rates():
    p = normalize_inputs(bare_plan(interest_rate=7))
    assert p.annual_rate == pytest.approx(0.07)
    assert p.optimistic_rate == pytest.approx(0.09)
    assert p.pessimistic_rate == pytest.approx(0.05)


def test_pessimistic_rate_floors_at_zero():
    p = normalize_inputs(bare_plan(interest_rate=1.5))
    assert p.pessimistic_rate == 0.0
    assert p.optimistic_rate == pytest.approx(0.035)


def test_variance_spread_comes_from_config():
    p = normalize_inputs(bare_plan(interest_rate=7), ProjectionConfig(variance_spread_pct=3.0))
    assert p.optimistic_rate == pytest.approx(0.10)
    assert p.pessimistic_rate == pytest.approx(0.04)


def test_labels_are_case_insensitive_with_aliases():
    assert canonical_label("Bi_Weekly", CONTRIBUTION_FREQUENCIES, "monthly") == "bi-weekly"
    assert canonical_label("BIWEEKLY", CONTRIBUTION_FREQUENCIES, "monthly") == "bi-weekly"
    assert canonical_label(" Yearly ", CONTRIBUTION_FREQUENCIES, "monthly") == "yearly"
    assert canonical_label("daily", CONTRIBUTION_FREQUENCIES, "monthly") == "monthly"


def test_unknown_tax_timing_defaults_to_end():
    assert normalize_inputs(bare_plan(tax_timing="quarterly")).tax_timing == "end"


def test_horizon_months_bounds():
    assert horizon_months(10) == 120
    assert horizon_months(0) == 0
    assert horizon_months(-5) == 0
    assert horizon_months(150) == 1200
    assert horizon_months(math.inf) == 1200
    assert horizon_months(2.5) == 30


def test_truncation_is_reported():
    assert normalize_inputs(plan(years=101)).truncated
    assert normalize_inputs(plan(years=101)).horizon_years == 100
    assert not normalize_inputs(plan(years=100)).truncated
    assert not normalize_inputs(plan(years=-3)).truncated


def test_negative_rates_pass_through():
    p = normalize_inputs(bare_plan(interest_rate=-4, inflation_rate=-1, tax_rate=-10))
    assert p.annual_rate == pytest.approx(-0.04)
    assert p.inflation_rate == pytest.approx(-0.01)
    assert p.tax_rate == pytest.approx(-0.10)
    assert p.pessimistic_rate == 0.0


@pytest.mark.parametrize("value, expected", [
    (10**400, math.inf),
    (-(10**400), -math.inf),
    (True, 0.0),
    (math.nan, 0.0),
    ("3.5", 3.5),
])
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_amounts_beyond_float_range_normalize_to_infinity():
    p = normalize_inputs(bare_plan(initial_deposit=10**400, years=10**400))
    assert p.initial_deposit == math.inf
    assert p.total_months == 1200
