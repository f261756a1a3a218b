import pandas as pd
import pytest

from core.schema import BREAKDOWN_COLUMNS, DEFAULT_CURRENCY
from engine.runner import project
from summary.aggregator import (
    composition,
    export_breakdown_csv,
    variance_band_frame,
    yearly_breakdown_frame,
)
from summary.metrics import doubling_time, growth_multiplier, inflation_adjusted_balance
from summary.report import generate_plan_report
from tests.helpers import bare_plan, plan


def test_metric_guards():
    assert doubling_time(8) == pytest.approx(9.0)
    assert doubling_time(0) == 0.0
    assert doubling_time(-1) == 0.0
    assert growth_multiplier(200, 100) == pytest.approx(2.0)
    assert growth_multiplier(200, 0) == 0.0
    assert inflation_adjusted_balance(1000, 0.0, 10) == 1000
    assert inflation_adjusted_balance(1000, 0.1, 0) == 1000
    assert inflation_adjusted_balance(1210, 0.1, 2) == pytest.approx(1000)


def test_yearly_breakdown_frame():
    result = project(plan())
    df = yearly_breakdown_frame(result)

    assert list(df.columns) == list(BREAKDOWN_COLUMNS)
    assert len(df) == 10
    assert df["Year"].tolist() == list(range(1, 11))
    assert df["Balance"].iloc[-1] == pytest.approx(result.final_balance)
    assert (df["Optimistic"] >= df["Balance"]).all()
    assert (df["Pessimistic"] <= df["Balance"]).all()


def test_yearly_breakdown_frame_empty_horizon():
    df = yearly_breakdown_frame(project(plan(years=0)))
    assert len(df) == 0
    assert list(df.columns) == list(BREAKDOWN_COLUMNS)


def test_variance_band_frame():
    band = variance_band_frame(project(plan(years=4)))
    assert len(band) == 12
    assert set(band["series"]) == {"Pessimistic", "Expected", "Optimistic"}


def test_composition_includes_tax_only_when_paid():
    untaxed = composition(project(plan()))
    assert set(untaxed) == {"Total Deposits", "Total Interest"}

    taxed = composition(project(plan(tax_rate=20)))
    assert taxed["Tax Paid"] > 0


def test_export_breakdown_csv(tmp_path):
    result = project(plan(years=3))
    path = tmp_path / "breakdown.csv"
    text = export_breakdown_csv(result, path)

    lines = text.strip().splitlines()
    assert lines[0] == "Year,Principal,Contributions,Total Interest,Balance,Inflation Adjusted"
    assert len(lines) == 4
    assert lines[1].startswith("1,10000.00,6000.00,")
    assert path.read_text(encoding="utf-8") == text

    df = pd.read_csv(path)
    assert df["Balance"].iloc[-1] == pytest.approx(round(result.final_balance, 2))


def test_export_breakdown_csv_with_variance():
    text = export_breakdown_csv(project(plan(years=1)), include_variance=True)
    assert text.splitlines()[0].endswith("Optimistic,Pessimistic")


# --- Plan report ---

def test_report_flags_unreached_goal_and_truncation():
    inputs = bare_plan(contribution=10, years=120, target_amount=1e9)
    report = generate_plan_report(inputs, project(inputs))

    codes = [flag.split(":")[0] for flag in report.flags]
    assert "GOAL_NOT_REACHED" in codes
    assert "HORIZON_TRUNCATED" in codes
    assert report.years == 100


def test_report_flags_real_loss():
    inputs = plan(interest_rate=0, inflation_rate=10)
    report = generate_plan_report(inputs, project(inputs))
    assert any(flag.startswith("REAL_LOSS") for flag in report.flags)


def test_report_clean_plan_has_no_flags():
    inputs = plan(target_amount=50000)
    result = project(inputs)
    report = generate_plan_report(inputs, result)

    assert report.flags == []
    assert report.goal_reached_year == result.goal_reached_year

    table = report.to_dataframe()
    assert "Goal" in table["Metric"].tolist()
    goal_row = table[table["Metric"] == "Goal"].iloc[0]
    assert goal_row["Unit"] == f"year {result.goal_reached_year}"


def test_report_formats_in_plan_currency():
    inputs = plan(currency="GBP")
    table = generate_plan_report(inputs, project(inputs)).to_dataframe()
    deposits = table[table["Metric"] == "Total Deposits"].iloc[0]["Value"]
    assert deposits == "£70,000"


def test_report_without_currency_uses_default():
    inputs = plan(currency=None)
    report = generate_plan_report(inputs, project(inputs))
    assert report.currency == DEFAULT_CURRENCY
    deposits = report.to_dataframe().set_index("Metric").loc["Total Deposits", "Value"]
    assert deposits == "$70,000"
