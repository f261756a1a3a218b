"""
Compound Planner — Investment Growth Dashboard
==============================================

Thin front-end over the projection engine:
  1. Sidebar:  every plan parameter (deposit, contributions, rates, tax, goal)
  2. Results:  headline cards, growth and variance charts, yearly breakdown
  3. Export:   CSV download and a share token that reproduces the plan

The engine is called once per "Calculate" click; nothing is persisted.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.currency import CURRENCIES, currency_info, format_compact, format_currency
from core.schema import (
    COMPOUNDING_FREQUENCIES,
    CONTRIBUTION_FREQUENCIES,
    TAX_TIMINGS,
    PlanInputs,
)
from core.utils import coerce_number

from engine.normalizer import canonical_label
from engine.runner import project

from inputs.loader import decode_share_token, encode_share_token
from inputs.validators import validate_inputs

from summary.aggregator import (
    composition,
    export_breakdown_csv,
    variance_band_frame,
    yearly_breakdown_frame,
)
from summary.report import generate_plan_report

# ---------------------------------------------------------------------------
# Starting values for the form
# ---------------------------------------------------------------------------
DEFAULT_PLAN = PlanInputs(
    initial_deposit=10000,
    contribution=500,
    contribution_frequency="monthly",
    annual_step_up=0,
    interest_rate=7,
    years=10,
    compounding_frequency="monthly",
    inflation_rate=2.5,
    tax_rate=0,
    tax_timing="end",
    target_amount=0,
    currency="USD",
)

# Widget ranges; shared-link values are clamped into these before seeding the form.
MAX_AMOUNT = 1e15
FORM_BOUNDS = {
    "initial_deposit": (0.0, MAX_AMOUNT),
    "contribution": (0.0, MAX_AMOUNT),
    "annual_step_up": (0.0, 1000.0),
    "interest_rate": (-100.0, 1000.0),
    "years": (0, 100),
    "inflation_rate": (0.0, 1000.0),
    "tax_rate": (0.0, 100.0),
    "target_amount": (0.0, MAX_AMOUNT),
}


def clamp_for_form(plan: PlanInputs) -> PlanInputs:
    """Fit a plan into the sidebar widgets: numbers into FORM_BOUNDS, labels canonical."""
    values = {}
    for name, (lo, hi) in FORM_BOUNDS.items():
        values[name] = min(max(coerce_number(getattr(plan, name)), lo), hi)
    values["years"] = int(values["years"])
    values["contribution_frequency"] = canonical_label(
        plan.contribution_frequency, CONTRIBUTION_FREQUENCIES, DEFAULT_PLAN.contribution_frequency
    )
    values["compounding_frequency"] = canonical_label(
        plan.compounding_frequency, COMPOUNDING_FREQUENCIES, DEFAULT_PLAN.compounding_frequency
    )
    values["tax_timing"] = canonical_label(plan.tax_timing, TAX_TIMINGS, DEFAULT_PLAN.tax_timing)
    values["currency"] = currency_info(plan.currency).code
    return replace(plan, **values)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_growth(breakdown: pd.DataFrame, *, currency: str, height=320):
    if len(breakdown) == 0:
        st.info("No completed years to plot.")
        return
    long = breakdown.melt(
        id_vars=["Year"],
        value_vars=["Contributions", "Total Interest", "Inflation Adjusted"],
        var_name="series",
        value_name="value",
    )
    symbol = currency_info(currency).symbol
    chart = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X("Year:O", title="Year"),
            y=alt.Y("value:Q", title=f"Amount ({symbol})", axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(title="Growth Over Time", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_variance(band: pd.DataFrame, *, height=320):
    if len(band) == 0:
        return
    chart = (
        alt.Chart(band).mark_line()
        .encode(
            x=alt.X("Year:O", title="Year"),
            y=alt.Y("value:Q", title="Balance", axis=alt.Axis(format=",.0f")),
            color=alt.Color(
                "series:N",
                title="Scenario",
                sort=["Pessimistic", "Expected", "Optimistic"],
            ),
        )
        .properties(title="Rate ±2pp Scenarios", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_composition(parts: dict, *, height=320):
    df = pd.DataFrame({"part": list(parts.keys()), "value": list(parts.values())})
    df = df[df["value"] > 0]
    if len(df) == 0:
        return
    chart = (
        alt.Chart(df).mark_arc(innerRadius=60)
        .encode(theta="value:Q", color=alt.Color("part:N", title=""))
        .properties(title="Composition", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Sidebar form
# ---------------------------------------------------------------------------
def _initial_plan() -> PlanInputs:
    token = st.query_params.get("data")
    if not token:
        return DEFAULT_PLAN
    try:
        shared = decode_share_token(token, base=DEFAULT_PLAN)
    except ValueError as e:
        st.warning(f"Ignoring shared link: {e}")
        return DEFAULT_PLAN
    seeded = clamp_for_form(shared)
    if seeded != shared:
        st.warning("Shared plan adjusted to fit the form.\n" + validate_inputs(shared).summary())
    return seeded


def _index(options, value, fallback=0):
    return options.index(value) if value in options else fallback


def _sidebar_form(start: PlanInputs) -> PlanInputs | None:
    with st.sidebar:
        st.header("Plan")
        with st.form("plan_form"):
            codes = list(CURRENCIES.keys())
            currency = st.selectbox(
                "Currency",
                options=codes,
                index=_index(codes, start.currency),
                format_func=lambda c: f"{c} - {CURRENCIES[c].name} ({CURRENCIES[c].symbol})",
            )
            initial_deposit = st.number_input("Initial deposit", *FORM_BOUNDS["initial_deposit"], value=float(start.initial_deposit or 0), step=1000.0)
            contribution = st.number_input("Contribution", *FORM_BOUNDS["contribution"], value=float(start.contribution or 0), step=50.0)
            contribution_frequency = st.selectbox(
                "Contribution frequency",
                options=list(CONTRIBUTION_FREQUENCIES),
                index=_index(list(CONTRIBUTION_FREQUENCIES), start.contribution_frequency, 2),
            )
            annual_step_up = st.number_input("Annual step-up (%)", *FORM_BOUNDS["annual_step_up"], value=float(start.annual_step_up or 0), step=1.0)

            st.divider()
            interest_rate = st.number_input("Interest rate (%)", *FORM_BOUNDS["interest_rate"], value=float(start.interest_rate or 0), step=0.25)
            years = st.number_input("Years", *FORM_BOUNDS["years"], value=int(start.years or 0), step=1)
            compounding_frequency = st.selectbox(
                "Compounding",
                options=list(COMPOUNDING_FREQUENCIES),
                index=_index(list(COMPOUNDING_FREQUENCIES), start.compounding_frequency),
            )
            inflation_rate = st.number_input("Inflation (%)", *FORM_BOUNDS["inflation_rate"], value=float(start.inflation_rate or 0), step=0.25)

            st.divider()
            tax_rate = st.slider("Tax on interest (%)", *FORM_BOUNDS["tax_rate"], value=float(start.tax_rate or 0))
            tax_timing = st.radio(
                "Tax timing",
                options=list(TAX_TIMINGS),
                index=_index(list(TAX_TIMINGS), start.tax_timing, 1),
                horizontal=True,
            )
            target_amount = st.number_input("Target amount (0 = none)", *FORM_BOUNDS["target_amount"], value=float(start.target_amount or 0), step=10000.0)

            submitted = st.form_submit_button("Calculate", type="primary")

    if not submitted and "plan" not in st.session_state:
        return start if st.query_params.get("data") else None
    if not submitted:
        return st.session_state["plan"]

    return PlanInputs(
        initial_deposit=initial_deposit,
        contribution=contribution,
        contribution_frequency=contribution_frequency,
        annual_step_up=annual_step_up,
        interest_rate=interest_rate,
        years=int(years),
        compounding_frequency=compounding_frequency,
        inflation_rate=inflation_rate,
        tax_rate=tax_rate,
        tax_timing=tax_timing,
        target_amount=target_amount,
        currency=currency,
    )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
def _display_results(plan: PlanInputs):
    vr = validate_inputs(plan)
    if vr.errors or vr.warnings:
        st.warning(vr.summary())

    result = project(plan)
    report = generate_plan_report(plan, result)
    money = lambda v: format_currency(v, plan.currency)  # noqa: E731

    # --- 1. Headline cards ---
    k1, k2, k3, k4 = st.columns(4)
    k1.metric(
        f"Maturity Value ({report.years} yr)",
        money(result.final_balance),
        help=f"Inflation adjusted: {money(result.final_balance_adjusted)}",
    )
    k2.metric("Total Interest", money(result.total_interest))
    k3.metric("Total Deposits", money(result.total_deposits))
    k4.metric("Tax Paid", money(result.total_tax))

    g1, g2, g3 = st.columns(3)
    g1.metric("Doubling Time", f"{result.doubling_time:.1f} yr" if result.doubling_time else "—")
    g2.metric("Multiplier", f"{result.multiplier:.2f}x")
    if report.target_amount > 0:
        g3.metric(
            f"Goal {format_compact(report.target_amount, plan.currency)}",
            f"Year {result.goal_reached_year}" if result.goal_reached_year is not None else "Not reached",
        )

    for flag in report.flags:
        st.warning(flag)

    # --- 2. Charts ---
    breakdown = yearly_breakdown_frame(result)
    left, right = st.columns([2, 1])
    with left:
        _plot_growth(breakdown, currency=plan.currency)
    with right:
        _plot_composition(composition(result))
    _plot_variance(variance_band_frame(result))

    # --- 3. Table + export ---
    with st.expander("Yearly Breakdown", expanded=False):
        st.dataframe(breakdown.round(2), use_container_width=True, hide_index=True)
    st.download_button(
        "Download CSV",
        data=export_breakdown_csv(result),
        file_name="compound_interest_breakdown.csv",
        mime="text/csv",
    )

    token = encode_share_token(plan)
    st.query_params["data"] = token
    st.caption("Share this plan with the `?data=` link in the address bar.")


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
def render():
    st.set_page_config(page_title="Compound Planner", layout="wide")
    st.title("Compound Planner")
    st.caption("Future value of a periodic-contribution investment")

    plan = _sidebar_form(_initial_plan())
    if plan is None:
        st.info("Set your plan in the sidebar and click 'Calculate'.")
        return

    st.session_state["plan"] = plan
    _display_results(plan)


def main():
    """Console entry point: launch this file under `streamlit run`."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    render()
