"""
Tabular views over a ProjectionResult for charts, tables and export.

  yearly_breakdown_frame: one row per completed year (CSV export layout)
  variance_band_frame:    pessimistic / expected / optimistic balance per year
  composition:            deposits vs interest vs tax split of the final value
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
import pandas as pd

from core.schema import BREAKDOWN_COLUMNS, ProjectionResult


def yearly_breakdown_frame(result: ProjectionResult) -> pd.DataFrame:
    """
    One row per YearRecord, ordered by year.

    Columns: Year, Principal, Contributions, Total Interest, Balance,
    Inflation Adjusted, Optimistic, Pessimistic. Empty (with columns) for a
    zero-year horizon.
    """
    rows = [
        {
            "Year": rec.year,
            "Principal": rec.principal,
            "Contributions": rec.contributions,
            "Total Interest": rec.interest,
            "Balance": rec.balance,
            "Inflation Adjusted": rec.inflation_adjusted,
            "Optimistic": rec.optimistic_balance,
            "Pessimistic": rec.pessimistic_balance,
        }
        for rec in result.yearly_breakdown
    ]
    df = pd.DataFrame(rows, columns=list(BREAKDOWN_COLUMNS))
    df["Year"] = df["Year"].astype(int)
    return df


def variance_band_frame(result: ProjectionResult) -> pd.DataFrame:
    """Long-format band (year, series, value) suitable for a multi-line chart."""
    wide = yearly_breakdown_frame(result)[["Year", "Pessimistic", "Balance", "Optimistic"]]
    wide = wide.rename(columns={"Balance": "Expected"})
    return wide.melt(id_vars=["Year"], var_name="series", value_name="value")


def composition(result: ProjectionResult) -> Dict[str, float]:
    """
    Split of the outcome into deposits, net interest and (when any) tax,
    as drawn in the results pie chart.
    """
    parts = {
        "Total Deposits": float(result.total_deposits),
        "Total Interest": float(result.total_interest),
    }
    if result.total_tax > 0:
        parts["Tax Paid"] = float(result.total_tax)
    return parts


def export_breakdown_csv(
    result: ProjectionResult,
    path: Optional[Union[str, Path]] = None,
    *,
    include_variance: bool = False,
) -> str:
    """
    Render the yearly breakdown as CSV (values to 2 decimals).

    The default layout is the six-column export: Year, Principal,
    Contributions, Total Interest, Balance, Inflation Adjusted.
    If `path` is given the text is also written there.
    """
    df = yearly_breakdown_frame(result)
    if not include_variance:
        df = df.drop(columns=["Optimistic", "Pessimistic"])

    value_cols = [c for c in df.columns if c != "Year"]
    df[value_cols] = np.round(df[value_cols].astype(float), 2)
    text = df.to_csv(index=False, float_format="%.2f")

    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
    return text
