"""
Summary outputs — headline metrics, tabular views, CSV export and the plan report.
"""

from .metrics import doubling_time, growth_multiplier, inflation_adjusted_balance
from .aggregator import composition, export_breakdown_csv, variance_band_frame, yearly_breakdown_frame
from .report import PlanReport, generate_plan_report

__all__ = [
    "doubling_time",
    "growth_multiplier",
    "inflation_adjusted_balance",
    "composition",
    "export_breakdown_csv",
    "variance_band_frame",
    "yearly_breakdown_frame",
    "PlanReport",
    "generate_plan_report",
]
