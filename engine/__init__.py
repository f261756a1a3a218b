"""
Projection engine — input normalization, the monthly simulation loop and
end-of-term tax settlement.
"""

from .normalizer import NormalizedPlan, normalize_inputs
from .runner import MonthStep, iter_months, project

__all__ = ["NormalizedPlan", "normalize_inputs", "MonthStep", "iter_months", "project"]
