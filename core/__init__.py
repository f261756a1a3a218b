"""
Core package — plan/result types, configuration, currency table and shared utilities.
No projection logic lives here.
"""

from .schema import (
    BREAKDOWN_COLUMNS,
    COMPOUNDING_FREQUENCIES,
    CONTRIBUTION_FREQUENCIES,
    TAX_TIMINGS,
    PlanInputs,
    ProjectionResult,
    YearRecord,
)
from .config import DEFAULT_CONFIG, ProjectionConfig
from .currency import CURRENCIES, CurrencyInfo, currency_info, format_currency
from .utils import coerce_number, deflate, pct_to_decimal, safe_divide

__all__ = [
    "BREAKDOWN_COLUMNS",
    "COMPOUNDING_FREQUENCIES",
    "CONTRIBUTION_FREQUENCIES",
    "TAX_TIMINGS",
    "PlanInputs",
    "ProjectionResult",
    "YearRecord",
    "DEFAULT_CONFIG",
    "ProjectionConfig",
    "CURRENCIES",
    "CurrencyInfo",
    "currency_info",
    "format_currency",
    "coerce_number",
    "deflate",
    "pct_to_decimal",
    "safe_divide",
]
