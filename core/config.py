"""
Projection configuration.
Engine constants only; plan parameters live in core.schema.PlanInputs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionConfig:
    # hard cap on simulated months (100 years); longer horizons are truncated
    max_months: int = 1200

    # variance scenarios run at rate +/- this many percentage points
    variance_spread_pct: float = 2.0

    # monthly-equivalent scaling of sub-monthly contributions
    weekly_factor: float = 4.333
    biweekly_factor: float = 2.166

    @property
    def max_years(self) -> int:
        return self.max_months // 12


DEFAULT_CONFIG = ProjectionConfig()
