"""
Advisory checks on plan inputs before they reach the engine.

The engine accepts anything numeric and never rejects a plan, so nothing
here is blocking for a projection. Errors mark values that are almost
certainly mistakes (negative deposits, tax above 100%); warnings mark values
that are legal but will be reinterpreted (unknown labels, truncated horizon).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.currency import is_known_currency
from core.schema import (
    COMPOUNDING_FREQUENCIES,
    CONTRIBUTION_FREQUENCIES,
    TAX_TIMINGS,
    PlanInputs,
)
from core.utils import coerce_number
from engine.normalizer import FREQUENCY_ALIASES


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a plan."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _known_label(value, allowed: tuple) -> bool:
    if value is None:
        return True
    label = str(value).strip().lower()
    return FREQUENCY_ALIASES.get(label, label) in allowed


def validate_inputs(
    inputs: PlanInputs,
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """
    Run all checks on a plan.
    Returns a ValidationResult with errors and warnings; neither stops a projection.
    """
    result = ValidationResult()

    # --- Amounts ---
    for label, value in [
        ("initial deposit", inputs.initial_deposit),
        ("contribution", inputs.contribution),
        ("target amount", inputs.target_amount),
    ]:
        if coerce_number(value) < 0:
            result.errors.append(f"Negative {label} ({value}).")

    # --- Rates ---
    rate = coerce_number(inputs.interest_rate)
    if rate < 0:
        result.warnings.append(f"Negative interest rate ({rate}%) will shrink the balance.")
    elif rate > 100:
        result.warnings.append(f"Interest rate of {rate}% — check percent vs decimal form.")
    if 0 < rate < 1:
        result.warnings.append(
            f"Interest rate of {rate}% is below 1% — rates are percentages (7 means 7%)."
        )

    for label, value in [("inflation rate", inputs.inflation_rate), ("annual step-up", inputs.annual_step_up)]:
        if coerce_number(value) < 0:
            result.warnings.append(f"Negative {label} ({value}%).")

    tax = coerce_number(inputs.tax_rate)
    if tax < 0:
        result.errors.append(f"Negative tax rate ({tax}%).")
    elif tax > 100:
        result.errors.append(f"Tax rate above 100% ({tax}%).")

    # --- Horizon ---
    years = coerce_number(inputs.years)
    if years < 0:
        result.warnings.append(f"Negative horizon ({years:g} years) projects nothing.")
    elif years > config.max_years:
        result.warnings.append(
            f"Horizon of {years:g} years exceeds {config.max_years}; it will be truncated."
        )
    elif years != int(years):
        result.warnings.append(f"Fractional horizon ({years:g} years); only whole years get a breakdown row.")

    # --- Labels ---
    for label, value, allowed in [
        ("contribution frequency", inputs.contribution_frequency, CONTRIBUTION_FREQUENCIES),
        ("compounding frequency", inputs.compounding_frequency, COMPOUNDING_FREQUENCIES),
        ("tax timing", inputs.tax_timing, TAX_TIMINGS),
    ]:
        if not _known_label(value, allowed):
            result.warnings.append(f"Unknown {label} {value!r}; the default will be used.")

    if inputs.currency and not is_known_currency(inputs.currency):
        result.warnings.append(f"Unknown currency {inputs.currency!r}; amounts render as USD.")

    return result
