"""
Raw-parameter intake: build PlanInputs from loosely typed sources.

Accepts camelCase (initialDeposit) or snake_case (initial_deposit) keys,
numbers given as strings ("10,000", "7.5%"), None and NaN. Unparseable
numbers fall back to their defaults with a logged warning; unknown keys are
ignored. Cadence labels are passed through and canonicalised by the engine.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import pandas as pd

from core.schema import PlanInputs
from core.utils import coerce_number

logger = logging.getLogger(__name__)

# camelCase field names used by shared links and plan files.
CAMEL_TO_FIELD: Dict[str, str] = {
    "initialDeposit": "initial_deposit",
    "contribution": "contribution",
    "contributionFrequency": "contribution_frequency",
    "annualStepUp": "annual_step_up",
    "interestRate": "interest_rate",
    "years": "years",
    "compoundingFrequency": "compounding_frequency",
    "inflationRate": "inflation_rate",
    "taxRate": "tax_rate",
    "taxTiming": "tax_timing",
    "targetAmount": "target_amount",
    "currency": "currency",
}
FIELD_TO_CAMEL: Dict[str, str] = {v: k for k, v in CAMEL_TO_FIELD.items()}

TEXT_FIELDS = ("contribution_frequency", "compounding_frequency", "tax_timing", "currency")


def _parse_number(field_name: str, value: Any, default: float) -> float:
    if value is None or isinstance(value, bool) or (isinstance(value, float) and math.isnan(value)):
        return default
    if isinstance(value, str):
        value = value.strip().replace(",", "").rstrip("%").strip()
        if not value:
            return default
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Unparseable %s=%r; using default %s.", field_name, value, default)
        return default


def load_plan_inputs(raw: Mapping[str, Any], *, base: PlanInputs = PlanInputs()) -> PlanInputs:
    """
    Overlay the recognised keys of `raw` onto `base` (defaults if omitted).
    """
    values: Dict[str, Any] = asdict(base)
    for key, value in raw.items():
        name = CAMEL_TO_FIELD.get(key, key)
        if name not in values:
            continue
        if name in TEXT_FIELDS:
            values[name] = None if value is None else str(value)
        else:
            values[name] = _parse_number(name, value, coerce_number(values[name]))
    return PlanInputs(**values)


def plan_inputs_to_dict(inputs: PlanInputs, *, camel_case: bool = True) -> Dict[str, Any]:
    data = asdict(inputs)
    if camel_case:
        return {FIELD_TO_CAMEL[k]: v for k, v in data.items()}
    return data


def load_plan_file(path: Union[str, Path]) -> PlanInputs:
    """Read a JSON plan file (a single object of plan fields)."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Plan file {path} must contain a JSON object, got {type(data).__name__}.")
    return load_plan_inputs(data)


def load_plans_csv(path: Union[str, Path]) -> List[PlanInputs]:
    """
    Read a CSV with one plan per row (camelCase or snake_case headers).
    Empty cells become defaults.
    """
    df = pd.read_csv(path)
    df = df.astype(object).where(pd.notna(df), None)
    return [load_plan_inputs(row) for row in df.to_dict(orient="records")]


def encode_share_token(inputs: PlanInputs) -> str:
    """URL-safe base64 of the inputs as camelCase JSON."""
    payload = json.dumps(plan_inputs_to_dict(inputs), separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")


def decode_share_token(token: str, *, base: PlanInputs = PlanInputs()) -> PlanInputs:
    """Inverse of encode_share_token; decoded fields overlay `base`."""
    try:
        padded = token.strip() + "=" * (-len(token.strip()) % 4)
        payload = base64.urlsafe_b64decode(padded.encode("ascii"))
        data = json.loads(payload.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ValueError(f"Invalid share token: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Invalid share token: payload is not an object.")
    return load_plan_inputs(data, base=base)
