"""
Plan intake — building PlanInputs from mappings, files and share tokens, and
advisory validation.
"""

from .loader import (
    decode_share_token,
    encode_share_token,
    load_plan_file,
    load_plan_inputs,
    load_plans_csv,
    plan_inputs_to_dict,
)
from .validators import ValidationResult, validate_inputs

__all__ = [
    "decode_share_token",
    "encode_share_token",
    "load_plan_file",
    "load_plan_inputs",
    "load_plans_csv",
    "plan_inputs_to_dict",
    "ValidationResult",
    "validate_inputs",
]
