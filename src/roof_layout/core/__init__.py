"""
Core types shared by both layout solvers.

This module provides:
- The solution tier tag and its display labels
- The base layout result
- The solver exception hierarchy
- Request field coercion and measurement validation
"""

from .errors import InputValidationError, RoofLayoutError, UnsolvableLayoutError
from .layout_result import (
    HORIZONTAL_TIER_LABELS,
    VERTICAL_TIER_LABELS,
    LayoutResult,
    SolutionTier,
    join_warnings,
)
from .validation import coerce_flag, flag_to_form, validate_measurements

__all__ = [
    "InputValidationError",
    "RoofLayoutError",
    "UnsolvableLayoutError",
    "HORIZONTAL_TIER_LABELS",
    "VERTICAL_TIER_LABELS",
    "LayoutResult",
    "SolutionTier",
    "join_warnings",
    "coerce_flag",
    "flag_to_form",
    "validate_measurements",
]
