"""
Roof Layout Calculator.

Computes tile course spacing across roof widths and batten gauge up rafters
for pitched-roof coverings. All dimensions are millimetres.

Example:
    >>> from roof_layout import HorizontalRequest, solve_horizontal
    >>> layout = solve_horizontal(HorizontalRequest(
    ...     widths=[3000], tile_cover_width=300, min_spacing=10, max_spacing=40,
    ... ))
    >>> layout.to_display_dict()["Solution"]
    'Even Sets'
"""

from .config.roofing import AbutmentSide, MaterialType
from .core import (
    InputValidationError,
    LayoutResult,
    RoofLayoutError,
    SolutionTier,
    UnsolvableLayoutError,
)
from .horizontal import HorizontalLayout, HorizontalRequest, WidthLayout, solve_horizontal
from .vertical import RafterLayout, VerticalLayout, VerticalRequest, solve_vertical

__version__ = "0.1.0"

__all__ = [
    "AbutmentSide",
    "MaterialType",
    "InputValidationError",
    "LayoutResult",
    "RoofLayoutError",
    "SolutionTier",
    "UnsolvableLayoutError",
    "HorizontalLayout",
    "HorizontalRequest",
    "WidthLayout",
    "solve_horizontal",
    "RafterLayout",
    "VerticalLayout",
    "VerticalRequest",
    "solve_vertical",
]
