# File: src/roof_layout/horizontal/__init__.py
"""
Horizontal tile course layout.

This module lays tiles across roof widths:
- Request record with verge, abutment and leading tile options
- Even sets, split sets and cut course strategies
- Per-width overhangs and bond marks

Example:
    >>> from roof_layout.horizontal import HorizontalRequest, solve_horizontal
    >>> layout = solve_horizontal(HorizontalRequest(
    ...     widths=[3000], tile_cover_width=300, min_spacing=10, max_spacing=40,
    ... ))
    >>> layout.label
    'Even Sets'
"""

from .horizontal_config import HorizontalRequest
from .course_layout import HorizontalLayout, WidthLayout
from .course_solver import (
    COURSE_STRATEGIES,
    CourseGeometry,
    build_course_geometry,
    solve_cut_course,
    solve_even_sets,
    solve_horizontal,
    solve_split_sets,
)

__all__ = [
    "HorizontalRequest",
    "HorizontalLayout",
    "WidthLayout",
    "COURSE_STRATEGIES",
    "CourseGeometry",
    "build_course_geometry",
    "solve_cut_course",
    "solve_even_sets",
    "solve_horizontal",
    "solve_split_sets",
]
