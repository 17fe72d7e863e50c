# File: src/roof_layout/vertical/__init__.py
"""
Vertical batten gauge layout.

This module sets battens out up rafters:
- Request record with material, gutter and dry ridge options
- Full courses, split gauge and cut course strategies
- Per-rafter gauges, ridge offsets and advisory warnings
"""

from .vertical_config import VerticalRequest
from .gauge_layout import RafterLayout, VerticalLayout
from .gauge_solver import (
    BATTEN_STRATEGIES,
    BattenGeometry,
    build_batten_geometry,
    gauge_warnings,
    solve_cut_course,
    solve_full_courses,
    solve_split_gauge,
    solve_vertical,
)

__all__ = [
    "VerticalRequest",
    "RafterLayout",
    "VerticalLayout",
    "BATTEN_STRATEGIES",
    "BattenGeometry",
    "build_batten_geometry",
    "gauge_warnings",
    "solve_cut_course",
    "solve_full_courses",
    "solve_split_gauge",
    "solve_vertical",
]
