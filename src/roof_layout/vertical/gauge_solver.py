# File: src/roof_layout/vertical/gauge_solver.py
"""
Vertical batten gauge solver.

Sets battens out from the first batten up to the ridge so that every rafter
in a batch has the same number of courses. The course count is bounded from
the tallest rafter; gauges and ridge offsets are then realized per rafter.

Strategies, tried in order:

- Full courses: one gauge per rafter, ridge offset within tolerance
- Split gauge: a maximum-gauge group followed by a solved-gauge group
- Cut course: maximum gauge with one cut course below the ridge

All measurements are in millimetres.
"""

import math
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from ..config.roofing import (
    MaterialProfile,
    get_material_profile,
    get_roofing_param,
)
from ..core.errors import UnsolvableLayoutError
from ..core.layout_result import SolutionTier, join_warnings
from ..utils.logging_config import get_logger
from ..utils.rounding import round_clamp, round_half_up, within
from .gauge_layout import RafterLayout, VerticalLayout
from .vertical_config import VerticalRequest

logger = get_logger(__name__)


@dataclass(frozen=True)
class BattenGeometry:
    """Fixed quantities derived once per request.

    Attributes:
        request: The vertical request
        profile: Batten rules for the request's material
        first_batten: Height of the first batten
        eave_batten: Height of the eave batten
        under_eave_batten: Height of the under-eave batten, or None
        ridge_offset_min: Smallest allowed ridge offset
        ridge_offset_max: Largest allowed ridge offset
        min_courses: Fewest courses on the tallest rafter
        max_courses: Most courses on the tallest rafter
    """
    request: VerticalRequest
    profile: MaterialProfile
    first_batten: float
    eave_batten: float
    under_eave_batten: Optional[float]
    ridge_offset_min: int
    ridge_offset_max: int
    min_courses: int
    max_courses: int

    @property
    def max_rafter(self) -> float:
        return self.request.max_rafter_height

    def span(self, rafter_height: float, ridge_offset: float) -> float:
        """Length between the first batten and the top batten."""
        return rafter_height - self.first_batten - ridge_offset

    def offset_fits(self, ridge_offset: float) -> bool:
        return within(ridge_offset, self.ridge_offset_min, self.ridge_offset_max)

    def round_gauge(self, gauge: float) -> int:
        return round_clamp(gauge, self.request.min_gauge, self.request.max_gauge)


def build_batten_geometry(request: VerticalRequest) -> BattenGeometry:
    """Derive batten positions, ridge tolerance and course bounds.

    Args:
        request: Validated vertical request

    Returns:
        BattenGeometry for the request

    Raises:
        UnsolvableLayoutError: If a gauge bound is not positive
    """
    if request.min_gauge <= 0 or request.max_gauge <= 0:
        raise UnsolvableLayoutError(
            f"Batten gauges must be positive (got {request.min_gauge}-"
            f"{request.max_gauge}mm)."
        )

    profile = get_material_profile(request.material_type)
    first_batten = (
        request.slate_tile_height - request.gutter_overhang + profile.first_batten_offset
    )
    if profile.eave_batten_drop is not None:
        eave_batten = first_batten - profile.eave_batten_drop
    else:
        eave_batten = first_batten - request.max_gauge
    under_eave_batten = None
    if profile.under_eave_batten_drop is not None:
        under_eave_batten = eave_batten - profile.under_eave_batten_drop

    if request.use_dry_ridge:
        ridge_offset_min = get_roofing_param("ridge_offset_min_dry_ridge")
    else:
        ridge_offset_min = get_roofing_param("ridge_offset_min")
    ridge_offset_max = get_roofing_param("ridge_offset_max")

    max_rafter = request.max_rafter_height
    min_courses = math.ceil(
        (max_rafter - first_batten - ridge_offset_max) / request.max_gauge
    ) + 1
    max_courses = math.floor(
        (max_rafter - first_batten - ridge_offset_min) / request.min_gauge
    ) + 1

    return BattenGeometry(
        request=request,
        profile=profile,
        first_batten=first_batten,
        eave_batten=eave_batten,
        under_eave_batten=under_eave_batten,
        ridge_offset_min=ridge_offset_min,
        ridge_offset_max=ridge_offset_max,
        min_courses=min_courses,
        max_courses=max_courses,
    )


def _make_layout(
    geometry: BattenGeometry,
    tier: SolutionTier,
    total_courses: int,
    rafters: List[RafterLayout],
    group_sizes: Optional[Tuple[int, int]] = None,
    full_courses: Optional[int] = None,
) -> VerticalLayout:
    return VerticalLayout(
        tier=tier,
        warning=None,
        total_courses=total_courses,
        material_type=geometry.request.material_type,
        first_batten=geometry.first_batten,
        eave_batten=geometry.eave_batten if geometry.profile.shows_eave_batten else None,
        under_eave_batten=geometry.under_eave_batten,
        group_sizes=group_sizes,
        full_courses=full_courses,
        rafters=tuple(rafters),
    )


def _full_course_rafter(
    geometry: BattenGeometry,
    rafter_height: float,
    courses: int,
    anchor: float,
) -> RafterLayout:
    gauge = geometry.round_gauge(geometry.span(rafter_height, anchor) / (courses - 1))
    ridge_offset = rafter_height - (geometry.first_batten + (courses - 1) * gauge)
    return RafterLayout(
        rafter_height=rafter_height,
        gauges=(gauge,),
        ridge_offset=ridge_offset,
        reconstructed_height=geometry.first_batten + (courses - 1) * gauge + ridge_offset,
    )


def solve_full_courses(geometry: BattenGeometry) -> Optional[VerticalLayout]:
    """Find the smallest course count with one gauge per rafter.

    Each count is tried with the gauge anchored at the minimum ridge offset
    and then at the maximum; the first anchor that keeps every rafter's
    ridge offset in tolerance wins.
    """
    heights = geometry.request.rafter_heights
    anchors = (geometry.ridge_offset_min, geometry.ridge_offset_max)

    for courses in range(geometry.min_courses, geometry.max_courses + 1):
        if courses < 2:
            continue
        for anchor in anchors:
            rafters = [_full_course_rafter(geometry, h, courses, anchor) for h in heights]
            if all(geometry.offset_fits(r.ridge_offset) for r in rafters):
                logger.debug(f"Full courses: {courses} courses anchored at {anchor}mm")
                return _make_layout(geometry, SolutionTier.FULL, courses, rafters)
            logger.trace(f"{courses} courses at {anchor}mm anchor: ridge offset out of tolerance")

    return None


def _split_gauge_rafter(
    geometry: BattenGeometry,
    rafter_height: float,
    first_gauges: int,
    second_gauges: int,
) -> RafterLayout:
    span = geometry.span(rafter_height, geometry.ridge_offset_min)
    gauge1 = geometry.round_gauge(geometry.request.max_gauge)
    gauge2 = geometry.round_gauge((span - first_gauges * gauge1) / second_gauges)
    remainder = span - (first_gauges * gauge1 + second_gauges * gauge2)
    ridge_offset = geometry.ridge_offset_min + remainder
    return RafterLayout(
        rafter_height=rafter_height,
        gauges=(gauge1, gauge2),
        ridge_offset=ridge_offset,
        reconstructed_height=(
            geometry.first_batten
            + first_gauges * gauge1
            + second_gauges * gauge2
            + ridge_offset
        ),
    )


def solve_split_gauge(geometry: BattenGeometry) -> Optional[VerticalLayout]:
    """Find the first course count and split point where two gauges fit."""
    heights = geometry.request.rafter_heights

    for courses in range(geometry.min_courses, geometry.max_courses + 1):
        for first_gauges in range(1, courses - 1):
            second_gauges = courses - 2 - first_gauges
            if second_gauges <= 0:
                continue
            rafters = [
                _split_gauge_rafter(geometry, h, first_gauges, second_gauges)
                for h in heights
            ]
            if all(geometry.offset_fits(r.ridge_offset) for r in rafters):
                logger.debug(
                    f"Split gauge: {courses} courses, groups {first_gauges}/{second_gauges}"
                )
                return _make_layout(
                    geometry,
                    SolutionTier.SPLIT,
                    courses,
                    rafters,
                    group_sizes=(first_gauges, second_gauges),
                )
            logger.trace(f"{courses} courses split {first_gauges}/{second_gauges} rejected")

    return None


def solve_cut_course(geometry: BattenGeometry) -> Optional[VerticalLayout]:
    """Set out maximum-gauge courses and cut the last one to fit.

    The cut course is not clamped; short cuts are reported as warnings.

    Raises:
        UnsolvableLayoutError: If the first batten sits above the ridge
            tolerance of the tallest rafter
    """
    max_gauge = geometry.request.max_gauge
    full_courses = math.floor(
        geometry.span(geometry.max_rafter, geometry.ridge_offset_min) / max_gauge
    )
    if full_courses < 0:
        raise UnsolvableLayoutError(
            f"Unable to compute a vertical solution: the first batten "
            f"({geometry.first_batten}mm) leaves no room below the ridge. Check "
            "the slate/tile height and gutter overhang."
        )

    rafters = []
    for h in geometry.request.rafter_heights:
        cut_course = round_half_up(
            geometry.span(h, geometry.ridge_offset_min) - full_courses * max_gauge
        )
        ridge_offset = h - (geometry.first_batten + cut_course + full_courses * max_gauge)
        rafters.append(RafterLayout(
            rafter_height=h,
            gauges=(geometry.round_gauge(max_gauge),),
            ridge_offset=ridge_offset,
            reconstructed_height=(
                geometry.first_batten + cut_course + full_courses * max_gauge + ridge_offset
            ),
            cut_course=cut_course,
        ))

    logger.debug(f"Cut course: {full_courses} courses at {max_gauge}mm plus a cut")
    return _make_layout(
        geometry,
        SolutionTier.CUT,
        full_courses + 1,
        rafters,
        full_courses=full_courses,
    )


def gauge_warnings(layout: VerticalLayout) -> Optional[str]:
    """Advisory text for short gauges and heights that do not reconcile.

    Args:
        layout: Solved vertical layout

    Returns:
        Combined warning text, or None when there is nothing to report
    """
    floor = get_roofing_param("min_gauge_floor")
    tolerance = get_roofing_param("height_tolerance")

    if layout.tier is SolutionTier.CUT:
        too_short = any(r.cut_course < floor for r in layout.rafters)
    else:
        too_short = any(g < floor for r in layout.rafters for g in r.gauges)
    short_warning = None
    if too_short:
        short_warning = (
            f"Batten gauge or cut course is below the minimum threshold ({floor}mm) "
            "on one or more rafters. Consider adjusting rafter length or tile "
            "specifications."
        )

    height_warnings = [
        f"Computed total ({r.reconstructed_height}mm) for rafter {i + 1} differs from "
        f"rafter height ({r.rafter_height}mm) by {r.height_difference}mm, exceeding "
        f"tolerance of {tolerance}mm."
        for i, r in enumerate(layout.rafters)
        if r.height_difference > tolerance
    ]
    return join_warnings(short_warning, *height_warnings)


BattenStrategy = Callable[[BattenGeometry], Optional[VerticalLayout]]

# Tried in order; the first strategy to return a layout wins
BATTEN_STRATEGIES: Tuple[Tuple[SolutionTier, BattenStrategy], ...] = (
    (SolutionTier.FULL, solve_full_courses),
    (SolutionTier.SPLIT, solve_split_gauge),
    (SolutionTier.CUT, solve_cut_course),
)


def solve_vertical(request: VerticalRequest) -> VerticalLayout:
    """Compute the batten gauge layout for a batch of rafters.

    Args:
        request: Vertical request; rafter heights must be non-empty and >= 500mm

    Returns:
        VerticalLayout from the first strategy that succeeds, with warnings

    Raises:
        InputValidationError: If the rafter batch is invalid
        UnsolvableLayoutError: If the configuration admits no layout at all
    """
    request.validate()
    geometry = build_batten_geometry(request)
    logger.info(
        f"Solving vertical layout for {len(request.rafter_heights)} rafter(s), "
        f"first batten {geometry.first_batten}mm, "
        f"courses {geometry.min_courses}-{geometry.max_courses}"
    )

    for tier, strategy in BATTEN_STRATEGIES:
        layout = strategy(geometry)
        if layout is None:
            logger.debug(f"No {tier.value} vertical layout")
            continue

        warning = gauge_warnings(layout)
        if warning:
            logger.warning(warning)
            layout = replace(layout, warning=warning)
        logger.info(f"Vertical layout solved: {layout.label}")
        return layout

    raise UnsolvableLayoutError(
        "Unable to compute a vertical solution. Please check your inputs: ensure "
        "rafter heights are valid and tile specifications (min/max gauge, slate "
        "height) are appropriate."
    )
