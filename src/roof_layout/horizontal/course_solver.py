# File: src/roof_layout/horizontal/course_solver.py
"""
Horizontal tile course solver.

Lays tiles across one or more roof widths so that every width uses the same
tile count. The search runs in two phases:

1. Topology: candidate tile counts are bounded from the widest total width
   and the spacing tolerances.
2. Realization: each width gets its own overhangs (and, for split layouts,
   spacings) so the course fits that width exactly.

Three strategies are tried in order, the first to produce a layout wins:

- Even sets: one uniform spacing, overhangs within the verge tolerance
- Split sets: a maximum-spacing group followed by a solved-spacing group
- Cut course: maximum (or shrunk) spacing with the last tile cut to fit

Example:
    >>> request = HorizontalRequest(widths=[3000], tile_cover_width=300,
    ...                             min_spacing=10, max_spacing=40)
    >>> layout = solve_horizontal(request)
    >>> layout.to_display_dict()["Solution"]
    'Even Sets'
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..config.roofing import (
    ABUTMENT_REDUCTIONS,
    AbutmentSide,
    get_roofing_param,
    get_verge_profile,
)
from ..core.errors import UnsolvableLayoutError
from ..core.layout_result import SolutionTier
from ..utils.logging_config import get_logger
from ..utils.rounding import round_clamp, round_half_up, within
from .course_layout import HorizontalLayout, WidthLayout
from .horizontal_config import HorizontalRequest

logger = get_logger(__name__)


@dataclass(frozen=True)
class CourseGeometry:
    """Fixed quantities derived once per request.

    Attributes:
        request: The request with abutment overrides applied
        overhang_left: Starting left overhang
        overhang_right: Starting right overhang
        min_overhang: Smallest overhang the verge allows
        max_overhang: Largest overhang the verge allows
        width_reduction: Width lost to abutment flashings
        set_size: Tiles per bond set
        total_widths: Width to cover for each input width
        remaining_width: Widest total width less the leading tile
        min_tile_count: Fewest tiles per course at maximum spacing
        max_tile_count: Most tiles per course at minimum spacing
    """
    request: HorizontalRequest
    overhang_left: int
    overhang_right: int
    min_overhang: int
    max_overhang: int
    width_reduction: int
    set_size: int
    total_widths: Tuple[float, ...]
    remaining_width: float
    min_tile_count: int
    max_tile_count: int

    @property
    def cover(self) -> float:
        return self.request.tile_cover_width

    @property
    def leading_width(self) -> float:
        return self.request.leading_tile_width

    @property
    def leading_count(self) -> int:
        return 1 if self.request.use_lh_tile else 0

    @property
    def max_total_width(self) -> float:
        return max(self.total_widths)

    @property
    def last_tile_count(self) -> int:
        """Tile count the even-sets search finishes on (0 if it never ran)."""
        if self.max_tile_count < self.min_tile_count:
            return 0
        return self.max_tile_count

    def regular_tiles(self, tiles_wide: int) -> int:
        return tiles_wide - self.leading_count

    def base_tiled_width(self, tiles_wide: int) -> float:
        """Width of the tiles alone, no spacing."""
        return self.regular_tiles(tiles_wide) * self.cover + self.leading_width

    def total_sets(self, tiles_wide: int) -> int:
        return (tiles_wide - 1) // self.set_size if tiles_wide > 1 else 0

    def mark_increment(self, spacing: float) -> int:
        """Distance between bond marks, kept inside the spacing tolerance."""
        request = self.request
        return round_clamp(
            self.set_size * (self.cover + spacing),
            self.set_size * (self.cover + request.min_spacing),
            self.set_size * (self.cover + request.max_spacing),
        )


def build_course_geometry(request: HorizontalRequest) -> CourseGeometry:
    """Derive overhangs, bond size and tile count bounds for a request.

    Args:
        request: Validated horizontal request

    Returns:
        CourseGeometry for the normalized request

    Raises:
        UnsolvableLayoutError: If a tile pitch is not positive
    """
    # Overhang rules follow the requested verge, before abutment overrides
    verge = get_verge_profile(request.use_dry_verge)
    request = request.normalized()
    side = request.abutment_side

    overhang_left = 0 if side.abuts_left else verge.overhang
    overhang_right = 0 if side.abuts_right else verge.overhang
    width_reduction = ABUTMENT_REDUCTIONS[side]

    if request.tile_cover_width > get_roofing_param("wide_tile_threshold"):
        set_size = get_roofing_param("wide_tile_set_size")
    else:
        set_size = get_roofing_param("narrow_tile_set_size")

    total_widths = tuple(
        width + overhang_left + overhang_right - width_reduction
        for width in request.widths
    )
    remaining_width = max(total_widths) - request.leading_tile_width

    max_pitch = request.tile_cover_width + request.max_spacing
    min_pitch = request.tile_cover_width + request.min_spacing
    if max_pitch <= 0 or min_pitch <= 0:
        raise UnsolvableLayoutError(
            f"Tile pitch must be positive (cover {request.tile_cover_width}mm, "
            f"spacing {request.min_spacing}-{request.max_spacing}mm)."
        )

    min_tile_count = math.floor(remaining_width / max_pitch)
    max_tile_count = math.floor(remaining_width / min_pitch)
    if request.use_lh_tile:
        min_tile_count += 1
        max_tile_count += 1

    return CourseGeometry(
        request=request,
        overhang_left=overhang_left,
        overhang_right=overhang_right,
        min_overhang=verge.min_overhang,
        max_overhang=verge.max_overhang,
        width_reduction=width_reduction,
        set_size=set_size,
        total_widths=total_widths,
        remaining_width=remaining_width,
        min_tile_count=min_tile_count,
        max_tile_count=max_tile_count,
    )


def _fit_overhangs(
    geometry: CourseGeometry,
    total_width: float,
    tiled_width: float,
    enforce_bounds: bool,
) -> Optional[Tuple[int, int]]:
    """Share the difference between total and tiled width over the free verges.

    The difference is split equally between both verges; an abutting side
    keeps a zero overhang and the other verge takes the whole difference.

    Returns:
        (left, right) overhangs, or None when enforce_bounds is set and a
        free verge would fall outside the verge tolerance
    """
    side = geometry.request.abutment_side
    free_sides = (0 if side.abuts_left else 1) + (0 if side.abuts_right else 1)
    adjustment = (total_width - tiled_width) / free_sides if free_sides else 0

    lo, hi = geometry.min_overhang, geometry.max_overhang
    overhangs = []
    for abuts, base in (
        (side.abuts_left, geometry.overhang_left),
        (side.abuts_right, geometry.overhang_right),
    ):
        if abuts:
            overhangs.append(0)
            continue
        raw = base - adjustment
        if enforce_bounds and not within(round_half_up(raw), lo, hi):
            return None
        overhangs.append(round_clamp(raw, lo, hi))

    return overhangs[0], overhangs[1]


def _realize_width(
    geometry: CourseGeometry,
    index: int,
    tiled_width: float,
    spacings: Tuple[float, ...],
    set_counts: Tuple[int, ...],
    enforce_bounds: bool,
    cut_tile_width: Optional[int] = None,
) -> Optional[WidthLayout]:
    """Build the layout for one width, or None if its overhangs do not fit."""
    total_width = geometry.total_widths[index]
    overhangs = _fit_overhangs(geometry, total_width, tiled_width, enforce_bounds)
    if overhangs is None:
        return None
    overhang_left, overhang_right = overhangs

    pitch = geometry.cover + spacings[0]
    # Leading tile width only counts when the leading tile is laid
    first_mark = (
        geometry.leading_width
        + pitch * (geometry.set_size - 1)
        - (geometry.overhang_left - overhang_left)
    )
    second_mark = None
    if geometry.request.cross_bonded:
        second_mark = round_half_up(first_mark + pitch / 2)

    return WidthLayout(
        width=geometry.request.widths[index],
        total_width=total_width,
        tiled_width=tiled_width,
        overhang_left=overhang_left,
        overhang_right=overhang_right,
        first_mark=round_half_up(first_mark),
        second_mark=second_mark,
        spacings=spacings,
        set_counts=set_counts,
        mark_increments=tuple(geometry.mark_increment(s) for s in spacings),
        cut_tile_width=cut_tile_width,
    )


def _make_layout(
    geometry: CourseGeometry,
    tier: SolutionTier,
    tiles_wide: int,
    widths: List[WidthLayout],
    group_sizes: Optional[Tuple[int, int]] = None,
    warning: Optional[str] = None,
) -> HorizontalLayout:
    request = geometry.request
    return HorizontalLayout(
        tier=tier,
        warning=warning,
        tiles_wide=tiles_wide,
        set_size=geometry.set_size,
        group_sizes=group_sizes,
        widths=tuple(widths),
        show_overhangs=(
            not request.use_dry_verge and request.abutment_side is AbutmentSide.NONE
        ),
        cross_bonded=request.cross_bonded,
    )


def solve_even_sets(geometry: CourseGeometry) -> Optional[HorizontalLayout]:
    """Find the smallest tile count with one uniform spacing for every width.

    A tile count is rejected when its spacing is outside tolerance or when
    any width in the batch cannot keep its overhangs inside the verge
    tolerance; the search then moves on to the next count.
    """
    request = geometry.request
    for tiles_wide in range(geometry.min_tile_count, geometry.max_tile_count + 1):
        regular = geometry.regular_tiles(tiles_wide)
        if regular <= 0:
            continue

        pitch = math.floor(geometry.remaining_width / regular)
        spacing = pitch - geometry.cover
        if not within(spacing, request.min_spacing, request.max_spacing):
            logger.trace(f"{tiles_wide} tiles: spacing {spacing}mm outside tolerance")
            continue

        tiled_width = regular * pitch + geometry.leading_width
        set_counts = (geometry.total_sets(tiles_wide),)
        widths = [
            _realize_width(geometry, i, tiled_width, (spacing,), set_counts, True)
            for i in range(len(geometry.total_widths))
        ]
        if any(w is None for w in widths):
            logger.trace(f"{tiles_wide} tiles: overhangs out of tolerance on a width")
            continue

        logger.debug(f"Even sets: {tiles_wide} tiles at {spacing}mm spacing")
        return _make_layout(geometry, SolutionTier.FULL, tiles_wide, widths)

    return None


def _split_spacings(
    geometry: CourseGeometry,
    total_width: float,
    tiles_wide: int,
    first_gaps: int,
    second_gaps: int,
) -> Tuple[float, float]:
    """Spacings of the two groups for one width.

    The first group sits at maximum spacing and the second takes up the
    rest. When the second group would drop below the middle of the
    tolerance band, both groups fall back to one uniform spacing.
    """
    request = geometry.request
    base = geometry.base_tiled_width(tiles_wide)

    spacing1 = request.max_spacing
    spacing2 = round_clamp(
        (total_width - (base + first_gaps * spacing1)) / second_gaps,
        request.min_spacing,
        request.max_spacing,
    )
    if spacing2 < (request.min_spacing + request.max_spacing) / 2:
        uniform = round_clamp(
            (total_width - base) / (tiles_wide - 1),
            request.min_spacing,
            request.max_spacing,
        )
        spacing1 = spacing2 = uniform
    return spacing1, spacing2


def solve_split_sets(geometry: CourseGeometry) -> Optional[HorizontalLayout]:
    """Split the gaps of the last tried tile count into two spacing groups."""
    tiles_wide = geometry.last_tile_count
    base = geometry.base_tiled_width(tiles_wide)

    for first_gaps in range(1, tiles_wide - 1):
        second_gaps = tiles_wide - 1 - first_gaps
        set_counts = (
            first_gaps // geometry.set_size,
            second_gaps // geometry.set_size,
        )

        widths = []
        for i, total_width in enumerate(geometry.total_widths):
            spacings = _split_spacings(
                geometry, total_width, tiles_wide, first_gaps, second_gaps
            )
            tiled_width = base + first_gaps * spacings[0] + second_gaps * spacings[1]
            widths.append(
                _realize_width(geometry, i, tiled_width, spacings, set_counts, True)
            )

        if any(w is None for w in widths):
            logger.trace(f"Split {first_gaps}/{second_gaps}: overhangs out of tolerance")
            continue

        logger.debug(f"Split sets: {tiles_wide} tiles, groups {first_gaps}/{second_gaps}")
        return _make_layout(
            geometry,
            SolutionTier.SPLIT,
            tiles_wide,
            widths,
            group_sizes=(first_gaps, second_gaps),
        )

    return None


def solve_cut_course(geometry: CourseGeometry) -> Optional[HorizontalLayout]:
    """Lay the last tried tile count at maximum spacing and cut the final tile.

    Spacing shrinks towards the minimum when the course would overrun the
    widest width. A cut tile narrower than both half a tile and the
    configured floor is enlarged by re-deriving the spacing. Overhangs are
    clamped but not re-validated: this strategy always returns a layout.

    Raises:
        UnsolvableLayoutError: If no tile count fits the spacing range
    """
    request = geometry.request
    tiles_wide = geometry.last_tile_count
    if tiles_wide < 1:
        raise UnsolvableLayoutError(
            "Unable to compute a horizontal solution: no tile count fits the "
            f"spacing range {request.min_spacing}-{request.max_spacing}mm. "
            "Check the tile cover width and spacing tolerances."
        )

    max_total = geometry.max_total_width
    base = geometry.base_tiled_width(tiles_wide)
    gaps = tiles_wide - 1
    divisor = gaps if gaps > 0 else 1
    end_tile = geometry.leading_width if request.use_lh_tile else geometry.cover

    spacing = request.max_spacing
    tiled_width = base + gaps * spacing
    if tiled_width > max_total:
        reduction = (tiled_width - max_total) / divisor
        spacing = round_half_up(max(request.max_spacing - reduction, request.min_spacing))
        tiled_width = base + gaps * spacing

    cut_width = max_total - gaps * (geometry.cover + spacing) - end_tile

    half_tile = geometry.cover / 2
    cut_floor = get_roofing_param("min_cut_tile_width")
    if cut_width < half_tile and cut_width < cut_floor:
        target_cut = max(half_tile, cut_floor)
        spacing = round_clamp(
            (max_total - target_cut - base) / divisor,
            request.min_spacing,
            request.max_spacing,
        )
        tiled_width = base + gaps * spacing
        cut_width = max_total - tiled_width

    cut_width = round_half_up(cut_width)

    course_width = gaps * (geometry.cover + spacing) + end_tile + cut_width
    set_counts = (geometry.total_sets(tiles_wide),)
    widths = [
        _realize_width(
            geometry, i, course_width, (spacing,), set_counts, False,
            cut_tile_width=cut_width,
        )
        for i in range(len(geometry.total_widths))
    ]

    warning = None
    # A zero cut means the full tiles already fill the widest width
    if 0 < cut_width < half_tile and cut_width < cut_floor:
        warning = (
            f"Cut tile ({cut_width}mm) is narrower than half a tile and below the "
            f"minimum cut of {cut_floor}mm. Consider adjusting the roof width or "
            "tile specifications."
        )

    logger.debug(f"Cut course: {tiles_wide} tiles at {spacing}mm, cut tile {cut_width}mm")
    return _make_layout(geometry, SolutionTier.CUT, tiles_wide, widths, warning=warning)


CourseStrategy = Callable[[CourseGeometry], Optional[HorizontalLayout]]

# Tried in order; the first strategy to return a layout wins
COURSE_STRATEGIES: Tuple[Tuple[SolutionTier, CourseStrategy], ...] = (
    (SolutionTier.FULL, solve_even_sets),
    (SolutionTier.SPLIT, solve_split_sets),
    (SolutionTier.CUT, solve_cut_course),
)


def solve_horizontal(request: HorizontalRequest) -> HorizontalLayout:
    """Compute the tile course layout for a batch of roof widths.

    Args:
        request: Horizontal request; widths must be non-empty and >= 500mm

    Returns:
        HorizontalLayout from the first strategy that succeeds

    Raises:
        InputValidationError: If the width batch is invalid
        UnsolvableLayoutError: If the tolerances admit no layout at all
    """
    request.validate()
    geometry = build_course_geometry(request)
    logger.info(
        f"Solving horizontal layout for {len(geometry.total_widths)} width(s), "
        f"tile counts {geometry.min_tile_count}-{geometry.max_tile_count}"
    )

    for tier, strategy in COURSE_STRATEGIES:
        layout = strategy(geometry)
        if layout is not None:
            logger.info(f"Horizontal layout solved: {layout.label}")
            if layout.warning:
                logger.warning(layout.warning)
            return layout
        logger.debug(f"No {tier.value} horizontal layout")

    raise UnsolvableLayoutError(
        "Unable to compute a horizontal solution. Please check your inputs: ensure "
        "widths are valid and tile specifications (tile cover width, min/max "
        "spacing) are appropriate."
    )
