# File: src/roof_layout/horizontal/course_layout.py

"""Result records for horizontal tile course layout.

A course layout is shared by every width in a request: the tile count,
bond set size and (for split layouts) the group sizes are the same, while
each width gets its own overhangs, spacings and marks.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.layout_result import HORIZONTAL_TIER_LABELS, LayoutResult, SolutionTier


@dataclass(frozen=True)
class WidthLayout:
    """Realized layout for one roof width.

    Spacing, set and increment tuples hold one entry for even and cut
    layouts, and two entries (first group, second group) for split layouts.

    Attributes:
        width: Input roof width
        total_width: Width to cover including overhangs, less abutment reduction
        tiled_width: Width covered by the tiles as laid
        overhang_left: Overhang past the left verge (0 at an abutment)
        overhang_right: Overhang past the right verge (0 at an abutment)
        first_mark: Distance to the first bond mark
        second_mark: Cross-bond mark, half a pitch on from the first
        spacings: Gap between tiles per group
        set_counts: Number of bond sets per group
        mark_increments: Distance between bond marks per group
        cut_tile_width: Width of the cut tile (cut layouts only)
    """

    width: float
    total_width: float
    tiled_width: float
    overhang_left: int
    overhang_right: int
    first_mark: int
    second_mark: Optional[int]
    spacings: Tuple[float, ...]
    set_counts: Tuple[int, ...]
    mark_increments: Tuple[int, ...]
    cut_tile_width: Optional[int] = None

    @property
    def spacing(self) -> float:
        """Spacing of the first (or only) group."""
        return self.spacings[0]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "width": self.width,
            "total_width": self.total_width,
            "tiled_width": self.tiled_width,
            "overhang_left": self.overhang_left,
            "overhang_right": self.overhang_right,
            "first_mark": self.first_mark,
            "second_mark": self.second_mark,
            "spacings": list(self.spacings),
            "set_counts": list(self.set_counts),
            "mark_increments": list(self.mark_increments),
            "cut_tile_width": self.cut_tile_width,
        }


@dataclass(frozen=True)
class HorizontalLayout(LayoutResult):
    """Tile course layout for a batch of roof widths.

    Attributes:
        tiles_wide: Tiles per course, including any leading tile
        set_size: Tiles per bond set (2 or 3)
        group_sizes: Gap counts of the two spacing groups (split layouts only)
        widths: One realized layout per input width, in input order
        show_overhangs: Whether overhangs are reported (standard verge, no abutment)
        cross_bonded: Whether second marks are reported
    """

    tiles_wide: int
    set_size: int
    group_sizes: Optional[Tuple[int, int]]
    widths: Tuple[WidthLayout, ...]
    show_overhangs: bool
    cross_bonded: bool

    @property
    def label(self) -> str:
        return HORIZONTAL_TIER_LABELS[self.tier]

    @property
    def measurement_count(self) -> int:
        return len(self.widths)

    def _marks_text(self, sets: int, increment: int) -> str:
        return f"{sets} sets of {self.set_size} @ {increment}"

    def to_display_dict(self, index: int = 0) -> Dict[str, Any]:
        """Flat display record for one width.

        Args:
            index: Position of the width in the request batch

        Returns:
            Field-labelled record, keys in display order
        """
        self._check_index(index)
        layout = self.widths[index]

        record: Dict[str, Any] = {
            "Width": layout.width,
            "Solution": self.label,
            "New Width": layout.total_width,
        }
        if self.show_overhangs:
            record["LH Overhang"] = layout.overhang_left
            record["RH Overhang"] = layout.overhang_right
        if self.tier is SolutionTier.CUT:
            record["Cut Tile"] = layout.cut_tile_width
        record["1st Mark"] = layout.first_mark
        if self.cross_bonded:
            record["2nd Mark"] = layout.second_mark
        record["Marks"] = self._marks_text(layout.set_counts[-1], layout.mark_increments[-1])
        if self.tier is SolutionTier.SPLIT:
            record["Split Marks"] = self._marks_text(
                layout.set_counts[0], layout.mark_increments[0]
            )
        if self.warning:
            record["Warning"] = self.warning
        return record

    def to_dict(self) -> Dict[str, Any]:
        return {
            "solution": self.label,
            "tier": self.tier.value,
            "tiles_wide": self.tiles_wide,
            "set_size": self.set_size,
            "group_sizes": list(self.group_sizes) if self.group_sizes else None,
            "warning": self.warning,
            "widths": [w.to_dict() for w in self.widths],
        }
