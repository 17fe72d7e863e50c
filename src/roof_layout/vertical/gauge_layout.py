# File: src/roof_layout/vertical/gauge_layout.py

"""Result records for vertical batten gauge layout."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..config.roofing import MaterialType
from ..core.layout_result import VERTICAL_TIER_LABELS, LayoutResult, SolutionTier


@dataclass(frozen=True)
class RafterLayout:
    """Realized batten layout for one rafter.

    Attributes:
        rafter_height: Input rafter height
        gauges: Gauge per group; one entry for full and cut layouts (the cut
            layout repeats the maximum gauge), two for split layouts
        ridge_offset: Distance from the top batten to the ridge
        reconstructed_height: First batten plus courses plus ridge offset
        cut_course: Height of the cut course (cut layouts only)
    """

    rafter_height: float
    gauges: Tuple[float, ...]
    ridge_offset: float
    reconstructed_height: float
    cut_course: Optional[int] = None

    @property
    def gauge(self) -> float:
        return self.gauges[0]

    @property
    def height_difference(self) -> float:
        return abs(self.rafter_height - self.reconstructed_height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rafter_height": self.rafter_height,
            "gauges": list(self.gauges),
            "ridge_offset": self.ridge_offset,
            "reconstructed_height": self.reconstructed_height,
            "cut_course": self.cut_course,
        }


@dataclass(frozen=True)
class VerticalLayout(LayoutResult):
    """Batten gauge layout for a batch of rafters.

    Attributes:
        total_courses: Courses up the rafter, counting the first batten
        material_type: Roof covering the battens were set out for
        first_batten: Height of the first batten
        eave_batten: Height of the eave batten, if the material reports one
        under_eave_batten: Height of the under-eave batten (fibre cement slate)
        group_sizes: Gauge counts of the two groups (split layouts only)
        full_courses: Courses at maximum gauge below the cut (cut layouts only)
        rafters: One realized layout per input rafter, in input order
    """

    total_courses: int
    material_type: MaterialType
    first_batten: float
    eave_batten: Optional[float]
    under_eave_batten: Optional[float]
    group_sizes: Optional[Tuple[int, int]]
    full_courses: Optional[int]
    rafters: Tuple[RafterLayout, ...]

    @property
    def label(self) -> str:
        return VERTICAL_TIER_LABELS[self.tier]

    @property
    def measurement_count(self) -> int:
        return len(self.rafters)

    @property
    def gauge_count(self) -> int:
        """Number of gauges reported against the first gauge value."""
        if self.tier is SolutionTier.CUT:
            return self.full_courses
        if self.tier is SolutionTier.SPLIT:
            return self.group_sizes[0]
        return self.total_courses - 1

    def to_display_dict(self, index: int = 0) -> Dict[str, Any]:
        """Flat display record for one rafter.

        Args:
            index: Position of the rafter in the request batch

        Returns:
            Field-labelled record, keys in display order
        """
        self._check_index(index)
        rafter = self.rafters[index]

        record: Dict[str, Any] = {
            "Input Rafter": rafter.rafter_height,
            "Total Courses": self.total_courses,
            "Solution": self.label,
            "Ridge Offset": rafter.ridge_offset,
        }
        if self.under_eave_batten is not None:
            record["Under Eave Batten"] = self.under_eave_batten
        if self.eave_batten is not None:
            record["Eave Batten"] = self.eave_batten
        record["1st Batten"] = self.first_batten
        if self.tier is SolutionTier.CUT:
            record["Cut Course"] = rafter.cut_course
        record["Gauge"] = f"{self.gauge_count} @ {rafter.gauges[0]}"
        if self.tier is SolutionTier.SPLIT:
            record["Split Gauge"] = f"{self.group_sizes[1]} @ {rafter.gauges[1]}"
        if self.warning:
            record["Warning"] = self.warning
        return record

    def to_dict(self) -> Dict[str, Any]:
        return {
            "solution": self.label,
            "tier": self.tier.value,
            "total_courses": self.total_courses,
            "material_type": self.material_type.value,
            "first_batten": self.first_batten,
            "eave_batten": self.eave_batten,
            "under_eave_batten": self.under_eave_batten,
            "group_sizes": list(self.group_sizes) if self.group_sizes else None,
            "full_courses": self.full_courses,
            "warning": self.warning,
            "rafters": [r.to_dict() for r in self.rafters],
        }
