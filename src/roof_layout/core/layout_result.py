# File: src/roof_layout/core/layout_result.py

"""Result types shared by the horizontal and vertical solvers.

Key Types:
    SolutionTier: Which stage of the fallback cascade produced a layout
    LayoutResult: Base for the immutable per-call layout records
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class SolutionTier(Enum):
    """Stage of the fallback cascade that produced a layout."""

    FULL = "full"
    """One uniform spacing or gauge across the whole run."""

    SPLIT = "split"
    """Two groups, each with its own spacing or gauge."""

    CUT = "cut"
    """Maximum spacing or gauge with a single cut course taking up the rest."""


HORIZONTAL_TIER_LABELS: Dict[SolutionTier, str] = {
    SolutionTier.FULL: "Even Sets",
    SolutionTier.SPLIT: "Split Sets",
    SolutionTier.CUT: "Cut Course",
}

VERTICAL_TIER_LABELS: Dict[SolutionTier, str] = {
    SolutionTier.FULL: "Full Courses",
    SolutionTier.SPLIT: "Split Gauge",
    SolutionTier.CUT: "Cut Course",
}


def join_warnings(*messages: Optional[str]) -> Optional[str]:
    """Join advisory messages with spaces, dropping empty ones."""
    parts = [m for m in messages if m]
    return " ".join(parts) if parts else None


@dataclass(frozen=True)
class LayoutResult(ABC):
    """Common part of every layout result.

    Attributes:
        tier: Cascade stage that produced the layout
        warning: Advisory text for the estimator, or None
    """

    tier: SolutionTier
    warning: Optional[str]

    @property
    @abstractmethod
    def label(self) -> str:
        """Display name of the solution tier."""
        pass

    @property
    @abstractmethod
    def measurement_count(self) -> int:
        pass

    @abstractmethod
    def to_display_dict(self, index: int = 0) -> Dict[str, Any]:
        """Flat, field-labelled record for one measurement."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert the whole result to a dictionary for JSON serialization."""
        pass

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.measurement_count:
            raise IndexError(
                f"Measurement index {index} out of range for "
                f"{self.measurement_count} measurement(s)"
            )
