# File: tests/core/test_layout_result.py
"""Unit tests for the shared layout result types."""

import pytest

from roof_layout.core.layout_result import (
    HORIZONTAL_TIER_LABELS,
    LayoutResult,
    VERTICAL_TIER_LABELS,
    SolutionTier,
    join_warnings,
)
from roof_layout.horizontal import solve_horizontal


class TestSolutionTier:
    """Tests for tier tags and display names."""

    def test_values(self):
        assert [t.value for t in SolutionTier] == ["full", "split", "cut"]

    def test_every_tier_has_labels(self):
        for tier in SolutionTier:
            assert tier in HORIZONTAL_TIER_LABELS
            assert tier in VERTICAL_TIER_LABELS

    def test_labels(self):
        assert HORIZONTAL_TIER_LABELS[SolutionTier.FULL] == "Even Sets"
        assert VERTICAL_TIER_LABELS[SolutionTier.SPLIT] == "Split Gauge"
        assert HORIZONTAL_TIER_LABELS[SolutionTier.CUT] == "Cut Course"
        assert VERTICAL_TIER_LABELS[SolutionTier.CUT] == "Cut Course"


class TestJoinWarnings:
    """Tests for join_warnings."""

    def test_drops_empty_messages(self):
        assert join_warnings(None, "A.", "", "B.") == "A. B."

    def test_nothing_to_report(self):
        assert join_warnings() is None
        assert join_warnings(None, "") is None


class TestLayoutResult:
    """Tests for behaviour every layout result shares."""

    def test_result_is_immutable(self, horizontal_request):
        layout = solve_horizontal(horizontal_request)
        with pytest.raises(AttributeError):
            layout.tier = SolutionTier.CUT

    def test_display_index_out_of_range(self, horizontal_request):
        layout = solve_horizontal(horizontal_request)
        with pytest.raises(IndexError):
            layout.to_display_dict(1)

    def test_base_cannot_be_instantiated(self):
        """Only the horizontal and vertical results are concrete."""
        with pytest.raises(TypeError):
            LayoutResult(tier=SolutionTier.FULL, warning=None)

    def test_concrete_results_are_layout_results(self, horizontal_request):
        layout = solve_horizontal(horizontal_request)
        assert isinstance(layout, LayoutResult)
        assert layout.measurement_count == 1
