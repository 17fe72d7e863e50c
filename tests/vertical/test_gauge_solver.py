# File: tests/vertical/test_gauge_solver.py
"""Unit tests for the vertical batten gauge solver."""

import pytest

from roof_layout.config import MaterialType, get_roofing_param
from roof_layout.core.errors import InputValidationError, UnsolvableLayoutError
from roof_layout.core.layout_result import SolutionTier
from roof_layout.vertical import (
    BATTEN_STRATEGIES,
    RafterLayout,
    VerticalLayout,
    VerticalRequest,
    build_batten_geometry,
    gauge_warnings,
    solve_full_courses,
    solve_split_gauge,
    solve_vertical,
)


def make_request(rafter_heights, **kwargs):
    """Build a plain tile request with a 200mm first batten unless told otherwise."""
    params = dict(
        gutter_overhang=50,
        material_type="Plain Tile",
        slate_tile_height=265,
        min_gauge=280,
        max_gauge=345,
    )
    params.update(kwargs)
    return VerticalRequest(rafter_heights=list(rafter_heights), **params)


class TestBattenGeometry:
    """Tests for build_batten_geometry."""

    def test_plain_tile(self, plain_tile_request):
        geometry = build_batten_geometry(plain_tile_request)
        assert geometry.first_batten == 200
        assert geometry.eave_batten == 135
        assert geometry.under_eave_batten is None
        assert geometry.min_courses == 8
        assert geometry.max_courses == 9

    def test_slate_first_batten(self):
        geometry = build_batten_geometry(make_request(
            [4000], material_type="Slate", slate_tile_height=500,
            min_gauge=200, max_gauge=230,
        ))
        assert geometry.first_batten == 475
        assert geometry.eave_batten == 245
        assert geometry.under_eave_batten is None

    def test_fibre_cement_under_eave_batten(self):
        geometry = build_batten_geometry(make_request(
            [4000], material_type="Fibre Cement Slate", slate_tile_height=500,
            min_gauge=200, max_gauge=230,
        ))
        assert geometry.first_batten == 475
        assert geometry.eave_batten == 245
        assert geometry.under_eave_batten == 125

    def test_other_material_first_batten(self):
        geometry = build_batten_geometry(make_request(
            [3000], material_type="Concrete Interlocking", slate_tile_height=420,
            min_gauge=310,
        ))
        assert geometry.first_batten == 345

    def test_dry_ridge_raises_minimum_offset(self):
        geometry = build_batten_geometry(make_request([2500], use_dry_ridge="YES"))
        assert geometry.ridge_offset_min == 40
        assert geometry.ridge_offset_max == 65

    def test_non_positive_gauge_raises(self):
        with pytest.raises(UnsolvableLayoutError):
            build_batten_geometry(make_request([2500], min_gauge=0))


class TestFullCourses:
    """Tests for the single-gauge strategy."""

    def test_plain_tile(self, plain_tile_request):
        layout = solve_vertical(plain_tile_request)
        assert layout.tier is SolutionTier.FULL
        assert layout.total_courses == 8
        assert layout.warning is None

        rafter = layout.rafters[0]
        assert rafter.gauge == 325
        assert rafter.ridge_offset == 25
        assert rafter.reconstructed_height == 2500

    def test_display_record(self, plain_tile_request):
        record = solve_vertical(plain_tile_request).to_display_dict(0)
        assert record == {
            "Input Rafter": 2500,
            "Total Courses": 8,
            "Solution": "Full Courses",
            "Ridge Offset": 25,
            "Eave Batten": 135,
            "1st Batten": 200,
            "Gauge": "7 @ 325",
        }

    def test_maximum_offset_anchor(self):
        """Seventeen courses miss at both anchors; eighteen fit from the top."""
        layout = solve_vertical(make_request(
            [4000], material_type="Fibre Cement Slate", slate_tile_height=500,
            min_gauge=200, max_gauge=230,
        ))
        assert layout.tier is SolutionTier.FULL
        assert layout.total_courses == 18
        assert layout.rafters[0].gauge == 204
        assert layout.rafters[0].ridge_offset == 57

    def test_fibre_cement_display_record(self):
        record = solve_vertical(make_request(
            [4000], material_type="Fibre Cement Slate", slate_tile_height=500,
            min_gauge=200, max_gauge=230,
        )).to_display_dict()
        assert record == {
            "Input Rafter": 4000,
            "Total Courses": 18,
            "Solution": "Full Courses",
            "Ridge Offset": 57,
            "Under Eave Batten": 125,
            "Eave Batten": 245,
            "1st Batten": 475,
            "Gauge": "17 @ 204",
        }

    def test_other_material_hides_eave_batten(self):
        layout = solve_vertical(make_request(
            [3000], material_type="Concrete Interlocking", slate_tile_height=420,
            min_gauge=310,
        ))
        assert layout.tier is SolutionTier.FULL
        assert layout.total_courses == 9
        assert layout.eave_batten is None
        record = layout.to_display_dict()
        assert "Eave Batten" not in record
        assert "Under Eave Batten" not in record
        assert record["Ridge Offset"] == 63
        assert record["Gauge"] == "8 @ 324"

    def test_dry_ridge(self):
        layout = solve_vertical(make_request([2500], use_dry_ridge=True))
        assert layout.tier is SolutionTier.FULL
        assert layout.total_courses == 9
        assert layout.rafters[0].gauge == 280
        assert layout.rafters[0].ridge_offset == 60

    def test_ridge_offsets_within_tolerance(self):
        layout = solve_vertical(make_request([2500, 2600, 2550]))
        assert layout.tier is SolutionTier.FULL
        for rafter in layout.rafters:
            assert 25 <= rafter.ridge_offset <= 65
            assert 280 <= rafter.gauge <= 345

    def test_wider_gauge_range_stays_full(self):
        """Widening the gauge range never loses a full-course solution."""
        for max_gauge in (345, 360, 400, 450):
            layout = solve_vertical(make_request([2500], max_gauge=max_gauge))
            assert layout.tier is SolutionTier.FULL


class TestSplitGauge:
    """Tests for the two-gauge strategy."""

    def test_batch_falls_back_to_split(self):
        request = make_request([2506, 2455])
        geometry = build_batten_geometry(request)
        assert solve_full_courses(geometry) is None

        layout = solve_vertical(request)
        assert layout.tier is SolutionTier.SPLIT
        assert layout.total_courses == 9
        assert layout.group_sizes == (2, 5)

        first, second = layout.rafters
        assert first.gauges == (345, 318)
        assert first.ridge_offset == 26
        assert second.gauges == (345, 308)
        assert second.ridge_offset == 25
        assert first.reconstructed_height == 2506
        assert second.reconstructed_height == 2455

    def test_split_display_record(self):
        layout = solve_vertical(make_request([2506, 2455]))
        assert layout.to_display_dict(0) == {
            "Input Rafter": 2506,
            "Total Courses": 9,
            "Solution": "Split Gauge",
            "Ridge Offset": 26,
            "Eave Batten": 135,
            "1st Batten": 200,
            "Gauge": "2 @ 345",
            "Split Gauge": "5 @ 318",
        }
        assert layout.to_display_dict(1)["Split Gauge"] == "5 @ 308"


class TestCutCourse:
    """Tests for the cut-course strategy."""

    def test_fixed_gauge_cuts_last_course(self):
        request = make_request([2500], min_gauge=300, max_gauge=300)
        geometry = build_batten_geometry(request)
        assert solve_full_courses(geometry) is None
        assert solve_split_gauge(geometry) is None

        layout = solve_vertical(request)
        assert layout.tier is SolutionTier.CUT
        assert layout.full_courses == 7
        assert layout.total_courses == 8
        assert layout.warning is None

        rafter = layout.rafters[0]
        assert rafter.cut_course == 175
        assert rafter.ridge_offset == 25
        assert rafter.gauges == (300,)

    def test_cut_display_record(self):
        record = solve_vertical(
            make_request([2500], min_gauge=300, max_gauge=300)
        ).to_display_dict()
        assert record == {
            "Input Rafter": 2500,
            "Total Courses": 8,
            "Solution": "Cut Course",
            "Ridge Offset": 25,
            "Eave Batten": 135,
            "1st Batten": 200,
            "Cut Course": 175,
            "Gauge": "7 @ 300",
        }

    def test_short_cut_course_warns(self):
        layout = solve_vertical(make_request([2375], min_gauge=300, max_gauge=300))
        assert layout.tier is SolutionTier.CUT
        assert layout.rafters[0].cut_course == 50
        assert "below the minimum threshold (75mm)" in layout.warning
        assert layout.to_display_dict()["Warning"] == layout.warning

    def test_batch_with_overrun_cut_course(self):
        """The shorter rafter cannot fit all seven full courses, so its cut is negative."""
        layout = solve_vertical(make_request([2500, 2300], min_gauge=300, max_gauge=300))
        assert layout.tier is SolutionTier.CUT
        assert layout.full_courses == 7
        assert layout.total_courses == 8

        tall, short = layout.rafters
        assert tall.cut_course == 175
        assert short.cut_course == -25
        assert tall.ridge_offset == short.ridge_offset == 25
        assert tall.reconstructed_height == 2500
        assert short.reconstructed_height == 2300
        assert "below the minimum threshold (75mm)" in layout.warning
        assert layout.to_display_dict(1)["Cut Course"] == -25

    def test_first_batten_above_ridge_raises(self):
        request = make_request(
            [600], material_type="Slate", gutter_overhang=0, slate_tile_height=1000,
        )
        with pytest.raises(UnsolvableLayoutError):
            solve_vertical(request)


class TestGaugeWarnings:
    """Tests for gauge_warnings."""

    def _layout(self, rafter):
        return VerticalLayout(
            tier=SolutionTier.FULL,
            warning=None,
            total_courses=8,
            material_type=MaterialType.PLAIN_TILE,
            first_batten=200,
            eave_batten=135,
            under_eave_batten=None,
            group_sizes=None,
            full_courses=None,
            rafters=(rafter,),
        )

    def test_nothing_to_report(self):
        rafter = RafterLayout(2500, (325,), 25, 2500)
        assert gauge_warnings(self._layout(rafter)) is None

    def test_height_within_tolerance(self):
        tolerance = get_roofing_param("height_tolerance")
        rafter = RafterLayout(2500, (325,), 25, 2500 - tolerance)
        assert gauge_warnings(self._layout(rafter)) is None

    def test_short_gauge_and_height_mismatch(self):
        rafter = RafterLayout(2500, (60,), 25, 2490)
        warning = gauge_warnings(self._layout(rafter))
        assert warning.startswith("Batten gauge or cut course is below the minimum threshold")
        assert (
            "Computed total (2490mm) for rafter 1 differs from rafter height (2500mm) "
            "by 10mm, exceeding tolerance of 3mm."
        ) in warning


class TestSolveVertical:
    """Tests for the solver entry point."""

    def test_strategy_order(self):
        assert [tier for tier, _ in BATTEN_STRATEGIES] == [
            SolutionTier.FULL,
            SolutionTier.SPLIT,
            SolutionTier.CUT,
        ]

    def test_small_rafter_rejected(self):
        with pytest.raises(InputValidationError) as exc_info:
            solve_vertical(make_request([2500, 400]))
        assert exc_info.value.values == [400]

    def test_empty_batch_rejected(self):
        with pytest.raises(InputValidationError):
            solve_vertical(make_request([]))

    def test_repeatable(self):
        request = make_request([2506, 2455])
        assert solve_vertical(request) == solve_vertical(request)

    def test_to_dict(self, plain_tile_request):
        data = solve_vertical(plain_tile_request).to_dict()
        assert data["solution"] == "Full Courses"
        assert data["tier"] == "full"
        assert data["material_type"] == "Plain Tile"
        assert data["rafters"][0]["gauges"] == [325]
        assert data["rafters"][0]["cut_course"] is None
