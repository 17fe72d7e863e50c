# File: tests/horizontal/test_horizontal_config.py
"""Unit tests for the horizontal request record."""

import pytest

from roof_layout.config import AbutmentSide
from roof_layout.core.errors import InputValidationError
from roof_layout.horizontal import HorizontalRequest


class TestHorizontalRequest:
    """Tests for HorizontalRequest."""

    def test_default_values(self):
        request = HorizontalRequest(widths=[3000])
        assert request.tile_cover_width == 300
        assert request.abutment_side is AbutmentSide.NONE
        assert request.use_dry_verge is False
        assert request.use_lh_tile is False
        assert request.cross_bonded is False

    def test_form_strings_converted(self):
        """YES/NO strings become flags and the abutment string an enum."""
        request = HorizontalRequest(
            widths=[3000],
            use_dry_verge="YES",
            abutment_side="left",
            use_lh_tile="no",
            cross_bonded="Yes",
        )
        assert request.use_dry_verge is True
        assert request.abutment_side is AbutmentSide.LEFT
        assert request.use_lh_tile is False
        assert request.cross_bonded is True

    def test_invalid_abutment_raises(self):
        with pytest.raises(ValueError):
            HorizontalRequest(widths=[3000], abutment_side="TOP")

    def test_validate_rejects_small_width(self):
        request = HorizontalRequest(widths=[3000, 400], min_spacing=10, max_spacing=40)
        with pytest.raises(InputValidationError) as exc_info:
            request.validate()
        assert exc_info.value.values == [400]

    def test_validate_rejects_empty_batch(self):
        with pytest.raises(InputValidationError):
            HorizontalRequest(widths=[]).validate()

    def test_abutment_disables_dry_verge_and_leading_tile(self):
        request = HorizontalRequest(
            widths=[3000],
            use_dry_verge=True,
            use_lh_tile=True,
            lh_tile_width=200,
            abutment_side="RIGHT",
        )
        normalized = request.normalized()
        assert normalized.use_dry_verge is False
        assert normalized.use_lh_tile is False
        assert normalized.leading_tile_width == 0
        # The caller's request is left alone
        assert request.use_dry_verge is True

    def test_no_abutment_keeps_options(self):
        request = HorizontalRequest(widths=[3000], use_dry_verge=True)
        assert request.normalized() is request

    def test_leading_tile_width_only_when_used(self):
        assert HorizontalRequest(widths=[3000], lh_tile_width=200).leading_tile_width == 0
        request = HorizontalRequest(widths=[3000], use_lh_tile=True, lh_tile_width=200)
        assert request.leading_tile_width == 200

    def test_to_dict_uses_form_fields(self):
        request = HorizontalRequest(
            widths=[3000, 2950],
            min_spacing=10,
            max_spacing=40,
            use_dry_verge=True,
            abutment_side="BOTH",
        )
        data = request.to_dict()
        assert data["widths"] == [3000, 2950]
        assert data["tileCoverWidth"] == 300
        assert data["useDryVerge"] == "YES"
        assert data["abutmentSide"] == "BOTH"
        assert data["useLHTile"] == "NO"

    def test_from_dict(self):
        request = HorizontalRequest.from_dict({
            "widths": [3000],
            "tileCoverWidth": 330,
            "minSpacing": 5,
            "maxSpacing": 15,
            "useLHTile": "YES",
            "lhTileWidth": 200,
        })
        assert request.tile_cover_width == 330
        assert request.use_lh_tile is True
        assert request.lh_tile_width == 200
        assert HorizontalRequest.from_dict(request.to_dict()) == request
