# File: tests/vertical/test_vertical_config.py
"""Unit tests for the vertical request record."""

import pytest

from roof_layout.config import MaterialType
from roof_layout.core.errors import InputValidationError
from roof_layout.vertical import VerticalRequest


class TestVerticalRequest:
    """Tests for VerticalRequest."""

    def test_material_string_converted(self, plain_tile_request):
        assert plain_tile_request.material_type is MaterialType.PLAIN_TILE

    def test_unknown_material_is_other(self):
        request = VerticalRequest(rafter_heights=[3000], material_type="Concrete Interlocking")
        assert request.material_type is MaterialType.OTHER

    def test_dry_ridge_flag(self):
        assert VerticalRequest(rafter_heights=[3000], use_dry_ridge="YES").use_dry_ridge is True
        assert VerticalRequest(rafter_heights=[3000], use_dry_ridge="NO").use_dry_ridge is False

    def test_max_rafter_height(self):
        request = VerticalRequest(rafter_heights=[2500, 3100, 2800])
        assert request.max_rafter_height == 3100

    def test_validate_rejects_small_rafter(self):
        request = VerticalRequest(rafter_heights=[400])
        with pytest.raises(InputValidationError) as exc_info:
            request.validate()
        assert exc_info.value.field == "rafter_heights"
        assert "Rafter height values must be at least 500mm" in str(exc_info.value)

    def test_validate_rejects_empty_batch(self):
        with pytest.raises(InputValidationError):
            VerticalRequest(rafter_heights=[]).validate()

    def test_to_dict_uses_form_fields(self, plain_tile_request):
        data = plain_tile_request.to_dict()
        assert data == {
            "rafterHeights": [2500],
            "gutterOverhang": 50,
            "materialType": "Plain Tile",
            "slateTileHeight": 265,
            "minGauge": 280,
            "maxGauge": 345,
            "useDryRidge": "NO",
        }

    def test_from_dict(self, plain_tile_request):
        assert VerticalRequest.from_dict(plain_tile_request.to_dict()) == plain_tile_request
