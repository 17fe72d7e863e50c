# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from roof_layout.horizontal import HorizontalRequest
from roof_layout.vertical import VerticalRequest


@pytest.fixture
def horizontal_request():
    """A single 3000mm width with 300mm tiles at 10-40mm spacing."""
    return HorizontalRequest(
        widths=[3000],
        tile_cover_width=300,
        min_spacing=10,
        max_spacing=40,
    )


@pytest.fixture
def plain_tile_request():
    """A single 2500mm plain tile rafter with a 200mm first batten."""
    return VerticalRequest(
        rafter_heights=[2500],
        gutter_overhang=50,
        material_type="Plain Tile",
        slate_tile_height=265,
        min_gauge=280,
        max_gauge=345,
    )
